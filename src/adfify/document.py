"""Typed ADF document model.

The Atlassian Document Format is a JSON tree.  This module gives the
subset adfify understands a closed, typed shape:

* :class:`NodeType` -- every node kind the converter produces or renders.
* :class:`MarkType` / :class:`Mark` -- inline styles attached to text runs.
* :class:`Node` -- a single tree node, serialisable with :meth:`Node.to_dict`.
* :class:`SkippedNode` -- sentinel for node kinds outside :class:`NodeType`.

:func:`node_from_dict` is the deserialization boundary.  JSON numbers
arrive untyped (``2`` vs ``2.0``), marks may be unknown, children may
not be objects at all; all of that is normalised here so the rest of
the pipeline works on a well-formed tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ADF_VERSION = 1

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


class NodeType(str, Enum):
    """ADF node kinds supported by the converter."""

    DOC = "doc"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    CODE_BLOCK = "codeBlock"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    TEXT = "text"
    HARD_BREAK = "hardBreak"


class MarkType(str, Enum):
    """ADF mark kinds supported by the converter."""

    BOLD = "strong"
    ITALIC = "em"
    CODE = "code"
    LINK = "link"


_NODE_TYPES: dict[str, NodeType] = {t.value: t for t in NodeType}
_MARK_TYPES: dict[str, MarkType] = {t.value: t for t in MarkType}

# Node kinds that never carry a ``content`` array.
_LEAF_TYPES: frozenset[NodeType] = frozenset({NodeType.TEXT, NodeType.HARD_BREAK})


@dataclass(frozen=True)
class Mark:
    """An inline style on a text run.

    Marks compare structurally, so two ``Mark(MarkType.LINK, href=...)``
    instances with the same URL are equal.  This is what text-run
    consolidation relies on.
    """

    type: MarkType
    href: str | None = None

    @classmethod
    def link(cls, href: str) -> Mark:
        return cls(MarkType.LINK, href=href)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.type is MarkType.LINK:
            data["attrs"] = {"href": self.href or ""}
        return data


BOLD = Mark(MarkType.BOLD)
ITALIC = Mark(MarkType.ITALIC)
CODE = Mark(MarkType.CODE)


@dataclass
class Node:
    """A node of the ADF tree.

    Attributes
    ----------
    type:
        The node kind.
    content:
        Ordered children.  Unused by ``text`` and ``hardBreak``.
    attrs:
        Kind-specific attributes: ``level`` for headings, ``language``
        for code blocks, ``order`` for ordered lists.
    text:
        The literal run.  Only set on ``text`` nodes.
    marks:
        Ordered inline styles.  Only meaningful on ``text`` nodes.
    """

    type: NodeType
    content: list[AnyNode] = field(default_factory=list)
    attrs: dict[str, Any] = field(default_factory=dict)
    text: str | None = None
    marks: tuple[Mark, ...] = ()

    @classmethod
    def text_run(cls, text: str, marks: tuple[Mark, ...] = ()) -> Node:
        return cls(NodeType.TEXT, text=text, marks=tuple(marks))

    @property
    def is_text(self) -> bool:
        return self.type is NodeType.TEXT

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the ADF JSON shape, omitting absent fields."""
        data: dict[str, Any] = {"type": self.type.value}

        if self.type is NodeType.DOC:
            data["version"] = ADF_VERSION

        if self.type is NodeType.TEXT:
            data["text"] = self.text or ""
            if self.marks:
                data["marks"] = [mark.to_dict() for mark in self.marks]
            return data

        if self.type in _LEAF_TYPES:
            return data

        if self.attrs:
            data["attrs"] = dict(self.attrs)
        data["content"] = [child.to_dict() for child in self.content]
        return data


@dataclass(frozen=True)
class SkippedNode:
    """Placeholder for a node whose kind the converter does not support.

    Only the original ``type`` string is kept; the subtree below it is
    never inspected.
    """

    type_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type_name}


AnyNode = Node | SkippedNode


# ---------------------------------------------------------------------------
# Deserialization
# ---------------------------------------------------------------------------

def node_from_dict(data: Mapping[str, Any]) -> AnyNode:
    """Build a typed node from its JSON form.

    Never raises.  Unknown node kinds come back as :class:`SkippedNode`.
    """
    raw_type = data.get("type")
    type_name = raw_type if isinstance(raw_type, str) else "unknown"
    node_type = _NODE_TYPES.get(type_name)
    if node_type is None:
        return SkippedNode(type_name)

    if node_type is NodeType.TEXT:
        text = data.get("text")
        return Node.text_run(
            text if isinstance(text, str) else "",
            _marks_from_list(data.get("marks")),
        )

    if node_type is NodeType.HARD_BREAK:
        return Node(NodeType.HARD_BREAK)

    return Node(
        node_type,
        content=children_from_list(data.get("content")),
        attrs=_normalize_attrs(node_type, data.get("attrs")),
    )


def children_from_list(items: Any) -> list[AnyNode]:
    """Deserialize a ``content`` array, ignoring non-object entries."""
    if not isinstance(items, list):
        return []
    return [node_from_dict(item) for item in items if isinstance(item, Mapping)]


def normalize_heading_level(value: Any) -> int:
    """Coerce a heading level of any JSON numeric flavour to an int in 1-6.

    >>> normalize_heading_level(2.0)
    2
    >>> normalize_heading_level("3")
    3
    >>> normalize_heading_level(None)
    1
    """
    if isinstance(value, bool):
        return MIN_HEADING_LEVEL
    try:
        level = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return MIN_HEADING_LEVEL
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))


def _normalize_attrs(node_type: NodeType, attrs: Any) -> dict[str, Any]:
    if not isinstance(attrs, Mapping):
        attrs = {}

    if node_type is NodeType.HEADING:
        return {"level": normalize_heading_level(attrs.get("level"))}

    if node_type is NodeType.CODE_BLOCK:
        language = attrs.get("language")
        if isinstance(language, str) and language:
            return {"language": language}
        return {}

    if node_type is NodeType.ORDERED_LIST:
        order = attrs.get("order")
        if isinstance(order, (int, float)) and not isinstance(order, bool):
            try:
                return {"order": max(0, int(order))}
            except (ValueError, OverflowError):
                # NaN and Infinity, which json.loads accepts.
                return {}
        return {}

    return {}


def _marks_from_list(items: Any) -> tuple[Mark, ...]:
    if not isinstance(items, list):
        return ()
    marks: list[Mark] = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        raw_type = item.get("type")
        mark_type = _MARK_TYPES.get(raw_type) if isinstance(raw_type, str) else None
        if mark_type is None:
            continue
        if mark_type is MarkType.LINK:
            attrs = item.get("attrs")
            href = attrs.get("href") if isinstance(attrs, Mapping) else None
            if not isinstance(href, str) or not href:
                continue
            marks.append(Mark.link(href))
        else:
            marks.append(Mark(mark_type))
    return tuple(marks)
