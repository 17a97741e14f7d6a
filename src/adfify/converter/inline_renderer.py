"""Inline rendering: ADF inline nodes to Markdown strings.

Mark combination order, innermost first::

    code | (bold + italic -> ***) | bold -> ** | italic -> *
    then link outermost

A ``code`` mark suppresses bold and italic, since Markdown cannot
express emphasis inside a code span.  Text is emitted verbatim without
escaping, which keeps Markdown -> ADF -> Markdown stable.
"""

from __future__ import annotations

from collections.abc import Iterable

from adfify.converter.warnings import WarningCollector
from adfify.document import AnyNode, Mark, MarkType, Node, NodeType, SkippedNode


def apply_marks(text: str, marks: Iterable[Mark]) -> str:
    """Wrap *text* in the Markdown syntax for *marks*.

    Mark order does not matter: ``(em, strong)`` and ``(strong, em)``
    both render as ``***text***``.

    >>> apply_marks("x", [Mark(MarkType.ITALIC), Mark(MarkType.BOLD)])
    '***x***'
    >>> apply_marks("x", [Mark(MarkType.BOLD), Mark(MarkType.CODE)])
    '`x`'
    """
    kinds: set[MarkType] = set()
    href = ""
    for mark in marks:
        kinds.add(mark.type)
        if mark.type is MarkType.LINK and mark.href:
            href = mark.href

    if MarkType.CODE in kinds:
        result = f"`{text}`"
    elif MarkType.BOLD in kinds and MarkType.ITALIC in kinds:
        result = f"***{text}***"
    elif MarkType.BOLD in kinds:
        result = f"**{text}**"
    elif MarkType.ITALIC in kinds:
        result = f"*{text}*"
    else:
        result = text

    if href:
        result = f"[{result}]({href})"
    return result


def render_inline(nodes: Iterable[AnyNode], skipped: WarningCollector) -> str:
    """Render the inline children of a block to Markdown.

    ``text`` nodes are rendered with their marks and ``hardBreak`` as a
    newline.  Anything else (mentions, emoji, inline cards) is reported
    to *skipped* and contributes nothing.
    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, SkippedNode):
            skipped.add(node.type_name)
            continue

        if node.type is NodeType.HARD_BREAK:
            parts.append("\n")
        elif node.type is NodeType.TEXT:
            text = node.text or ""
            parts.append(apply_marks(text, node.marks) if node.marks else text)
        else:
            skipped.add(node.type.value)

    return "".join(parts)


def plain_text(nodes: Iterable[AnyNode]) -> str:
    """Concatenate the literal text of ``text`` nodes, ignoring marks."""
    return "".join(
        node.text or ""
        for node in nodes
        if isinstance(node, Node) and node.type is NodeType.TEXT
    )
