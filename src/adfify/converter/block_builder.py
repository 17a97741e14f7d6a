"""Convert normalized AST tokens to ADF block nodes.

Supported block tokens and their ADF counterparts:

- paragraph (and tight-list text) -> paragraph, dropped when empty
- heading -> heading with ``attrs.level``
- block_code -> codeBlock with optional ``attrs.language``
- list -> bulletList / orderedList of listItem
- block_quote -> blockquote (children converted recursively)

Every other block token is dropped and its type recorded in the
:class:`~adfify.converter.warnings.WarningCollector`.  Siblings of a
dropped token are still converted.
"""

from __future__ import annotations

from collections.abc import Callable as _Callable

from adfify.converter.inline_builder import convert_inline
from adfify.converter.warnings import WarningCollector
from adfify.document import Node, NodeType

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_document(tokens: list[dict], skipped: WarningCollector) -> Node:
    """Convert normalized AST tokens to an ADF ``doc`` node.

    Parameters
    ----------
    tokens:
        List of canonical AST tokens from :class:`ASTNormalizer`.
    skipped:
        Collector receiving the type of every unsupported block token.
    """
    return Node(NodeType.DOC, content=build_blocks(tokens, skipped))


def build_blocks(tokens: list[dict], skipped: WarningCollector) -> list[Node]:
    """Convert a sequence of sibling block tokens."""
    blocks: list[Node] = []
    for token in tokens:
        node = _process_token(token, skipped)
        if node is not None:
            blocks.append(node)
    return blocks


# ---------------------------------------------------------------------------
# Token dispatch
# ---------------------------------------------------------------------------

def _process_token(token: dict, skipped: WarningCollector) -> Node | None:
    token_type = token.get("type", "")
    handler = _BLOCK_HANDLERS.get(token_type)
    if handler is not None:
        return handler(token, skipped)
    skipped.add(token_type or "unknown")
    return None


# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------

def _build_paragraph(token: dict, skipped: WarningCollector) -> Node | None:
    content = convert_inline(token.get("children", []))
    if not content:
        return None
    return Node(NodeType.PARAGRAPH, content=content)


def _build_heading(token: dict, skipped: WarningCollector) -> Node | None:
    content = convert_inline(token.get("children", []))
    if not content:
        return None
    level = token.get("attrs", {}).get("level", 1)
    return Node(NodeType.HEADING, content=content, attrs={"level": level})


def _build_code_block(token: dict, skipped: WarningCollector) -> Node:
    code = token.get("raw", "")
    language = token.get("attrs", {}).get("language")
    # ADF rejects empty text nodes; an empty block keeps empty content.
    content = [Node.text_run(code)] if code else []
    attrs = {"language": language} if language else {}
    return Node(NodeType.CODE_BLOCK, content=content, attrs=attrs)


def _build_list(token: dict, skipped: WarningCollector) -> Node:
    attrs = token.get("attrs", {})
    ordered = attrs.get("ordered", False)
    node_type = NodeType.ORDERED_LIST if ordered else NodeType.BULLET_LIST

    items = [
        Node(NodeType.LIST_ITEM, content=build_blocks(item.get("children", []), skipped))
        for item in token.get("children", [])
        if item.get("type") == "list_item"
    ]

    list_attrs: dict = {}
    start = attrs.get("start", 1)
    if ordered and start != 1:
        list_attrs["order"] = start
    return Node(node_type, content=items, attrs=list_attrs)


def _build_block_quote(token: dict, skipped: WarningCollector) -> Node:
    return Node(
        NodeType.BLOCKQUOTE,
        content=build_blocks(token.get("children", []), skipped),
    )


# ---------------------------------------------------------------------------
# Block handler dispatch table
# ---------------------------------------------------------------------------

_BlockHandler = _Callable[[dict, WarningCollector], "Node | None"]

_BLOCK_HANDLERS: dict[str, _BlockHandler] = {
    "paragraph": _build_paragraph,
    "heading": _build_heading,
    "block_code": _build_code_block,
    "list": _build_list,
    "block_quote": _build_block_quote,
}
