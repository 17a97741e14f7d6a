"""ADF document to Markdown renderer.

Converts an ADF document (the JSON dict returned by the issue-tracker
API, or a :class:`~adfify.document.Node` tree) into GitHub-Flavored
Markdown.

Usage::

    from adfify.converter.adf_to_md import ADFToMarkdownRenderer

    result = ADFToMarkdownRenderer().render(issue["fields"]["description"])
    print(result.markdown)
"""

from __future__ import annotations

from collections.abc import Callable as _Callable
from collections.abc import Mapping
from typing import Any

from adfify.converter.inline_renderer import plain_text, render_inline
from adfify.converter.warnings import WarningCollector
from adfify.document import AnyNode, Node, NodeType, SkippedNode, children_from_list
from adfify.models import RenderResult

BLOCK_SEPARATOR = "\n\n"
QUOTE_PREFIX = "> "
QUOTE_MARKER = ">"


class ADFToMarkdownRenderer:
    """Render ADF documents to Markdown.

    The renderer keeps no state between calls; each :meth:`render` uses
    its own :class:`WarningCollector`, so a single instance can be
    shared across threads.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, document: Mapping[str, Any] | Node | None) -> RenderResult:
        """Render an ADF ``doc`` to Markdown.

        Parameters
        ----------
        document:
            The ADF JSON object, an already-typed ``doc`` node, or ``None``.

        Returns
        -------
        RenderResult
            Markdown with top-level blocks separated by a blank line,
            plus one warning per distinct skipped node type.  Absent or
            empty documents render as ``""`` with no warnings.
        """
        if isinstance(document, Node):
            blocks: list[AnyNode] = list(document.content)
        elif isinstance(document, Mapping):
            blocks = children_from_list(document.get("content"))
        else:
            return RenderResult(markdown="")

        if not blocks:
            return RenderResult(markdown="")

        skipped = WarningCollector()
        markdown = self._render_block_list(blocks, skipped, BLOCK_SEPARATOR)
        return RenderResult(markdown=markdown, warnings=skipped.finish())

    # ------------------------------------------------------------------
    # Internal: dispatch and list iteration
    # ------------------------------------------------------------------

    def _render_block_list(
        self, blocks: list[AnyNode], skipped: WarningCollector, separator: str,
    ) -> str:
        """Render sibling blocks, dropping those that render empty."""
        parts = [self._dispatch(block, skipped) for block in blocks]
        return separator.join(part for part in parts if part)

    def _dispatch(self, node: AnyNode, skipped: WarningCollector) -> str:
        if isinstance(node, SkippedNode):
            skipped.add(node.type_name)
            return ""

        renderer = _BLOCK_RENDERERS.get(node.type)
        if renderer is None:
            skipped.add(node.type.value)
            return ""
        return renderer(self, node, skipped)

    # ------------------------------------------------------------------
    # Block type renderers
    # ------------------------------------------------------------------

    def _render_paragraph(self, node: Node, skipped: WarningCollector) -> str:
        return render_inline(node.content, skipped)

    def _render_heading(self, node: Node, skipped: WarningCollector) -> str:
        level = node.attrs.get("level", 1)
        return "#" * level + " " + render_inline(node.content, skipped)

    def _render_code_block(self, node: Node, skipped: WarningCollector) -> str:
        language = node.attrs.get("language", "")
        return f"```{language}\n{plain_text(node.content)}\n```"

    def _render_bullet_list(self, node: Node, skipped: WarningCollector) -> str:
        return "\n".join(
            f"- {text}" for text in self._render_items(node, skipped)
        )

    def _render_ordered_list(self, node: Node, skipped: WarningCollector) -> str:
        start = node.attrs.get("order", 1)
        return "\n".join(
            f"{number}. {text}"
            for number, text in enumerate(self._render_items(node, skipped), start)
        )

    def _render_items(self, node: Node, skipped: WarningCollector) -> list[str]:
        items: list[str] = []
        for child in node.content:
            if isinstance(child, Node) and child.type is NodeType.LIST_ITEM:
                items.append(self._render_list_item(child, skipped))
            else:
                self._record_skipped(child, skipped)
        return items

    def _render_list_item(self, node: Node, skipped: WarningCollector) -> str:
        # Tight-list convention: an item's blocks share one line.
        return self._render_block_list(node.content, skipped, " ")

    def _render_blockquote(self, node: Node, skipped: WarningCollector) -> str:
        inner = self._render_block_list(node.content, skipped, BLOCK_SEPARATOR)
        if not inner:
            return ""
        return "\n".join(
            QUOTE_PREFIX + line if line else QUOTE_MARKER for line in inner.split("\n")
        )

    def _render_hard_break(self, node: Node, skipped: WarningCollector) -> str:
        return "\n"

    @staticmethod
    def _record_skipped(node: AnyNode, skipped: WarningCollector) -> None:
        if isinstance(node, SkippedNode):
            skipped.add(node.type_name)
        else:
            skipped.add(node.type.value)


# ------------------------------------------------------------------
# Block renderer dispatch table
# ------------------------------------------------------------------

_BlockRenderer = _Callable[[ADFToMarkdownRenderer, Node, WarningCollector], str]

_BLOCK_RENDERERS: dict[NodeType, _BlockRenderer] = {
    NodeType.PARAGRAPH: ADFToMarkdownRenderer._render_paragraph,
    NodeType.HEADING: ADFToMarkdownRenderer._render_heading,
    NodeType.CODE_BLOCK: ADFToMarkdownRenderer._render_code_block,
    NodeType.BULLET_LIST: ADFToMarkdownRenderer._render_bullet_list,
    NodeType.ORDERED_LIST: ADFToMarkdownRenderer._render_ordered_list,
    NodeType.LIST_ITEM: ADFToMarkdownRenderer._render_list_item,
    NodeType.BLOCKQUOTE: ADFToMarkdownRenderer._render_blockquote,
    NodeType.HARD_BREAK: ADFToMarkdownRenderer._render_hard_break,
}
