"""Build ADF inline content from normalized inline AST tokens.

Inline tokens are flattened depth-first into a sequence of ``text``
nodes, each carrying the stack of marks active where it was found.
Nested Markdown emphasis therefore produces marks ordered outermost
first::

    ***both***  ->  text "both", marks (em, strong)

The flat sequence is then consolidated: adjacent ``text`` nodes with
structurally equal mark tuples are merged, so the output never holds
two such siblings side by side.
"""

from __future__ import annotations

from dataclasses import replace

from adfify.document import BOLD, CODE, ITALIC, Mark, Node, NodeType


def build_inline(children: list[dict], marks: tuple[Mark, ...] = ()) -> list[Node]:
    """Convert inline AST tokens to unconsolidated ADF inline nodes.

    Parameters
    ----------
    children:
        Normalized inline tokens.
    marks:
        Marks inherited from enclosing emphasis/strong/link tokens.

    Unrecognised inline tokens are transparent: their children are
    converted under the unchanged mark stack and nothing is reported.
    """
    nodes: list[Node] = []

    for token in children:
        token_type = token.get("type", "")

        if token_type == "text":
            raw = token.get("raw", "")
            if raw:
                nodes.append(Node.text_run(raw, marks))

        elif token_type == "emphasis":
            nodes.extend(build_inline(token.get("children", []), marks + (ITALIC,)))

        elif token_type == "strong":
            nodes.extend(build_inline(token.get("children", []), marks + (BOLD,)))

        elif token_type == "codespan":
            raw = token.get("raw", "")
            if raw:
                # Code is appended after whatever marks surround the span.
                nodes.append(Node.text_run(raw, marks + (CODE,)))

        elif token_type == "link":
            href = token.get("attrs", {}).get("url", "")
            nodes.extend(build_inline(token.get("children", []), marks + (Mark.link(href),)))

        elif token_type == "softbreak":
            nodes.append(Node.text_run("\n", marks))

        elif token_type == "linebreak":
            nodes.append(Node(NodeType.HARD_BREAK))

        else:
            nodes.extend(build_inline(token.get("children", []), marks))

    return nodes


def consolidate(nodes: list[Node]) -> list[Node]:
    """Merge adjacent ``text`` nodes whose mark tuples are equal."""
    result: list[Node] = []
    for node in nodes:
        if result and node.is_text and result[-1].is_text and result[-1].marks == node.marks:
            last = result[-1]
            result[-1] = replace(last, text=(last.text or "") + (node.text or ""))
        else:
            result.append(node)
    return result


def convert_inline(children: list[dict]) -> list[Node]:
    """Build and consolidate the inline content of one block."""
    return consolidate(build_inline(children))
