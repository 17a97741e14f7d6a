"""Markdown ↔ ADF conversion pipeline.

Public API:

- :class:`MarkdownToADFConverter`: Markdown → ADF document.
- :class:`ADFToMarkdownRenderer`: ADF document → Markdown.
- :class:`ASTNormalizer`: parse and normalize Markdown to canonical AST.
- :class:`WarningCollector`: per-call set of skipped node types.
- :func:`build_document`: convert normalized AST to an ADF ``doc`` node.
- :func:`convert_inline`: convert inline AST tokens to consolidated text runs.
- :func:`render_inline`: render ADF inline nodes to Markdown.
"""

from adfify.converter.adf_to_md import ADFToMarkdownRenderer
from adfify.converter.ast_normalizer import ASTNormalizer
from adfify.converter.block_builder import build_document
from adfify.converter.inline_builder import convert_inline
from adfify.converter.inline_renderer import render_inline
from adfify.converter.md_to_adf import MarkdownToADFConverter
from adfify.converter.warnings import WarningCollector

__all__ = [
    "ADFToMarkdownRenderer",
    "ASTNormalizer",
    "MarkdownToADFConverter",
    "WarningCollector",
    "build_document",
    "convert_inline",
    "render_inline",
]
