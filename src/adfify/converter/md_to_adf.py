"""Full Markdown-to-ADF conversion pipeline.

:class:`MarkdownToADFConverter` runs three stages:

1. **Parse**: Mistune parses raw Markdown into an AST.
2. **Normalize**: :class:`ASTNormalizer` maps token types to canonical names.
3. **Build**: :func:`build_document` turns normalized tokens into the
   ADF node tree, recording unsupported block types along the way.

The result is a :class:`ConversionResult` holding the ``doc`` node and
any non-fatal warnings.
"""

from __future__ import annotations

import json
import sys

from adfify.config import AdfifyConfig
from adfify.converter.ast_normalizer import ASTNormalizer
from adfify.converter.block_builder import build_document
from adfify.converter.warnings import WarningCollector
from adfify.models import ConversionResult


class MarkdownToADFConverter:
    """Convert Markdown text to an ADF document.

    Parameters
    ----------
    config:
        Controls the mistune plugin set and debug dumps.

    Examples
    --------
    >>> converter = MarkdownToADFConverter(AdfifyConfig())
    >>> result = converter.convert("## Title\\n\\nBody")
    >>> [node.type.value for node in result.document.content]
    ['heading', 'paragraph']
    """

    def __init__(self, config: AdfifyConfig | None = None) -> None:
        self._config = config or AdfifyConfig()
        self._normalizer = ASTNormalizer(self._config.plugins)

    def convert(self, markdown: str) -> ConversionResult:
        """Full pipeline: parse -> normalize -> build -> collect warnings."""
        tokens = self._normalizer.parse(markdown or "")

        if self._config.debug_dump_ast:
            print(
                "[adfify] Normalized AST:",
                json.dumps(tokens, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        skipped = WarningCollector()
        document = build_document(tokens, skipped)

        if self._config.debug_dump_adf:
            print(
                "[adfify] ADF document:",
                json.dumps(document.to_dict(), indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        return ConversionResult(document=document, warnings=skipped.finish())
