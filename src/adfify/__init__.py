"""adfify: bidirectional GitHub-Flavored Markdown / Atlassian Document Format.

Public re-exports
-----------------

* **Facade:** :class:`ADFConverter`, :func:`to_adf`, :func:`to_markdown`,
  :func:`load_document`
* **Configuration:** :class:`AdfifyConfig`
* **Errors:** :class:`AdfifyError`, :class:`AdfifyDocumentError`, :class:`ErrorCode`
* **Document model:** :class:`Node`, :class:`NodeType`, :class:`Mark`,
  :class:`MarkType`, :class:`SkippedNode`
* **Models:** :class:`ConversionWarning`, :class:`ConversionResult`,
  :class:`RenderResult`

Usage::

    from adfify import to_adf, to_markdown

    adf, warnings = to_adf("# Hello\\n\\nWorld")
    markdown, warnings = to_markdown(adf)
"""

from __future__ import annotations

# ── Facade ──────────────────────────────────────────────────────────────
from adfify.api import ADFConverter, load_document, to_adf, to_markdown

# ── Configuration ───────────────────────────────────────────────────────
from adfify.config import GFM_PLUGINS, AdfifyConfig

# ── Document model ──────────────────────────────────────────────────────
from adfify.document import Mark, MarkType, Node, NodeType, SkippedNode, node_from_dict

# ── Errors ──────────────────────────────────────────────────────────────
from adfify.errors import AdfifyDocumentError, AdfifyError, ErrorCode

# ── Models ──────────────────────────────────────────────────────────────
from adfify.models import ConversionResult, ConversionWarning, RenderResult

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Facade
    "ADFConverter",
    "to_adf",
    "to_markdown",
    "load_document",
    # Configuration
    "AdfifyConfig",
    "GFM_PLUGINS",
    # Document model
    "Node",
    "NodeType",
    "Mark",
    "MarkType",
    "SkippedNode",
    "node_from_dict",
    # Errors
    "AdfifyError",
    "AdfifyDocumentError",
    "ErrorCode",
    # Models
    "ConversionWarning",
    "ConversionResult",
    "RenderResult",
]
