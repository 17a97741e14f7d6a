"""Result and warning types returned by the conversion pipeline.

All types are plain dataclasses with no behaviour beyond what is needed
for structural equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from adfify.document import Node

UNSUPPORTED_NODE = "UNSUPPORTED_NODE"
"""Warning code for a node kind that has no counterpart on the other side."""


@dataclass(frozen=True)
class ConversionWarning:
    """A non-fatal issue encountered during Markdown/ADF conversion.

    Attributes
    ----------
    code:
        A machine-readable warning code (e.g. ``"UNSUPPORTED_NODE"``).
    message:
        A human-readable description of the issue.
    context:
        Structured data for diagnostics.
    """

    code: str
    message: str
    context: dict = field(default_factory=dict, compare=False, hash=False)


@dataclass
class ConversionResult:
    """Output of :meth:`MarkdownToADFConverter.convert`.

    Attributes
    ----------
    document:
        The ``doc`` root node.
    warnings:
        Skipped-content warnings, sorted by node type.
    """

    document: Node
    warnings: list[ConversionWarning] = field(default_factory=list)


@dataclass
class RenderResult:
    """Output of :meth:`ADFToMarkdownRenderer.render`.

    Attributes
    ----------
    markdown:
        The rendered GitHub-Flavored Markdown.
    warnings:
        Skipped-content warnings, sorted by node type.
    """

    markdown: str
    warnings: list[ConversionWarning] = field(default_factory=list)
