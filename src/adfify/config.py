"""Configuration for adfify.

:class:`AdfifyConfig` is a plain dataclass capturing the few knobs the
converter exposes.  Instances are passed to :class:`~adfify.api.ADFConverter`
and shared read-only between calls.

:data:`GFM_PLUGINS` lists the mistune plugins that together approximate
GitHub-Flavored Markdown parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

GFM_PLUGINS: tuple[str, ...] = (
    "strikethrough",
    "table",
    "task_lists",
    "url",
)
"""Mistune plugins enabled by default."""

_KNOWN_PLUGINS: frozenset[str] = frozenset({
    "strikethrough",
    "table",
    "task_lists",
    "url",
    "footnotes",
    "mark",
    "insert",
    "superscript",
    "subscript",
    "abbr",
    "def_list",
    "spoiler",
    "math",
})


@dataclass
class AdfifyConfig:
    """Complete configuration for an :class:`~adfify.api.ADFConverter`.

    Parameters
    ----------
    plugins:
        Mistune plugin names used when parsing Markdown.  Constructs
        produced by extra plugins that have no ADF mapping are reported
        as skipped, not converted.
    metrics:
        Optional :class:`~adfify.observability.MetricsHook`.  ``None``
        selects the no-op hook.
    debug_dump_ast:
        Write the normalised Mistune AST to *stderr* on each conversion.
    debug_dump_adf:
        Write the produced ADF document to *stderr* on each conversion.
    """

    plugins: tuple[str, ...] = field(default_factory=lambda: GFM_PLUGINS)

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_ast: bool = False

    debug_dump_adf: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.plugins = tuple(self.plugins)
        unknown = sorted(set(self.plugins) - _KNOWN_PLUGINS)
        if unknown:
            raise ValueError(f"unknown mistune plugins: {', '.join(unknown)}")
