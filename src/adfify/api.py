"""Converter facade.

:class:`ADFConverter` is the surface the rest of an issue-tracker client
talks to: descriptions and comments go through :meth:`ADFConverter.to_adf`
before they are submitted, and through :meth:`ADFConverter.to_markdown`
when they are displayed.  Both return plain JSON-compatible data plus a
list of warning messages; neither raises on content.

Usage::

    from adfify import ADFConverter

    converter = ADFConverter()
    adf, warnings = converter.to_adf("## Plan\\n\\n- step one\\n- step two")
    markdown, warnings = converter.to_markdown(adf)
"""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from typing import Any

from adfify.config import AdfifyConfig
from adfify.converter.adf_to_md import ADFToMarkdownRenderer
from adfify.converter.md_to_adf import MarkdownToADFConverter
from adfify.errors import AdfifyDocumentError
from adfify.models import ConversionWarning
from adfify.observability import NoopMetricsHook, get_logger

log = get_logger("adfify.converter")


class ADFConverter:
    """Bidirectional GitHub-Flavored Markdown / ADF converter.

    Holds only read-only configuration, so one instance may be shared
    freely between threads.

    Parameters
    ----------
    config:
        Optional :class:`AdfifyConfig`; defaults are used when omitted.
    """

    def __init__(self, config: AdfifyConfig | None = None) -> None:
        self._config = config or AdfifyConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )
        self._encoder = MarkdownToADFConverter(self._config)
        self._decoder = ADFToMarkdownRenderer()

    def to_adf(self, markdown: str) -> tuple[dict[str, Any], list[str]]:
        """Convert Markdown to an ADF ``doc`` dict.

        Returns
        -------
        tuple[dict, list[str]]
            The document (``{"type": "doc", "version": 1, "content": [...]}``)
            and one message per distinct skipped node type, sorted.
        """
        t0 = time.monotonic()
        result = self._encoder.convert(markdown)
        document = result.document.to_dict()
        self._report("to_adf", result.warnings, t0, blocks=len(result.document.content))
        return document, [w.message for w in result.warnings]

    def to_markdown(self, adf: Mapping[str, Any] | None) -> tuple[str, list[str]]:
        """Convert an ADF ``doc`` dict to Markdown.

        ``None`` or a document without content yields ``("", [])``.
        """
        t0 = time.monotonic()
        result = self._decoder.render(adf)
        self._report("to_markdown", result.warnings, t0, chars=len(result.markdown))
        return result.markdown, [w.message for w in result.warnings]

    def _report(
        self,
        direction: str,
        warnings: list[ConversionWarning],
        t0: float,
        **fields: int,
    ) -> None:
        elapsed_ms = (time.monotonic() - t0) * 1000
        tags = {"direction": direction}
        self._metrics.increment("adfify.conversions_total", tags=tags)
        self._metrics.timing("adfify.conversion_duration_ms", elapsed_ms, tags=tags)

        if warnings:
            skipped = [w.context.get("node_type", "") for w in warnings]
            self._metrics.increment(
                "adfify.conversion_warnings_total", value=len(warnings), tags=tags,
            )
            log.warning(
                "content skipped",
                extra={"extra_fields": {"op": direction, "skipped": skipped}},
            )

        log.debug(
            "conversion complete",
            extra={
                "extra_fields": {
                    "op": direction,
                    "duration_ms": round(elapsed_ms, 3),
                    "warnings": len(warnings),
                    **fields,
                }
            },
        )


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

_default_converter: ADFConverter | None = None


def _converter() -> ADFConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = ADFConverter()
    return _default_converter


def to_adf(markdown: str) -> tuple[dict[str, Any], list[str]]:
    """Convert Markdown to ADF with the default configuration."""
    return _converter().to_adf(markdown)


def to_markdown(adf: Mapping[str, Any] | None) -> tuple[str, list[str]]:
    """Convert ADF to Markdown with the default configuration."""
    return _converter().to_markdown(adf)


def load_document(payload: str | bytes) -> dict[str, Any]:
    """Decode an ADF JSON payload, such as an API ``description`` field.

    A JSON ``null`` decodes to an empty ``doc`` so it can be passed
    straight to :func:`to_markdown`.

    Raises
    ------
    AdfifyDocumentError
        If *payload* is not valid JSON or its root is not an object.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise AdfifyDocumentError(
            message=f"ADF payload is not valid JSON: {exc.msg}",
            context={"position": exc.pos},
            cause=exc,
        ) from exc
    except UnicodeDecodeError as exc:
        raise AdfifyDocumentError(
            message="ADF payload is not valid UTF-8",
            context={"position": exc.start},
            cause=exc,
        ) from exc

    if data is None:
        return {"type": "doc", "version": 1, "content": []}
    if not isinstance(data, dict):
        raise AdfifyDocumentError(
            message="ADF payload must be a JSON object",
            context={"root_type": type(data).__name__},
        )
    return data
