"""Structured JSON logging for adfify.

Each record becomes one line of JSON, so conversion diagnostics can be
shipped to a log pipeline next to the issue-tracker client's own logs::

    {"ts": "2026-10-17T09:30:00.000000+00:00", "level": "WARNING",
     "logger": "adfify.converter", "message": "content skipped",
     "op": "to_markdown", "skipped": ["panel", "table"]}

Usage::

    from adfify.observability import get_logger

    log = get_logger("adfify.converter")
    log.debug("converted", extra={"extra_fields": {"op": "to_adf", "blocks": 3}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Render a :class:`logging.LogRecord` as a single-line JSON object.

    Keys always present: ``ts`` (UTC ISO-8601), ``level``, ``logger`` and
    ``message``.  A mapping passed as ``extra={"extra_fields": {...}}``
    is merged into the top level; ``exception`` and ``stack_info`` are
    added when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if fields:
            entry.update(fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


# Logger names that already carry a StructuredFormatter handler.
_configured: set[str] = set()


def get_logger(
    name: str = "adfify",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Return the logger *name*, attaching a JSON handler on first use.

    Parameters
    ----------
    name:
        Logger name, ``"adfify"`` by default.
    level:
        Initial level as an ``int`` or a case-insensitive name such as
        ``"debug"``.  Only applied the first time *name* is configured.
    stream:
        Handler stream, ``sys.stderr`` by default.

    Repeated calls with the same *name* return the same logger without
    stacking handlers.
    """
    logger = logging.getLogger(name)
    if name in _configured:
        return logger

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _configured.add(name)
    return logger
