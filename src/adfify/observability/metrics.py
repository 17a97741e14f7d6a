"""Metrics hook protocol and its no-op default.

The converter facade reports a handful of data points per call.  Supply
any object satisfying :class:`MetricsHook` through
:attr:`AdfifyConfig.metrics <adfify.config.AdfifyConfig.metrics>` to
forward them to StatsD, Prometheus or similar.

Emitted metrics (all tagged with ``direction`` = ``to_adf`` | ``to_markdown``):

* ``adfify.conversions_total``           -- counter
* ``adfify.conversion_warnings_total``   -- counter, one per skipped type
* ``adfify.conversion_duration_ms``      -- timing
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Structural type for a metrics backend.

    *tags* is a flat ``str -> str`` mapping; backends translate it into
    whatever labelling scheme they use.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Add *value* to the counter *name*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds under *name*."""
        ...


class NoopMetricsHook:
    """Discard every data point.

    Used when no backend is configured so call sites never need a
    ``None`` check.
    """

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
