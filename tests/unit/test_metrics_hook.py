"""Tests for the MetricsHook protocol and its wiring through ADFConverter.

Covers:
  - Protocol conformance (isinstance, structural subtyping)
  - NoopMetricsHook behaviour
  - Metric names, values and tags emitted by both conversion directions
"""
from __future__ import annotations

from typing import Any

import pytest

from adfify.api import ADFConverter
from adfify.config import AdfifyConfig
from adfify.observability.metrics import MetricsHook, NoopMetricsHook

# ---------------------------------------------------------------------------
# Recording hook for integration tests
# ---------------------------------------------------------------------------


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def counter(self, name: str) -> list[dict[str, Any]]:
        return [call for call in self.increments if call["name"] == name]


@pytest.fixture
def hook() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def recorded(hook: RecordingMetricsHook) -> ADFConverter:
    return ADFConverter(AdfifyConfig(metrics=hook))


# ---------------------------------------------------------------------------
# Protocol conformance
# ---------------------------------------------------------------------------


class TestMetricsHookProtocol:

    def test_noop_is_instance_of_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_recording_hook_is_instance_of_protocol(self):
        assert isinstance(RecordingMetricsHook(), MetricsHook)

    def test_class_missing_timing_is_not_instance(self):

        class PartialHook:
            def increment(
                self, name: str, value: int = 1,
                tags: dict[str, str] | None = None,
            ) -> None:
                pass

        assert not isinstance(PartialHook(), MetricsHook)

    def test_empty_class_is_not_instance(self):

        class EmptyHook:
            pass

        assert not isinstance(EmptyHook(), MetricsHook)


class TestNoopMetricsHook:

    def test_increment_returns_none(self):
        hook = NoopMetricsHook()
        assert hook.increment("adfify.conversions_total", value=3, tags={"k": "v"}) is None

    def test_timing_returns_none(self):
        assert NoopMetricsHook().timing("adfify.conversion_duration_ms", 1.5) is None

    def test_has_no_instance_dict(self):
        assert not hasattr(NoopMetricsHook(), "__dict__")


# ---------------------------------------------------------------------------
# Wiring through the facade
# ---------------------------------------------------------------------------


class TestConverterMetrics:

    def test_to_adf_counts_conversion(self, recorded, hook):
        recorded.to_adf("# Title")
        calls = hook.counter("adfify.conversions_total")
        assert calls == [
            {"name": "adfify.conversions_total", "value": 1, "tags": {"direction": "to_adf"}},
        ]

    def test_to_markdown_counts_conversion(self, recorded, hook):
        recorded.to_markdown({"type": "doc", "version": 1, "content": []})
        (call,) = hook.counter("adfify.conversions_total")
        assert call["tags"] == {"direction": "to_markdown"}

    def test_duration_recorded(self, recorded, hook):
        recorded.to_adf("text")
        (timing,) = hook.timings
        assert timing["name"] == "adfify.conversion_duration_ms"
        assert timing["ms"] >= 0
        assert timing["tags"] == {"direction": "to_adf"}

    def test_no_warning_counter_without_warnings(self, recorded, hook):
        recorded.to_adf("plain")
        assert hook.counter("adfify.conversion_warnings_total") == []

    def test_warning_counter_counts_distinct_types(self, recorded, hook):
        recorded.to_markdown({
            "type": "doc",
            "version": 1,
            "content": [{"type": "rule"}, {"type": "panel"}, {"type": "rule"}],
        })
        (call,) = hook.counter("adfify.conversion_warnings_total")
        assert call["value"] == 2

    def test_default_config_uses_noop(self):
        markdown, warnings = ADFConverter().to_markdown(None)
        assert (markdown, warnings) == ("", [])
