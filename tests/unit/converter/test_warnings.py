"""Tests for WarningCollector."""

from adfify.converter.warnings import WarningCollector
from adfify.models import UNSUPPORTED_NODE, ConversionWarning


class TestWarningCollector:

    def test_empty(self):
        collector = WarningCollector()
        assert len(collector) == 0
        assert collector.finish() == []

    def test_duplicates_recorded_once(self):
        collector = WarningCollector()
        for _ in range(3):
            collector.add("table")
        assert len(collector) == 1
        assert collector.names() == ["table"]

    def test_finish_is_sorted(self):
        collector = WarningCollector()
        for name in ("table", "panel", "rule"):
            collector.add(name)
        messages = [w.message for w in collector.finish()]
        assert messages == [
            "skipped unsupported node type 'panel'",
            "skipped unsupported node type 'rule'",
            "skipped unsupported node type 'table'",
        ]

    def test_insertion_order_does_not_matter(self):
        first, second = WarningCollector(), WarningCollector()
        for name in ("b", "a", "c"):
            first.add(name)
        for name in ("c", "b", "a", "b"):
            second.add(name)
        assert first.finish() == second.finish()

    def test_warning_fields(self):
        collector = WarningCollector()
        collector.add("mention")
        (warning,) = collector.finish()
        assert isinstance(warning, ConversionWarning)
        assert warning.code == UNSUPPORTED_NODE
        assert warning.context == {"node_type": "mention"}

    def test_contains(self):
        collector = WarningCollector()
        collector.add("rule")
        assert "rule" in collector
        assert "table" not in collector

    def test_finish_does_not_reset(self):
        collector = WarningCollector()
        collector.add("rule")
        collector.finish()
        assert len(collector.finish()) == 1
