"""Tests for the in-memory report registry."""

from d3js_report.context import ReportRegistry
from d3js_report.models import ReportType, Rule


class TestReportRegistry:
    def test_keeps_registration_order(self):
        registry = ReportRegistry()
        first, second = Rule("a:1"), Rule("a:2")
        registry.add_report("first", first, ReportType.LINK, "file:///a")
        registry.add_report("second", second, ReportType.LINK, "file:///b")
        assert [a.label for a in registry.artifacts] == ["first", "second"]
        assert len(registry) == 2

    def test_for_rule(self):
        registry = ReportRegistry()
        rule = Rule("a:1")
        registry.add_report("link", rule, ReportType.LINK, "file:///a")
        registry.add_report("image", rule, ReportType.IMAGE, None)
        registry.add_report("other", Rule("b"), ReportType.LINK, "file:///b")
        assert [a.label for a in registry.for_rule("a:1")] == ["link", "image"]
        assert registry.for_rule("missing") == []
