"""
Unit tests for mailtrim.trimming.metrics.

Counters are process-wide, so every check compares against the value read
just before the call.
"""
from __future__ import annotations

from prometheus_client import REGISTRY


def sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsAvailability:
    def test_all_public_helpers_present(self):
        from mailtrim.trimming import metrics as m
        for name in (
            "record_codes",
            "record_cut_rule",
            "record_hoisted_blocks",
            "timed_trim",
            "LINES_CLASSIFIED",
            "CUT_RULES",
            "HOISTED_BLOCKS",
            "TRIM_LATENCY",
        ):
            assert hasattr(m, name), f"Missing public symbol: {name}"


class TestMetricHelpers:
    def test_record_cut_rule_none(self):
        from mailtrim.trimming.metrics import record_cut_rule
        before = sample("mailtrim_cut_rule_total", {"rule": "none"})
        record_cut_rule(None)
        assert sample("mailtrim_cut_rule_total", {"rule": "none"}) == before + 1

    def test_record_cut_rule_named(self):
        from mailtrim.trimming.metrics import record_cut_rule
        before = sample("mailtrim_cut_rule_total", {"rule": "header_run"})
        record_cut_rule("header_run")
        assert sample("mailtrim_cut_rule_total", {"rule": "header_run"}) == before + 1

    def test_record_codes_per_category(self):
        from mailtrim.trimming.metrics import record_codes
        before = sample("mailtrim_lines_classified_total", {"category": "Quote"})
        record_codes("tqqeq")
        assert sample("mailtrim_lines_classified_total", {"category": "Quote"}) == before + 3

    def test_record_hoisted_blocks(self):
        from mailtrim.trimming.metrics import record_hoisted_blocks
        before = sample("mailtrim_hoisted_blocks_total")
        record_hoisted_blocks(0)
        record_hoisted_blocks(2)
        assert sample("mailtrim_hoisted_blocks_total") == before + 2

    def test_timed_trim_observes_latency(self):
        from mailtrim.trimming.metrics import timed_trim
        before = sample("mailtrim_trim_seconds_count")
        with timed_trim():
            pass
        assert sample("mailtrim_trim_seconds_count") == before + 1

    def test_pipeline_records_rule(self):
        from mailtrim.trimming.pipeline import trim
        before = sample("mailtrim_cut_rule_total", {"rule": "trailing_quote"})
        trim("Ok\n> quoted")
        assert sample("mailtrim_cut_rule_total", {"rule": "trailing_quote"}) == before + 1
