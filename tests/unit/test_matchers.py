"""
Unit tests for matcher loading and catalog validation.
"""
import dataclasses
import logging

import pytest

from mailtrim.classification.matchers import CatalogError, load_matchers, validate_catalog
from mailtrim.config.constants import MATCHER_PRIORITY, QUOTE
from mailtrim.config.patterns import PATTERN_CATALOG


class TestLoadMatchers:
    """Tests for building matchers from the bundled catalog."""

    def test_priority_order(self):
        matchers = load_matchers(PATTERN_CATALOG)
        assert [m.name for m in matchers] == MATCHER_PRIORITY
        assert [m.rank for m in matchers] == list(range(len(MATCHER_PRIORITY)))

    def test_every_matcher_has_patterns(self):
        for matcher in load_matchers(PATTERN_CATALOG):
            assert len(matcher.patterns) > 0, matcher.name

    def test_all_bundled_patterns_compile(self):
        matchers = {m.name: m for m in load_matchers(PATTERN_CATALOG)}
        for name, by_locale in PATTERN_CATALOG.items():
            expected = sum(len(entries) for entries in by_locale.values())
            assert len(matchers[name].patterns) == expected, name

    def test_missing_matcher_never_matches(self):
        matchers = {m.name: m for m in load_matchers({"quote": {"any": [{"regex_pattern": r"^>"}]}})}
        assert matchers["quote"].matches("> hi")
        assert not matchers["empty"].matches("")

    def test_case_flag(self):
        catalog = {
            "signature": {
                "xx": [
                    {"regex_pattern": r"^Sent by", "ignore_case": False},
                ],
            },
        }
        signature = load_matchers(catalog)[2]
        assert signature.matches("Sent by pigeon")
        assert not signature.matches("sent by pigeon")

    def test_matcher_is_immutable(self):
        matcher = load_matchers(PATTERN_CATALOG)[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            matcher.name = "other"


class TestCatalogValidation:
    """Malformed catalogs are rejected before compiling."""

    def test_bundled_catalog_is_valid(self):
        validate_catalog(PATTERN_CATALOG)  # must not raise

    def test_unknown_matcher_rejected(self):
        with pytest.raises(CatalogError):
            load_matchers({"greeting": {"en": [{"regex_pattern": "^hi"}]}})

    def test_missing_pattern_rejected(self):
        with pytest.raises(CatalogError):
            load_matchers({"quote": {"any": [{"ignore_case": True}]}})

    def test_wrong_flag_type_rejected(self):
        with pytest.raises(CatalogError):
            load_matchers({"quote": {"any": [{"regex_pattern": "^>", "ignore_case": "yes"}]}})

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)

    def test_invalid_regex_skipped(self, caplog):
        catalog = {
            "quote": {
                "any": [
                    {"regex_pattern": r"[invalid("},
                    {"regex_pattern": r"^\s*>"},
                ],
            },
        }
        with caplog.at_level(logging.WARNING):
            matchers = load_matchers(catalog)
        quote = matchers[MATCHER_PRIORITY.index("quote")]
        assert quote.category == QUOTE
        assert len(quote.patterns) == 1  # No crash, just skipped
        assert "Invalid quote pattern" in caplog.text
