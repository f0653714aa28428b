"""
Unit tests for the cut decision over code strings.
"""
import pytest

from mailtrim.trimming.boundary_resolver import (
    back_up,
    find_delimiter,
    find_embedded_marker,
    find_header_run,
    find_trailing_quote,
    resolve_boundary,
)


class TestRules:
    """Each rule reports its earliest trigger, or None."""

    @pytest.mark.parametrize(
        "codes, expected",
        [
            ("tthhh", 2),
            ("thhthhhh", 4),
            ("thh", None),
            ("hhhhh", 0),
        ],
    )
    def test_header_run(self, codes, expected):
        assert find_header_run(codes) == expected

    def test_embedded_marker(self):
        assert find_embedded_marker("ttbqb") == 2
        assert find_embedded_marker("ttt") is None

    def test_delimiter(self):
        assert find_delimiter("tdtd") == 1
        assert find_delimiter("") is None

    @pytest.mark.parametrize(
        "codes, expected",
        [
            ("ttqqee", 2),
            ("tteqeqee", 3),
            ("qqq", 0),
            ("tqt", None),
            ("ee", None),
            ("tqtq", 3),
        ],
    )
    def test_trailing_quote(self, codes, expected):
        assert find_trailing_quote(codes) == expected


class TestBackUp:
    def test_absorbs_empty_and_signature(self):
        assert back_up("tesehh", 4) == 1

    def test_stops_at_text(self):
        assert back_up("tthh", 2) == 2

    def test_stops_at_start(self):
        assert back_up("eshh", 2) == 0


class TestResolveBoundary:
    """Earliest trigger wins, then the cut backs up over e/s."""

    def test_outlook_forward_with_signature(self):
        boundary = resolve_boundary("tesehhhht")
        assert boundary.initial_index == 4
        assert boundary.index == 1
        assert boundary.rule == "header_run"

    def test_earliest_trigger_wins(self):
        boundary = resolve_boundary("tdthhh")
        assert boundary.rule == "delimiter"
        assert boundary.initial_index == 1
        assert boundary.index == 1

    def test_weak_early_signal_beats_strong_late_one(self):
        boundary = resolve_boundary("tbtttthhhh")
        assert boundary.rule == "embedded_marker"
        assert boundary.index == 1

    def test_trailing_quote_backup(self):
        boundary = resolve_boundary("tteqeqee")
        assert boundary.rule == "trailing_quote"
        assert boundary.initial_index == 3
        assert boundary.index == 2

    def test_everything_quoted(self):
        boundary = resolve_boundary("qqq")
        assert boundary.index == 0
        assert boundary.rule == "trailing_quote"

    def test_quote_followed_by_text_is_not_a_cut(self):
        boundary = resolve_boundary("tqt")
        assert boundary.index == 3
        assert boundary.rule is None
        assert not boundary.fired

    def test_no_backup_without_trigger(self):
        boundary = resolve_boundary("tshh")
        assert boundary.index == 4
        assert boundary.initial_index == 4
        assert boundary.rule is None

    def test_empty_document(self):
        boundary = resolve_boundary("")
        assert (boundary.index, boundary.initial_index, boundary.rule) == (0, 0, None)

    @pytest.mark.parametrize("codes", ["", "t", "tesehhhht", "ebq", "sssb", "hhhqtd", "eeee"])
    def test_index_bounds(self, codes):
        boundary = resolve_boundary(codes)
        assert 0 <= boundary.index <= boundary.initial_index <= len(codes)
