"""
Unit tests for kept/elided assembly.
"""
from mailtrim.models.hoisted_block import HoistedBlock
from mailtrim.models.line import ClassifiedDocument, Line
from mailtrim.models.trim_result import Boundary
from mailtrim.trimming.splitter import elided_lines, kept_lines, split_document


def make_document(*pairs):
    return ClassifiedDocument(
        lines=[Line(index=i, text=text, code=code) for i, (code, text) in enumerate(pairs)]
    )


class TestSplitDocument:
    def test_signature_before_cut_dropped(self):
        document = make_document(
            ("t", "Hello"),
            ("e", ""),
            ("s", "Sent from my iPhone"),
            ("t", "More text"),
        )
        kept = kept_lines(document, Boundary(index=4, initial_index=4))
        assert [line.text for line in kept] == ["Hello", "", "More text"]

    def test_trailing_empty_lines_trimmed(self):
        document = make_document(("t", "Hi"), ("e", ""), ("e", ""), ("q", "> x"))
        result = split_document(document, Boundary(index=1, initial_index=3, rule="trailing_quote"), [])
        assert result.kept == "Hi"
        assert result.elided == "> x"

    def test_elided_leading_and_trailing_empties_trimmed(self):
        document = make_document(("t", "Hi"), ("e", ""), ("q", "> a"), ("e", ""), ("q", "> b"), ("e", ""))
        elided = elided_lines(document, Boundary(index=1, initial_index=2, rule="trailing_quote"))
        assert [line.text for line in elided] == ["> a", "", "> b"]

    def test_cut_at_zero(self):
        document = make_document(("q", "> a"), ("q", "> b"))
        result = split_document(document, Boundary(index=0, initial_index=0, rule="trailing_quote"), [])
        assert result.as_tuple() == ("", "> a\n> b")

    def test_no_cut(self):
        document = make_document(("t", "a"), ("t", "b"))
        result = split_document(document, Boundary(index=2, initial_index=2), [])
        assert result.as_tuple() == ("a\nb", "")

    def test_placeholders_restored(self):
        block = HoistedBlock(token="\ue000HOIST-abc-0\ue001", text="```\ncode\n```", start_line=1)
        document = make_document(("t", "See:"), ("t", block.token), ("b", "On Monday Bob wrote:"))
        result = split_document(document, Boundary(index=2, initial_index=2, rule="embedded_marker"), [block])
        assert result.kept == "See:\n```\ncode\n```"
        assert result.elided == "On Monday Bob wrote:"
