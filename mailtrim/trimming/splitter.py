"""
Splitter — applies the cut to a classified document.

Kept:   lines [0, B) without Signature lines, trailing Empty lines trimmed.
Elided: lines [B, length), leading/trailing Empty lines trimmed.
Placeholders of hoisted code blocks are restored on both sides.
"""
from typing import List

from mailtrim.config.constants import EMPTY, LINE_SEPARATOR, SIGNATURE
from mailtrim.models.hoisted_block import HoistedBlock
from mailtrim.models.line import ClassifiedDocument, Line
from mailtrim.models.trim_result import Boundary, TrimResult
from mailtrim.trimming.hoister import restore_code_blocks


def _trim_empty_edges(lines: List[Line], leading: bool) -> List[Line]:
    start, end = 0, len(lines)
    while end > start and lines[end - 1].code == EMPTY:
        end -= 1
    if leading:
        while start < end and lines[start].code == EMPTY:
            start += 1
    return lines[start:end]


def kept_lines(document: ClassifiedDocument, boundary: Boundary) -> List[Line]:
    """Lines before the cut, unassociated signatures dropped."""
    kept = [line for line in document.lines[: boundary.index] if line.code != SIGNATURE]
    return _trim_empty_edges(kept, leading=False)


def elided_lines(document: ClassifiedDocument, boundary: Boundary) -> List[Line]:
    return _trim_empty_edges(document.lines[boundary.index :], leading=True)


def join_lines(lines: List[Line]) -> str:
    return LINE_SEPARATOR.join(line.text for line in lines)


def split_document(
    document: ClassifiedDocument,
    boundary: Boundary,
    blocks: List[HoistedBlock],
) -> TrimResult:
    kept = restore_code_blocks(join_lines(kept_lines(document, boundary)), blocks)
    elided = restore_code_blocks(join_lines(elided_lines(document, boundary)), blocks)
    return TrimResult(kept=kept, elided=elided)
