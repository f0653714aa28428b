"""
Trimming Pipeline — main entry points.

Flow:
    1. Input coercion & line-ending normalization
    2. Code-block hoisting
    3. Cleanup (PGP envelope, noise, wrapped markers)
    4. Line classification → code string
    5. Boundary resolution → cut index
    6. Split into kept / elided, placeholders restored

Pure and synchronous: the only shared state is the immutable default
classifier, so calls may run concurrently.
"""
import logging
from typing import List, Optional, Tuple

from mailtrim.classification.classifier import LineClassifier, line_classifier
from mailtrim.config.constants import PATTERN_CATALOG_VERSION
from mailtrim.models.hoisted_block import HoistedBlock
from mailtrim.models.line import ClassifiedDocument
from mailtrim.models.trim_io import ReportLine, TrimReport
from mailtrim.models.trim_result import Boundary, TrimResult
from mailtrim.trimming.boundary_resolver import resolve_boundary
from mailtrim.trimming.hoister import hoist_code_blocks
from mailtrim.trimming.metrics import (
    record_codes,
    record_cut_rule,
    record_hoisted_blocks,
    timed_trim,
)
from mailtrim.trimming.preprocessor import (
    clean_line,
    clean_lines,
    coerce_text,
    normalize_line_endings,
    split_lines,
)
from mailtrim.trimming.splitter import split_document

logger = logging.getLogger(__name__)


def _classify_document(
    text,
    classifier: LineClassifier,
) -> Tuple[ClassifiedDocument, List[HoistedBlock]]:
    lines = split_lines(normalize_line_endings(coerce_text(text)))
    lines, blocks = hoist_code_blocks(lines)

    marker = classifier.matcher("embedded_marker")
    is_marker = marker.matches if marker is not None else (lambda _line: False)
    lines = clean_lines(lines, is_marker)

    document = classifier.classify_lines(lines)
    record_codes(document.codes)
    record_hoisted_blocks(len(blocks))
    return document, blocks


def _run(
    text,
    classifier: Optional[LineClassifier],
) -> Tuple[ClassifiedDocument, Boundary, TrimResult]:
    if classifier is None:
        classifier = line_classifier

    with timed_trim():
        document, blocks = _classify_document(text, classifier)
        boundary = resolve_boundary(document.codes)
        result = split_document(document, boundary, blocks)

    record_cut_rule(boundary.rule)
    logger.debug(
        "Trimmed %d lines: codes=%s cut=%d rule=%s",
        len(document),
        document.codes,
        boundary.index,
        boundary.rule,
    )
    return document, boundary, result


def split_result(text, classifier: Optional[LineClassifier] = None) -> TrimResult:
    """
    Separate newly authored content from quoted/forwarded content.

    Args:
        text: Plain-text email body (str, UTF-8 bytes or None).
        classifier: Custom LineClassifier. Defaults to the bundled catalog.

    Returns:
        TrimResult(kept, elided).

    Raises:
        InputError: If the input is not text or not valid UTF-8.
    """
    _, _, result = _run(text, classifier)
    return result


def split(text, classifier: Optional[LineClassifier] = None) -> Tuple[str, str]:
    """Return (kept, elided)."""
    return split_result(text, classifier).as_tuple()


def trim(text, classifier: Optional[LineClassifier] = None) -> str:
    """Return only the newly authored content."""
    return split_result(text, classifier).kept


def classify(line, classifier: Optional[LineClassifier] = None) -> str:
    """
    Category code of a single line, as the pipeline would see it
    (invisible noise removed, quote prefixes collapsed).
    """
    if classifier is None:
        classifier = line_classifier
    return classifier.classify(clean_line(coerce_text(line)))


def explain(text, classifier: Optional[LineClassifier] = None) -> TrimReport:
    """
    Full trace of a trim for debugging: every line with its code, the
    initial and final cut and the winning rule.
    """
    document, boundary, result = _run(text, classifier)
    return TrimReport(
        codes=document.codes,
        lines=[ReportLine(**line.to_dict()) for line in document.lines],
        initial_cut=boundary.initial_index,
        cut=boundary.index,
        rule=boundary.rule,
        kept=result.kept,
        elided=result.elided,
        catalog_version=PATTERN_CATALOG_VERSION,
    )
