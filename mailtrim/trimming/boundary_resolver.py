"""
Boundary Resolver — picks the single cut index over a code string.

Candidate rules (each yields its earliest trigger index or None):
    1. header_run       — first run of >= HEADER_RUN_MIN_LENGTH 'h'
    2. embedded_marker  — first 'b'
    3. delimiter        — first 'd'
    4. trailing_quote   — first 'q' of the trailing block made only of 'q'/'e'
                          (trailing 'e' ignored)

B0 = min over the rules that fired (length when none fired). When a rule
fired, the cut then backs up over the 'e'/'s' lines right before B0 so a
sign-off such as "Sent from my iPhone" goes out together with the quoted block.
Earliest index wins: a weak signal at line 2 beats a strong one at line 10.
"""
import logging
import re
from typing import Callable, List, Optional, Tuple

from mailtrim.config.constants import (
    ABSORBED_CATEGORIES,
    DELIMITER,
    EMAIL_HEADER,
    EMBEDDED_MARKER,
    EMPTY,
    HEADER_RUN_MIN_LENGTH,
    QUOTE,
    RULE_DELIMITER,
    RULE_EMBEDDED_MARKER,
    RULE_HEADER_RUN,
    RULE_TRAILING_QUOTE,
)
from mailtrim.models.trim_result import Boundary

logger = logging.getLogger(__name__)

_HEADER_RUN = re.compile(re.escape(EMAIL_HEADER) + "{%d,}" % HEADER_RUN_MIN_LENGTH)


def find_header_run(codes: str) -> Optional[int]:
    match = _HEADER_RUN.search(codes)
    return match.start() if match else None


def find_embedded_marker(codes: str) -> Optional[int]:
    index = codes.find(EMBEDDED_MARKER)
    return index if index >= 0 else None


def find_delimiter(codes: str) -> Optional[int]:
    index = codes.find(DELIMITER)
    return index if index >= 0 else None


def find_trailing_quote(codes: str) -> Optional[int]:
    """First 'q' of the maximal 'q'/'e' suffix, trailing 'e' ignored."""
    body = codes.rstrip(EMPTY)
    start = len(body)
    while start > 0 and body[start - 1] in (QUOTE, EMPTY):
        start -= 1
    index = body.find(QUOTE, start)
    return index if index >= 0 else None


# Fixed rule order, also used to break ties between equal indices
RULES: List[Tuple[str, Callable[[str], Optional[int]]]] = [
    (RULE_HEADER_RUN, find_header_run),
    (RULE_EMBEDDED_MARKER, find_embedded_marker),
    (RULE_DELIMITER, find_delimiter),
    (RULE_TRAILING_QUOTE, find_trailing_quote),
]


def back_up(codes: str, index: int) -> int:
    """Walk back over the 'e'/'s' lines immediately preceding *index*."""
    while index > 0 and codes[index - 1] in ABSORBED_CATEGORIES:
        index -= 1
    return index


def resolve_boundary(codes: str) -> Boundary:
    """
    Compute the cut for a code string.

    Args:
        codes: One category symbol per line.

    Returns:
        Boundary with the final index B in [0, len(codes)], B0 and the
        winning rule (None and B == len(codes) when nothing fired).
    """
    candidates = []
    for order, (name, rule) in enumerate(RULES):
        index = rule(codes)
        if index is not None:
            candidates.append((index, order, name))

    if not candidates:
        logger.debug("No cut over %d lines", len(codes))
        return Boundary(index=len(codes), initial_index=len(codes), rule=None)

    initial_index, _, rule_name = min(candidates)
    index = back_up(codes, initial_index)
    logger.debug(
        "Cut at %d (B0=%d, rule=%s) over %d lines",
        index,
        initial_index,
        rule_name,
        len(codes),
    )
    return Boundary(index=index, initial_index=initial_index, rule=rule_name)
