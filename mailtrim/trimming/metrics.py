"""
Prometheus Metrics — trimming observability.

Exposes counters and a histogram for:
- Lines classified per category
- Winning cut rule ("none" when the text is kept whole)
- Hoisted code blocks
- Trim latency

Usage
-----
    from mailtrim.trimming.metrics import record_cut_rule, timed_trim

    with timed_trim():
        result = split_result(text)

    record_cut_rule("header_run")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram

from mailtrim.config.constants import CATEGORY_NAMES


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Classified lines, labelled by category name (Empty, Quote, ...).
LINES_CLASSIFIED: Counter = Counter(
    "mailtrim_lines_classified_total",
    "Total classified lines by category",
    ["category"],
)

# Which rule decided the cut.
CUT_RULES: Counter = Counter(
    "mailtrim_cut_rule_total",
    "Distribution of winning cut rules (header_run / embedded_marker / delimiter / trailing_quote / none)",
    ["rule"],
)

# Fenced code blocks swapped out for placeholders.
HOISTED_BLOCKS: Counter = Counter(
    "mailtrim_hoisted_blocks_total",
    "Total fenced code blocks hoisted before classification",
)

# End-to-end trim latency (seconds).
TRIM_LATENCY: Histogram = Histogram(
    "mailtrim_trim_seconds",
    "Processing time of one trim call in seconds",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_codes(codes: str) -> None:
    """Increment the per-category line counter for every symbol of *codes*."""
    for code in set(codes):
        LINES_CLASSIFIED.labels(category=CATEGORY_NAMES[code]).inc(codes.count(code))


def record_cut_rule(rule: Optional[str]) -> None:
    """Increment the cut rule counter; None is recorded as 'none'."""
    CUT_RULES.labels(rule=rule or "none").inc()


def record_hoisted_blocks(count: int) -> None:
    if count:
        HOISTED_BLOCKS.inc(count)


@contextmanager
def timed_trim() -> Generator[None, None, None]:
    """
    Context manager that records trim latency.

    Usage::

        with timed_trim():
            result = split_result(text)
    """
    with TRIM_LATENCY.time():
        yield
