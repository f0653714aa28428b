"""
HoistedBlock — a fenced literal block swapped out for a placeholder line.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class HoistedBlock:
    """Original block text kept aside while its placeholder goes through the pipeline."""

    token: str
    text: str               # Block text, fences included
    start_line: int         # Line index of the opening fence in the source text
