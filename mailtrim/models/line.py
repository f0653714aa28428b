"""
Line and ClassifiedDocument — the coded view of a normalized email body.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Line:
    """A single normalized line with its category code."""

    index: int
    text: str
    code: str               # "e" | "d" | "s" | "b" | "h" | "q" | "t"

    def to_dict(self) -> dict:
        return {"index": self.index, "text": self.text, "code": self.code}

    def __repr__(self) -> str:
        return f"Line({self.index}, {self.code}, '{self.text[:30]}')"


@dataclass
class ClassifiedDocument:
    """Ordered lines plus the derived code string (one symbol per line)."""

    lines: List[Line] = field(default_factory=list)

    @property
    def codes(self) -> str:
        return "".join(line.code for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)
