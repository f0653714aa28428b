"""
TrimResult and Boundary — outputs of the resolver and the splitter.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Boundary:
    """Cut decision over a code string."""

    index: int                      # Final cut B, after backup absorption
    initial_index: int              # B0, earliest trigger (== length if none)
    rule: Optional[str] = None      # Winning rule name, None when nothing fired

    @property
    def fired(self) -> bool:
        return self.rule is not None


@dataclass(frozen=True)
class TrimResult:
    """Kept (newly authored) and elided (quoted/forwarded) text."""

    kept: str
    elided: str

    def as_tuple(self) -> tuple:
        return (self.kept, self.elided)
