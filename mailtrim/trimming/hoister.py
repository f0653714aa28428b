"""
Code-Block Hoister — keeps fenced literal blocks away from classification.

Each terminated fence block (``` or ~~~, opening and closing line included)
is replaced by one placeholder line before classification and restored in
the kept/elided text afterwards. A hoisted block is a single line for the
resolver, so it always lands on exactly one side of the cut.
"""
import logging
import re
import uuid
from typing import Dict, List, Optional, Tuple

from mailtrim.config.constants import (
    FENCE_CHARACTERS,
    FENCE_MIN_LENGTH,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    PLACEHOLDER_PREFIX,
)
from mailtrim.models.hoisted_block import HoistedBlock

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(
    r"^[ \t]*(?P<fence>%s)(?P<info>.*)$"
    % "|".join(re.escape(ch) + "{%d,}" % FENCE_MIN_LENGTH for ch in FENCE_CHARACTERS)
)
_CLOSING_FENCE = re.compile(
    r"^[ \t]*(?P<fence>%s)[ \t]*$" % "|".join(re.escape(ch) + "+" for ch in FENCE_CHARACTERS)
)


def _opening_fence(line: str) -> Optional[Tuple[str, int]]:
    match = _OPENING_FENCE.match(line)
    if not match:
        return None
    fence = match.group("fence")
    # A backtick info string cannot itself contain backticks
    if fence[0] == "`" and "`" in match.group("info"):
        return None
    return fence[0], len(fence)


def _closes(line: str, char: str, length: int) -> bool:
    match = _CLOSING_FENCE.match(line)
    if not match:
        return False
    fence = match.group("fence")
    return fence[0] == char and len(fence) >= length


def make_nonce(text: str) -> str:
    """Random hex nonce guaranteed absent from *text*."""
    nonce = uuid.uuid4().hex[:12]
    while nonce in text:
        nonce = uuid.uuid4().hex[:12]
    return nonce


def make_token(nonce: str, counter: int) -> str:
    return f"{PLACEHOLDER_OPEN}{PLACEHOLDER_PREFIX}-{nonce}-{counter}{PLACEHOLDER_CLOSE}"


def hoist_code_blocks(lines: List[str]) -> Tuple[List[str], List[HoistedBlock]]:
    """
    Replace every terminated fenced block with a placeholder line.

    Unterminated fences are left untouched as ordinary text.

    Args:
        lines: Normalized lines of the document.

    Returns:
        (lines with placeholders, hoisted blocks in document order).
    """
    nonce = make_nonce("\n".join(lines))
    out: List[str] = []
    blocks: List[HoistedBlock] = []
    # Shortest fence length per character known to have no closing line ahead
    unterminated: Dict[str, int] = {}

    i = 0
    while i < len(lines):
        fence = _opening_fence(lines[i])
        if fence is not None:
            char, length = fence
            close = None
            if length < unterminated.get(char, length + 1):
                for j in range(i + 1, len(lines)):
                    if _closes(lines[j], char, length):
                        close = j
                        break
                if close is None:
                    unterminated[char] = length
            if close is not None:
                token = make_token(nonce, len(blocks))
                blocks.append(
                    HoistedBlock(
                        token=token,
                        text="\n".join(lines[i : close + 1]),
                        start_line=i,
                    )
                )
                out.append(token)
                i = close + 1
                continue
        out.append(lines[i])
        i += 1

    if blocks:
        logger.debug("Hoisted %d code block(s)", len(blocks))
    return out, blocks


def restore_code_blocks(text: str, blocks: List[HoistedBlock]) -> str:
    """Put the original block text back in place of each placeholder."""
    for block in blocks:
        text = text.replace(block.token, block.text)
    return text
