"""
Preprocessor — input checks and line-level cleanup before classification.

Steps:
    1. Input coercion (str / UTF-8 bytes / None)
    2. Line-ending normalization (CRLF, CR → LF)
    3. PGP clear-sign envelope removal
    4. Invisible-character and quote-marker noise cleanup (line count unchanged)
    5. Re-joining of hard-wrapped "On ... wrote:" markers
"""
import logging
import re
from typing import Callable, List

from mailtrim.config.constants import (
    INVISIBLE_NOISE_CHARS,
    LINE_SEPARATOR,
    PGP_SIGNATURE_BEGIN,
    PGP_SIGNATURE_END,
    PGP_SIGNED_MESSAGE_BEGIN,
    WRAPPED_MARKER_MAX_LINES,
)

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"\r\n|\r")
_ARMOR_HEADER = re.compile(r"^[A-Za-z][A-Za-z-]*: ")
_QUOTE_PREFIX = re.compile(r"^(?P<indent>[ \t]*)(?P<prefix>>(?:[ \t]*>)+)(?P<rest>.*)$")
_NOISE_TABLE = {ord(ch): None for ch in INVISIBLE_NOISE_CHARS}


class InputError(ValueError):
    """Raised when the input is not text or not valid UTF-8."""


# ======================================================================
# Input
# ======================================================================

def coerce_text(text) -> str:
    """
    Return *text* as a str, or raise InputError.

    None is treated as empty input; bytes must decode as UTF-8.
    """
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputError(f"Input is not valid UTF-8: {e}") from e
    if not isinstance(text, str):
        raise InputError(f"Expected str or bytes, got {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InputError(f"Input contains characters not encodable as UTF-8: {e}") from e
    return text


def normalize_line_endings(text: str) -> str:
    return _LINE_BREAKS.sub(LINE_SEPARATOR, text)


def split_lines(text: str) -> List[str]:
    """Split normalized text; a single terminal newline adds no extra line."""
    if not text:
        return []
    if text.endswith(LINE_SEPARATOR):
        text = text[: -len(LINE_SEPARATOR)]
    return text.split(LINE_SEPARATOR)


# ======================================================================
# PGP clear-sign envelope
# ======================================================================

def _has_closed_signature(lines: List[str], start: int) -> bool:
    return any(line.strip() == PGP_SIGNATURE_END for line in lines[start + 1 :])


def strip_pgp_envelope(lines: List[str]) -> List[str]:
    """
    Drop clear-sign markers, armor headers and signature blocks.

    Dash-escaped lines ("- -----") inside a signed message are unescaped.
    A signature block without an END line is left alone.
    """
    out: List[str] = []
    signed = False
    in_armor_headers = False
    in_signature = False

    for index, line in enumerate(lines):
        stripped = line.strip()

        if in_signature:
            if stripped == PGP_SIGNATURE_END:
                in_signature = False
            continue

        if stripped == PGP_SIGNED_MESSAGE_BEGIN:
            signed = True
            in_armor_headers = True
            continue

        if in_armor_headers:
            if _ARMOR_HEADER.match(stripped):
                continue
            in_armor_headers = False
            if not stripped:
                continue

        if stripped == PGP_SIGNATURE_BEGIN and _has_closed_signature(lines, index):
            in_signature = True
            signed = False
            continue

        if signed and line.startswith("- "):
            line = line[2:]
        out.append(line)

    if len(out) != len(lines):
        logger.debug("Removed %d PGP envelope line(s)", len(lines) - len(out))
    return out


# ======================================================================
# Noise cleanup (line count unchanged)
# ======================================================================

def remove_invisible_noise(line: str) -> str:
    return line.translate(_NOISE_TABLE)


def collapse_quote_markers(line: str) -> str:
    """Turn a spaced nested prefix such as '> > >text' into '>>> text'."""
    match = _QUOTE_PREFIX.match(line)
    if not match:
        return line
    prefix = match.group("prefix")
    if " " not in prefix and "\t" not in prefix:
        return line
    depth = prefix.count(">")
    rest = match.group("rest").lstrip(" \t")
    collapsed = match.group("indent") + ">" * depth
    return f"{collapsed} {rest}" if rest else collapsed


def clean_line(line: str) -> str:
    return collapse_quote_markers(remove_invisible_noise(line))


# ======================================================================
# Hard-wrapped reply markers
# ======================================================================

def _joinable(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith(">")


def join_wrapped_markers(lines: List[str], is_marker: Callable[[str], bool]) -> List[str]:
    """
    Merge 2..WRAPPED_MARKER_MAX_LINES consecutive lines into one when only
    their concatenation is a reply marker (e.g. a wrapped "On ... wrote:").

    The last merged line must end with a colon and must not be a marker
    on its own.
    """
    out: List[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        merged = False
        if _joinable(line) and not is_marker(line):
            for span in range(2, WRAPPED_MARKER_MAX_LINES + 1):
                end = i + span
                if end > len(lines):
                    break
                tail = lines[i + 1 : end]
                if not _joinable(tail[-1]) or is_marker(tail[-1]):
                    break
                if not tail[-1].rstrip().endswith((":", "：")):
                    continue
                candidate = " ".join([line.rstrip()] + [t.strip() for t in tail])
                if is_marker(candidate):
                    logger.debug("Joined wrapped marker over lines %d-%d", i, end - 1)
                    out.append(candidate)
                    i = end
                    merged = True
                    break
        if not merged:
            out.append(line)
            i += 1
    return out


def clean_lines(lines: List[str], is_marker: Callable[[str], bool]) -> List[str]:
    """Apply the full cleanup chain to already hoisted lines."""
    lines = strip_pgp_envelope(lines)
    lines = [clean_line(line) for line in lines]
    return join_wrapped_markers(lines, is_marker)
