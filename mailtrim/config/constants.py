"""
Constants used across the trimming pipeline.
Versioned and pinned for determinism.
"""
from typing import Dict, List

# =============================================================================
# Line categories (closed alphabet)
# =============================================================================
EMPTY: str = "e"
DELIMITER: str = "d"
SIGNATURE: str = "s"
EMBEDDED_MARKER: str = "b"
EMAIL_HEADER: str = "h"
QUOTE: str = "q"
TEXT: str = "t"

CATEGORY_NAMES: Dict[str, str] = {
    EMPTY: "Empty",
    DELIMITER: "Delimiter",
    SIGNATURE: "Signature",
    EMBEDDED_MARKER: "EmbeddedMarker",
    EMAIL_HEADER: "EmailHeader",
    QUOTE: "Quote",
    TEXT: "Text",
}

# =============================================================================
# Matcher priority (first positive wins, Text is the fallback)
# =============================================================================
MATCHER_PRIORITY: List[str] = [
    "empty",
    "delimiter",
    "signature",
    "embedded_marker",
    "email_header",
    "quote",
]

MATCHER_CATEGORY: Dict[str, str] = {
    "empty": EMPTY,
    "delimiter": DELIMITER,
    "signature": SIGNATURE,
    "embedded_marker": EMBEDDED_MARKER,
    "email_header": EMAIL_HEADER,
    "quote": QUOTE,
}

# =============================================================================
# Boundary resolver
# =============================================================================
HEADER_RUN_MIN_LENGTH: int = 3

RULE_HEADER_RUN: str = "header_run"
RULE_EMBEDDED_MARKER: str = "embedded_marker"
RULE_DELIMITER: str = "delimiter"
RULE_TRAILING_QUOTE: str = "trailing_quote"

# Categories pulled into the elided region when they sit right before the cut
ABSORBED_CATEGORIES: frozenset = frozenset({EMPTY, SIGNATURE})

# =============================================================================
# Preprocessing
# =============================================================================
LINE_SEPARATOR: str = "\n"

# Longest run of hard-wrapped lines re-joined into one reply marker
WRAPPED_MARKER_MAX_LINES: int = 3

INVISIBLE_NOISE_CHARS: str = "\u200b\u200c\u200d\u2060\ufeff"

PGP_SIGNED_MESSAGE_BEGIN: str = "-----BEGIN PGP SIGNED MESSAGE-----"
PGP_SIGNATURE_BEGIN: str = "-----BEGIN PGP SIGNATURE-----"
PGP_SIGNATURE_END: str = "-----END PGP SIGNATURE-----"

# =============================================================================
# Code-block hoisting
# =============================================================================
FENCE_CHARACTERS: str = "`~"
FENCE_MIN_LENGTH: int = 3
PLACEHOLDER_PREFIX: str = "HOIST"
PLACEHOLDER_OPEN: str = "\ue000"
PLACEHOLDER_CLOSE: str = "\ue001"

# =============================================================================
# Catalog
# =============================================================================
PATTERN_CATALOG_VERSION: str = "locale-patterns-2026.2"
