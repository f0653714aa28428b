"""
JSON Schemas for catalog validation and debug report output.

Two schemas:
1. PATTERN_CATALOG_SCHEMA — shape of a locale pattern catalog
2. TRIM_REPORT_SCHEMA     — serialized TrimReport (explain() output)
"""
from mailtrim.config.constants import CATEGORY_NAMES, MATCHER_PRIORITY

# =============================================================================
# 1. Pattern Catalog Schema
# =============================================================================
PATTERN_ENTRY_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["regex_pattern"],
    "properties": {
        "regex_pattern": {
            "type": "string",
            "minLength": 1,
            "description": "Python regular expression tested against a single line",
        },
        "ignore_case": {
            "type": "boolean",
            "description": "Compile with re.IGNORECASE (default true)",
        },
    },
}

PATTERN_CATALOG_SCHEMA: dict = {
    "name": "locale_pattern_catalog",
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            name: {
                "type": "object",
                "description": "Patterns for one matcher, grouped by locale",
                "additionalProperties": {
                    "type": "array",
                    "items": PATTERN_ENTRY_SCHEMA,
                },
            }
            for name in MATCHER_PRIORITY
        },
    },
}

# =============================================================================
# 2. Trim Report Schema
# =============================================================================
TRIM_REPORT_SCHEMA: dict = {
    "name": "trim_report_v1",
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": [
            "codes",
            "lines",
            "initial_cut",
            "cut",
            "rule",
            "kept",
            "elided",
            "catalog_version",
        ],
        "properties": {
            "codes": {
                "type": "string",
                "pattern": "^[" + "".join(CATEGORY_NAMES) + "]*$",
                "description": "One category code per normalized line",
            },
            "lines": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["index", "text", "code"],
                    "properties": {
                        "index": {"type": "integer", "minimum": 0},
                        "text": {"type": "string"},
                        "code": {"type": "string", "enum": list(CATEGORY_NAMES)},
                    },
                },
            },
            "initial_cut": {"type": "integer", "minimum": 0},
            "cut": {"type": "integer", "minimum": 0},
            "rule": {
                "type": ["string", "null"],
                "enum": [
                    "header_run",
                    "embedded_marker",
                    "delimiter",
                    "trailing_quote",
                    None,
                ],
            },
            "kept": {"type": "string"},
            "elided": {"type": "string"},
            "catalog_version": {"type": "string"},
        },
    },
}
