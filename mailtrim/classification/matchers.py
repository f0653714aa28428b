"""
Line Matchers — stateless predicates over a single line.

Each matcher is compiled once from the locale pattern catalog and never
mutated afterwards, so matchers can be shared between threads.

Priority (first positive wins):
    empty > delimiter > signature > embedded_marker > email_header > quote
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from jsonschema import ValidationError, validate

from mailtrim.config.constants import MATCHER_CATEGORY, MATCHER_PRIORITY
from mailtrim.config.schemas import PATTERN_CATALOG_SCHEMA

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a pattern catalog does not have the expected shape."""


@dataclass(frozen=True)
class Matcher:
    """A named line predicate backed by an ordered tuple of compiled patterns."""

    name: str
    rank: int
    category: str
    patterns: Tuple[re.Pattern, ...]

    def matches(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self.patterns)

    def __repr__(self) -> str:
        return f"Matcher({self.name}, rank={self.rank}, patterns={len(self.patterns)})"


def compile_patterns(name: str, by_locale: Dict[str, List[dict]]) -> Tuple[re.Pattern, ...]:
    """
    Compile every pattern of one matcher, locale by locale, preserving order.

    A pattern that fails to compile is logged and skipped.
    """
    compiled: List[re.Pattern] = []
    for locale, entries in by_locale.items():
        for entry in entries:
            flags = re.IGNORECASE if entry.get("ignore_case", True) else 0
            try:
                compiled.append(re.compile(entry["regex_pattern"], flags))
            except re.error as e:
                logger.warning(
                    "Invalid %s pattern for locale '%s' skipped: %s (%s)",
                    name,
                    locale,
                    entry["regex_pattern"],
                    e,
                )
    return tuple(compiled)


def validate_catalog(catalog: dict) -> None:
    """
    Check a catalog against PATTERN_CATALOG_SCHEMA.

    Raises:
        CatalogError: If the catalog has an unknown matcher or a malformed entry.
    """
    try:
        validate(instance=catalog, schema=PATTERN_CATALOG_SCHEMA["schema"])
    except ValidationError as e:
        raise CatalogError(f"Invalid pattern catalog: {e.message}") from e


def load_matchers(catalog: Dict[str, Dict[str, List[dict]]]) -> Tuple[Matcher, ...]:
    """
    Build the ordered matcher tuple from a locale pattern catalog.

    Matchers missing from the catalog are built with no patterns (never match).

    Args:
        catalog: {matcher_name: {locale: [{"regex_pattern": ..., "ignore_case": ...}]}}

    Returns:
        Matchers in fixed priority order.
    """
    validate_catalog(catalog)

    matchers: List[Matcher] = []
    for rank, name in enumerate(MATCHER_PRIORITY):
        patterns = compile_patterns(name, catalog.get(name, {}))
        matchers.append(
            Matcher(
                name=name,
                rank=rank,
                category=MATCHER_CATEGORY[name],
                patterns=patterns,
            )
        )
        logger.debug("Loaded matcher %s with %d patterns", name, len(patterns))

    return tuple(matchers)
