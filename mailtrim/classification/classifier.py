"""
Line Classifier — one category code per line.

Applies the matchers in fixed priority order and returns the category of the
first positive; lines no matcher claims are Text. Classification is total and
deterministic.
"""
import logging
from typing import Dict, Iterable, Optional, Tuple

from mailtrim.classification.matchers import Matcher, load_matchers
from mailtrim.config import settings
from mailtrim.config.constants import TEXT
from mailtrim.config.patterns import PATTERN_CATALOG
from mailtrim.models.line import ClassifiedDocument, Line

logger = logging.getLogger(__name__)


class LineClassifier:
    """Ordered matcher chain with Text as fallback."""

    def __init__(self, matchers: Tuple[Matcher, ...]):
        self._matchers = tuple(sorted(matchers, key=lambda m: m.rank))
        self._by_name: Dict[str, Matcher] = {m.name: m for m in self._matchers}

    @classmethod
    def from_catalog(cls, catalog: dict) -> "LineClassifier":
        """Build a classifier from a (validated) locale pattern catalog."""
        return cls(load_matchers(catalog))

    def matcher(self, name: str) -> Optional[Matcher]:
        return self._by_name.get(name)

    def classify(self, line: str) -> str:
        for matcher in self._matchers:
            if matcher.matches(line):
                return matcher.category
        return TEXT

    def classify_lines(self, lines: Iterable[str]) -> ClassifiedDocument:
        """Classify every line, keeping index correspondence."""
        document = ClassifiedDocument()
        for index, text in enumerate(lines):
            code = self.classify(text)
            document.lines.append(Line(index=index, text=text, code=code))
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "line %d [%s] %r",
                    index,
                    code,
                    text[: settings.MAX_LINE_LOG_CHARS],
                )
        return document


# Module-level default classifier, built once from the bundled catalog
line_classifier = LineClassifier.from_catalog(PATTERN_CATALOG)
