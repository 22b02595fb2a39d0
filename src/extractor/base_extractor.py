"""
Base Extractor
==============
Shared machinery for the field extractors.

  - BaseExtractor       common entry point: empty-text guard + logging
  - PatternRule         one (regex, normalizer) pair in a priority list
  - RuleBasedExtractor  walks an ordered tuple of PatternRules

Rule evaluation
---------------
Rules are tried top to bottom.  The FIRST rule whose regex matches anywhere
in the text decides the field: its normalizer either returns a value or
rejects the match (returns None), and in both cases no lower-priority rule
is consulted.  This keeps tie-breaks between competing candidates fixed by
rule order alone.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from loguru import logger


@dataclass(frozen=True)
class PatternRule:
    """A named regex plus the function that turns its match into a value."""
    name: str
    pattern: re.Pattern
    normalize: Callable[[re.Match], Optional[Any]]


class BaseExtractor:
    """
    Abstract base class.  Subclasses implement _extract().

    Call extract(text) → returns the normalized value or None.
    """

    field_name: str = "field"

    def extract(self, text: Optional[str]) -> Optional[Any]:
        if not text or not text.strip():
            return None

        value = self._extract(text)
        logger.debug(f"[{self.__class__.__name__}] {self.field_name}={value!r}")
        return value

    def _extract(self, text: str) -> Optional[Any]:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _extract()"
        )

    @staticmethod
    def _lines(text: str) -> List[str]:
        """Stripped, non-empty lines in reading order."""
        return [l.strip() for l in text.splitlines() if l.strip()]


class RuleBasedExtractor(BaseExtractor):
    """Extractor driven entirely by an ordered tuple of PatternRules."""

    RULES: Tuple[PatternRule, ...] = ()

    def _extract(self, text: str) -> Optional[Any]:
        for rule in self.RULES:
            m = rule.pattern.search(text)
            if not m:
                continue
            value = rule.normalize(m)
            if value is None:
                logger.debug(
                    f"[{self.__class__.__name__}] rule {rule.name!r} matched "
                    f"{m.group(0)!r} but the value was rejected"
                )
            return value
        return None


def compile_rule(name: str, regex: str, normalize: Callable, flags: int = 0) -> PatternRule:
    return PatternRule(name=name, pattern=re.compile(regex, flags), normalize=normalize)
