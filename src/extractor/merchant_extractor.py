"""
Merchant Extractor
==================
The shop name is almost always printed at the very top of an Italian
receipt, above the fiscal boilerplate.  We look at the first few non-empty
lines and take the first one that is not boilerplate.

Skipped lines (case-insensitive, matched at line start):
  SCONTRINO / RICEVUTA / DOCUMENTO / FISCALE    document headers
  P.IVA / P.I. / C.F. / REG.                    tax and registration ids
  DATA / ORA / CASSA                            timestamp / till lines
  TOTALE / TOT / SUBTOT / RESTO                 money lines
  12,50                                         bare amounts
  15/03/2024                                    bare dates and numbers
"""

import re
from typing import Optional

from extractor.base_extractor import BaseExtractor
from loguru import logger


MAX_LINES_SCANNED = 5
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 50

SKIP_LINE_PATTERNS = (
    re.compile(r'^(SCONTRINO|RICEVUTA|DOCUMENTO|FISCALE)', re.IGNORECASE),
    re.compile(r'^(P\.IVA|P\.I\.|C\.F\.|REG\.)', re.IGNORECASE),
    re.compile(r'^(DATA|ORA|CASSA)', re.IGNORECASE),
    re.compile(r'^(TOTALE|TOT|SUBTOT|RESTO)', re.IGNORECASE),
    re.compile(r'^\d+[,\.]\d{2}$'),
    re.compile(r'^[\d/\-\.]+$'),
)

# Anything that is not a letter (accented included), digit, space, hyphen
# or apostrophe.  \w also covers '_', which is not allowed in a name.
_DISALLOWED = re.compile(r"[^\w\s\-']|_")


def is_boilerplate(line: str) -> bool:
    return any(p.search(line) for p in SKIP_LINE_PATTERNS)


def clean_name(line: str) -> str:
    return _DISALLOWED.sub('', line).strip()


class MerchantExtractor(BaseExtractor):
    field_name = "merchant"

    def _extract(self, text: str) -> Optional[str]:
        for line in self._lines(text)[:MAX_LINES_SCANNED]:
            if is_boilerplate(line):
                logger.debug(f"[MerchantExtractor] skip boilerplate {line!r}")
                continue
            cleaned = clean_name(line)
            if MIN_NAME_LENGTH <= len(cleaned) <= MAX_NAME_LENGTH:
                return cleaned
        return None
