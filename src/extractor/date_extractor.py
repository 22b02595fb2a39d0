"""
Date Extractor
==============
Finds the transaction date and returns it as ISO 'YYYY-MM-DD'.

Supported layouts, most specific first:
  1. 15/03/2024  15-03-2024  15.03.2024
  2. 15/03/24                              (year → 2024)
  3. 15 DIC 2024  3 Gennaio 2023           (Italian month names)

Every candidate is checked against the real calendar, so '31/02/2024'
yields no date rather than a nonexistent one.
"""

import re
from datetime import date
from types import MappingProxyType
from typing import Optional

from extractor.base_extractor import RuleBasedExtractor, compile_rule


MONTH_LOOKUP = MappingProxyType({
    'GEN': '01', 'GENNAIO':   '01',
    'FEB': '02', 'FEBBRAIO':  '02',
    'MAR': '03', 'MARZO':     '03',
    'APR': '04', 'APRILE':    '04',
    'MAG': '05', 'MAGGIO':    '05',
    'GIU': '06', 'GIUGNO':    '06',
    'LUG': '07', 'LUGLIO':    '07',
    'AGO': '08', 'AGOSTO':    '08',
    'SET': '09', 'SETTEMBRE': '09',
    'OTT': '10', 'OTTOBRE':   '10',
    'NOV': '11', 'NOVEMBRE':  '11',
    'DIC': '12', 'DICEMBRE':  '12',
})

_MONTH_ABBREVIATIONS = '|'.join(k for k in MONTH_LOOKUP if len(k) == 3)


def iso_date(year: str, month: str, day: str) -> Optional[str]:
    """Zero-padded ISO string, or None if the day does not exist."""
    try:
        return date(int(year), int(month), int(day)).isoformat()
    except ValueError:
        return None


def _numeric_date(m: re.Match) -> Optional[str]:
    day, month, year = m.group(1), m.group(2), m.group(3)
    if len(year) == 2:
        year = '20' + year
    return iso_date(year, month, day)


def _written_date(m: re.Match) -> Optional[str]:
    month = MONTH_LOOKUP.get(m.group(2).upper()[:3])
    if month is None:
        return None
    return iso_date(m.group(3), month, m.group(1))


DATE_RULES = (
    compile_rule("numeric_full_year",
                 r'(\d{1,2})[/\-\.](\d{1,2})[/\-\.](\d{4})',
                 _numeric_date),
    compile_rule("numeric_short_year",
                 r'(\d{1,2})[/\-\.](\d{1,2})[/\-\.](\d{2})',
                 _numeric_date),
    compile_rule("italian_month_name",
                 r'(\d{1,2})\s+((?:' + _MONTH_ABBREVIATIONS + r')\w*)\s+(\d{4})',
                 _written_date, re.IGNORECASE),
)


class DateExtractor(RuleBasedExtractor):
    field_name = "date"
    RULES = DATE_RULES
