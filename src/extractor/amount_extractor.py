"""
Amount Extractor
================
Finds the receipt total in euro.

Italian receipts print amounts with a comma decimal separator ("12,50"),
but OCR and some POS systems produce a period ("12.50").  Both are accepted;
exactly two decimal digits are required.

Rule priority (first syntactic match wins):
  1. currency_prefix   € 12,50 / EUR 12.50
  2. total_label       TOTALE: 12,50 / TOT. € 12,50 / TOTAL 12.50
  3. currency_suffix   12,50 € / 12.50 EUR
  4. payment_label     DA PAGARE 12,50 / IMPORTO: 12,50 / PAGATO 12,50
  5. bare_line         a line holding nothing but 12,50
"""

import re
from typing import Optional

from extractor.base_extractor import RuleBasedExtractor, compile_rule


MIN_AMOUNT = 0.0
MAX_AMOUNT = 100000.0

_NUMBER   = r'(\d+[,\.]\d{2})'
_CURRENCY = r'(?:EUR|€)'


def _to_euro(m: re.Match) -> Optional[float]:
    """'12,50' → 12.5; out-of-range values are rejected."""
    value = float(m.group(1).replace(',', '.'))
    if MIN_AMOUNT < value < MAX_AMOUNT:
        return value
    return None


AMOUNT_RULES = (
    compile_rule("currency_prefix",
                 _CURRENCY + r'\s*' + _NUMBER,
                 _to_euro, re.IGNORECASE),
    compile_rule("total_label",
                 r'(?:TOTALE|TOT\.?|TOTAL)\s*[:=]?\s*' + _CURRENCY + r'?\s*' + _NUMBER,
                 _to_euro, re.IGNORECASE),
    compile_rule("currency_suffix",
                 _NUMBER + r'\s*' + _CURRENCY,
                 _to_euro, re.IGNORECASE),
    compile_rule("payment_label",
                 r'(?:DA PAGARE|IMPORTO|PAGATO)\s*[:=]?\s*' + _CURRENCY + r'?\s*' + _NUMBER,
                 _to_euro, re.IGNORECASE),
    compile_rule("bare_line",
                 r'^\s*' + _NUMBER + r'\s*$',
                 _to_euro, re.MULTILINE),
)


class AmountExtractor(RuleBasedExtractor):
    field_name = "amount"
    RULES = AMOUNT_RULES
