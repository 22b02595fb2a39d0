"""
Confidence Scorer
=================
0–100 score from which fields were extracted.  Nothing else feeds in, so a
given combination of present fields always scores the same.

  amount   +40
  date     +30
  merchant +30
  all three present → +10 bonus, result capped at 100
"""

AMOUNT_WEIGHT = 40
DATE_WEIGHT = 30
MERCHANT_WEIGHT = 30
COMPLETE_BONUS = 10
MAX_SCORE = 100


class ConfidenceScorer:

    def score(self, has_amount: bool, has_date: bool, has_merchant: bool) -> int:
        total = 0
        if has_amount:
            total += AMOUNT_WEIGHT
        if has_date:
            total += DATE_WEIGHT
        if has_merchant:
            total += MERCHANT_WEIGHT
        if has_amount and has_date and has_merchant:
            total += COMPLETE_BONUS
        return min(total, MAX_SCORE)
