"""
Scan result record returned by ReceiptProcessor.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ScanResult:
    """Structured data read from one receipt."""
    amount: Optional[float] = None     # euro, 0 < amount < 100000
    date: Optional[str] = None         # YYYY-MM-DD
    merchant: Optional[str] = None     # 3–50 chars after cleaning
    confidence: int = 0                # 0–100
    raw_text: str = ""                 # OCR output, verbatim

    @property
    def fields_found(self) -> int:
        return sum(v is not None for v in (self.amount, self.date, self.merchant))

    def to_dict(self) -> Dict:
        """Wire format (camelCase rawText, as the mobile clients expect)."""
        return {
            "amount":     self.amount,
            "date":       self.date,
            "merchant":   self.merchant,
            "confidence": self.confidence,
            "rawText":    self.raw_text,
        }
