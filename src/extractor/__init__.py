"""
Extractor package: rule-based field extractors for Italian receipts.

One extractor per ScanResult field (amount, date, merchant) plus the
ConfidenceScorer that rates how complete the extraction was.  Every
extractor is a pure function of the OCR text.

Usage (via factory)
-------------------
from extractor import ExtractorFactory
factory = ExtractorFactory()
amount  = factory.get_extractor("amount").extract(text)
"""

from extractor.factory import ExtractorFactory
from extractor.confidence import ConfidenceScorer

__all__ = ["ExtractorFactory", "ConfidenceScorer"]
