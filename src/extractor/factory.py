"""
Extractor Factory
=================
Hands out the extractor for a ScanResult field.

Usage
-----
    factory   = ExtractorFactory()
    extractor = factory.get_extractor("amount")
    amount    = extractor.extract(text)
"""

from extractor.base_extractor import BaseExtractor
from extractor.amount_extractor import AmountExtractor
from extractor.date_extractor import DateExtractor
from extractor.merchant_extractor import MerchantExtractor

from loguru import logger


class ExtractorFactory:
    """
    Returns the extractor for a given field name.

    Extractors hold no per-call state, so one instance per field is shared
    by every caller.
    """

    _EXTRACTORS: dict[str, BaseExtractor] = {}   # lazy-initialized singletons

    # ── Mapping: field → extractor class ──────────────────────────────────────
    _CLASSES = {
        "amount":   AmountExtractor,
        "date":     DateExtractor,
        "merchant": MerchantExtractor,
    }

    def get_extractor(self, field_name: str) -> BaseExtractor:
        """
        Return a (cached) extractor instance for the given field.

        Raises
        ------
        KeyError if field_name is not one of 'amount', 'date', 'merchant'.
        """
        if field_name not in self._CLASSES:
            raise KeyError(
                f"No extractor for field '{field_name}'. "
                f"Supported: {', '.join(self._CLASSES)}"
            )

        if field_name not in self._EXTRACTORS:
            cls = self._CLASSES[field_name]
            self._EXTRACTORS[field_name] = cls()
            logger.debug(f"[ExtractorFactory] Initialised {cls.__name__}")

        return self._EXTRACTORS[field_name]

    @property
    def supported_fields(self) -> list:
        return list(self._CLASSES.keys())
