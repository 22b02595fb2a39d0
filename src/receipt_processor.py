"""
Receipt Processing Pipeline
Turns an Italian receipt (image or OCR text) into a ScanResult.

Workflow:
1. (image only) strip data-URL prefix, validate, run OCR once
2. Extract amount, date and merchant from the text
3. Score how complete the extraction was
"""

import json
import sys
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from exceptions import InvalidRequestError
from extractor import ConfidenceScorer, ExtractorFactory
from ocr_engine import GoogleVisionOCR, OCRProvider
from scan_result import ScanResult
from utils import format_processing_time, setup_logging, strip_data_url


class ReceiptProcessor:
    """
    End-to-end receipt scanning pipeline

    The text stage (process_text) is pure and never raises.  Only
    process_image can fail, and only at the OCR boundary or on empty input.
    """

    def __init__(
        self,
        ocr_provider: Optional[OCRProvider] = None,
        config_path: Optional[str] = None,
    ):
        self._ocr_provider = ocr_provider
        self._config_path = config_path
        self.factory = ExtractorFactory()
        self.scorer = ConfidenceScorer()

    @property
    def ocr_provider(self) -> OCRProvider:
        # Built on first use so text-only callers never need OCR config
        if self._ocr_provider is None:
            self._ocr_provider = GoogleVisionOCR(self._config_path)
        return self._ocr_provider

    def process_text(self, raw_text: Optional[str]) -> ScanResult:
        """
        Extract structured data from one OCR text block.

        Args:
            raw_text: Text exactly as returned by OCR

        Returns:
            ScanResult (fields may be None; confidence reflects that)
        """
        raw_text = raw_text or ""

        amount   = self.factory.get_extractor("amount").extract(raw_text)
        date     = self.factory.get_extractor("date").extract(raw_text)
        merchant = self.factory.get_extractor("merchant").extract(raw_text)

        confidence = self.scorer.score(
            amount is not None, date is not None, merchant is not None
        )

        result = ScanResult(
            amount=amount,
            date=date,
            merchant=merchant,
            confidence=confidence,
            raw_text=raw_text,
        )

        logger.info(
            f"[ReceiptProcessor] merchant={merchant!r} date={date!r} "
            f"amount={amount!r} confidence={confidence}"
        )
        return result

    def process_image(self, image: Optional[str]) -> ScanResult:
        """
        OCR a base64 receipt image, then extract structured data.

        Args:
            image: base64 image content, optionally as a data URL

        Raises:
            InvalidRequestError: no image supplied
            ConfigurationError / ProcessingError: from the OCR provider
        """
        if not image or not image.strip():
            raise InvalidRequestError("No image provided")

        image_base64 = strip_data_url(image)
        if not image_base64:
            raise InvalidRequestError("No image provided")

        start_time = time.time()
        text = self.ocr_provider.extract_text(image_base64)
        result = self.process_text(text)

        elapsed = (time.time() - start_time) * 1000
        logger.info(f"Receipt scanned in {format_processing_time(elapsed)} "
                    f"({result.fields_found}/3 fields)")
        return result


def main():
    """Scan OCR text files from the command line and print JSON results"""
    setup_logging(log_file=None, level="WARNING")

    if len(sys.argv) < 2:
        print("Usage: python src/receipt_processor.py <ocr_text_file> [...]")
        sys.exit(1)

    processor = ReceiptProcessor()
    for path in sys.argv[1:]:
        text = Path(path).read_text(encoding="utf-8")
        result = processor.process_text(text)
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
