"""
OCR Engine: image to text
Delegates recognition to Google Cloud Vision (TEXT_DETECTION).

The scanner only needs one thing from OCR: the full text block of the
receipt.  OCRProvider is that contract; GoogleVisionOCR is the production
implementation.  Tests and offline tools can pass any other OCRProvider
to ReceiptProcessor.

Failures map onto the scanner's error categories:
  missing API key          → ConfigurationError
  HTTP / transport failure → ProcessingError
  no text in the image     → NoTextDetectedError
"""

import abc
import os
import time
from typing import Dict, Optional

import httpx
from loguru import logger

from exceptions import ConfigurationError, NoTextDetectedError, ProcessingError
from utils import load_config


class OCRProvider(abc.ABC):
    """Anything that can turn a base64-encoded image into text."""

    name: str = "base"

    @abc.abstractmethod
    def extract_text(self, image_base64: str) -> str:
        """Return the recognized text block, or raise a ReceiptScanError."""


class GoogleVisionOCR(OCRProvider):
    """
    Google Cloud Vision `images:annotate` client.

    One HTTP request per call, no retries.  The API key is read from the
    environment on every call so that a missing key is reported per
    request instead of preventing the service from starting.
    """

    name = "google_vision"

    def __init__(
        self,
        config_path: Optional[str] = None,
        config: Optional[Dict] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config if config is not None else load_config(config_path)
        self._transport = transport

        ocr_config = self.config['ocr']
        self.endpoint = ocr_config['endpoint']
        self.api_key_env = ocr_config.get('api_key_env', 'GOOGLE_VISION_API_KEY')
        self.language_hints = list(ocr_config.get('language_hints', ['it']))
        self.timeout_seconds = float(ocr_config.get('timeout_seconds', 30))

        logger.info(f"Google Vision OCR ready (languages={self.language_hints})")

    def _api_key(self) -> str:
        api_key = os.getenv(self.api_key_env)
        if not api_key:
            raise ConfigurationError("Google Vision API key not configured")
        return api_key

    def build_request(self, image_base64: str) -> Dict:
        ocr_config = self.config['ocr']
        return {
            "requests": [
                {
                    "image": {"content": image_base64},
                    "features": [
                        {
                            "type": ocr_config.get('feature_type', 'TEXT_DETECTION'),
                            "maxResults": ocr_config.get('max_results', 1),
                        }
                    ],
                    "imageContext": {"languageHints": self.language_hints},
                }
            ]
        }

    def extract_text(self, image_base64: str) -> str:
        api_key = self._api_key()
        start_time = time.time()

        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self._transport) as client:
                resp = client.post(
                    self.endpoint,
                    params={"key": api_key},
                    json=self.build_request(image_base64),
                )
        except httpx.HTTPError as e:
            logger.error(f"Google Vision request failed: {e}")
            raise ProcessingError(f"Google Vision API error: {e}") from e

        elapsed_ms = int((time.time() - start_time) * 1000)

        if resp.is_error:
            logger.error(f"Google Vision returned HTTP {resp.status_code} after {elapsed_ms}ms")
            raise ProcessingError(f"Google Vision API error: {resp.text}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ProcessingError(f"Google Vision API error: invalid JSON response ({e})") from e

        return self._parse_response(data, elapsed_ms)

    def _parse_response(self, data: Dict, elapsed_ms: int) -> str:
        responses = data.get("responses") or [{}]
        first = responses[0] or {}

        # Per-image failures come back with HTTP 200 and an error object
        error = first.get("error")
        if error:
            message = error.get("message", "unknown error")
            logger.error(f"Google Vision image error: {message}")
            raise ProcessingError(f"Google Vision API error: {message}")

        annotations = first.get("textAnnotations")
        if not annotations:
            logger.warning(f"No text detected ({elapsed_ms}ms)")
            raise NoTextDetectedError()

        text = annotations[0].get("description") or ""
        logger.info(f"Google Vision extracted {len(text.splitlines())} lines in {elapsed_ms}ms")
        return text
