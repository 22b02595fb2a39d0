"""
Shared fixtures for receipt scanner tests
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ocr_engine import OCRProvider


CAFFE_RECEIPT = """SCONTRINO FISCALE
P.IVA 01234567890
Bar Centrale
Via Roma 12, Milano
CAFFE'            1,20
CORNETTO          1,50
TOTALE EUR        2,70
DATA 15/03/2024 ORA 08:45
"""


class FakeOCR(OCRProvider):
    """Returns canned text, or raises a canned error, and records calls."""

    name = "fake"

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    def extract_text(self, image_base64: str) -> str:
        self.calls.append(image_base64)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def caffe_receipt():
    return CAFFE_RECEIPT


@pytest.fixture
def fake_ocr():
    return FakeOCR(CAFFE_RECEIPT)
