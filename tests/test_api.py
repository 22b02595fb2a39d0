"""
Tests for the HTTP API
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path (main.py lives there)
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import app
from api.routes import get_processor
from conftest import FakeOCR
from exceptions import ConfigurationError, NoTextDetectedError
from receipt_processor import ReceiptProcessor


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_ocr(ocr):
    processor = ReceiptProcessor(ocr_provider=ocr)
    app.dependency_overrides[get_processor] = lambda: processor
    return processor


def test_scan_receipt(client, fake_ocr, caffe_receipt):
    use_ocr(fake_ocr)

    response = client.post(
        "/api/v1/receipts/scan",
        json={"image": "data:image/jpeg;base64,QUJD"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "amount": 2.7,
        "date": "2024-03-15",
        "merchant": "Bar Centrale",
        "confidence": 100,
        "rawText": caffe_receipt,
    }
    assert fake_ocr.calls == ["QUJD"]


def test_scan_partial_result_is_not_an_error(client):
    use_ocr(FakeOCR("TOTALE 12,50"))

    response = client.post("/api/v1/receipts/scan", json={"image": "QUJD"})

    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == 12.5
    assert data["date"] is None
    assert data["merchant"] is None
    assert data["confidence"] == 40


@pytest.mark.parametrize("body", [{}, {"image": ""}, {"image": None}])
def test_scan_without_image(client, fake_ocr, body):
    use_ocr(fake_ocr)

    response = client.post("/api/v1/receipts/scan", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "No image provided", "code": "invalid_request"}
    assert fake_ocr.calls == []


def test_scan_config_error(client):
    use_ocr(FakeOCR(error=ConfigurationError("Google Vision API key not configured")))

    response = client.post("/api/v1/receipts/scan", json={"image": "QUJD"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Google Vision API key not configured",
        "code": "config_error",
    }


def test_scan_no_text_detected(client):
    use_ocr(FakeOCR(error=NoTextDetectedError()))

    response = client.post("/api/v1/receipts/scan", json={"image": "QUJD"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to process receipt: No text detected in image",
        "code": "processing_error",
    }


def test_scan_unexpected_error(client):
    use_ocr(FakeOCR(error=RuntimeError("kaboom")))

    response = client.post("/api/v1/receipts/scan", json={"image": "QUJD"})

    assert response.status_code == 500
    data = response.json()
    assert data["code"] == "processing_error"
    assert "kaboom" in data["error"]
    assert "amount" not in data


def test_parse_text(client, fake_ocr):
    use_ocr(fake_ocr)

    response = client.post(
        "/api/v1/receipts/parse",
        json={"text": "Gelateria Dolce Vita\n3 Gennaio 2023\n€ 4,50"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["merchant"] == "Gelateria Dolce Vita"
    assert data["date"] == "2023-01-03"
    assert data["amount"] == 4.5
    assert data["confidence"] == 100
    assert fake_ocr.calls == []


def test_parse_blank_text(client):
    response = client.post("/api/v1/receipts/parse", json={"text": "   "})

    assert response.status_code == 400
    assert response.json()["code"] == "invalid_request"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_cors_preflight(client):
    response = client.options(
        "/api/v1/receipts/scan",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
