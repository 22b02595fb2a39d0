"""
Tests for OCR Engine (Google Vision client)
"""

import json

import httpx
import pytest

from exceptions import ConfigurationError, NoTextDetectedError, ProcessingError
from ocr_engine import GoogleVisionOCR
from utils import default_config


RECEIPT_TEXT = "Bar Centrale\n15/03/2024\nTOTALE € 2,70"


def vision_reply(text=RECEIPT_TEXT):
    return {
        "responses": [
            {
                "textAnnotations": [
                    {"locale": "it", "description": text},
                    {"description": "Bar"},
                ]
            }
        ]
    }


def make_engine(handler, config=None):
    return GoogleVisionOCR(
        config=config or default_config(),
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_VISION_API_KEY", "test-key")
    return "test-key"


def test_extract_text_success(api_key):
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json=vision_reply())

    engine = make_engine(handler)
    text = engine.extract_text("QUJD")

    assert text == RECEIPT_TEXT

    request = seen["request"]
    assert request.method == "POST"
    assert request.url.params["key"] == api_key
    body = json.loads(request.content)
    item = body["requests"][0]
    assert item["image"] == {"content": "QUJD"}
    assert item["features"] == [{"type": "TEXT_DETECTION", "maxResults": 1}]
    assert item["imageContext"] == {"languageHints": ["it"]}


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_VISION_API_KEY", raising=False)
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=vision_reply())

    engine = make_engine(handler)
    with pytest.raises(ConfigurationError, match="not configured"):
        engine.extract_text("QUJD")
    assert calls == []


def test_http_error(api_key):
    def handler(request):
        return httpx.Response(403, text="API key not valid")

    engine = make_engine(handler)
    with pytest.raises(ProcessingError, match="API key not valid"):
        engine.extract_text("QUJD")


def test_transport_error(api_key):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    engine = make_engine(handler)
    with pytest.raises(ProcessingError, match="connection refused"):
        engine.extract_text("QUJD")


def test_image_level_error(api_key):
    def handler(request):
        return httpx.Response(200, json={
            "responses": [{"error": {"code": 3, "message": "Bad image data."}}]
        })

    engine = make_engine(handler)
    with pytest.raises(ProcessingError, match="Bad image data"):
        engine.extract_text("QUJD")


@pytest.mark.parametrize("payload", [
    {"responses": [{}]},
    {"responses": [{"textAnnotations": []}]},
    {"responses": []},
    {},
])
def test_no_text_detected(api_key, payload):
    def handler(request):
        return httpx.Response(200, json=payload)

    engine = make_engine(handler)
    with pytest.raises(NoTextDetectedError, match="No text detected"):
        engine.extract_text("QUJD")


def test_invalid_json(api_key):
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    engine = make_engine(handler)
    with pytest.raises(ProcessingError):
        engine.extract_text("QUJD")


def test_config_from_yaml(tmp_path, monkeypatch):
    config_file = tmp_path / "scanner_config.yaml"
    config_file.write_text(
        "ocr:\n"
        "  api_key_env: CUSTOM_VISION_KEY\n"
        "  endpoint: https://vision.example.test/v1/images:annotate\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CUSTOM_VISION_KEY", "custom")

    engine = GoogleVisionOCR(config_path=str(config_file))

    assert engine.api_key_env == "CUSTOM_VISION_KEY"
    assert engine.endpoint == "https://vision.example.test/v1/images:annotate"
    # Unspecified keys keep their defaults
    assert engine.language_hints == ["it"]
    assert engine.timeout_seconds == 30.0


def test_missing_config_file_uses_defaults(tmp_path):
    engine = GoogleVisionOCR(config_path=str(tmp_path / "nope.yaml"))
    assert engine.endpoint == "https://vision.googleapis.com/v1/images:annotate"
    assert engine.api_key_env == "GOOGLE_VISION_API_KEY"
