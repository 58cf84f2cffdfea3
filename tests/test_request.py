import json

import httpx
import pytest

from ocr_uploader.api import UrlInput, Workflow, build_request, get_service_client
from ocr_uploader.config import ServiceSettings
from ocr_uploader.image import FileInput


def _client():
    return get_service_client(ServiceSettings(api_base="https://ocr.test/api", timeout=5.0))


def test_url_mode_ocr_sends_json_without_target():
    with _client() as client:
        request = build_request(client, Workflow.OCR, UrlInput("https://img.test/a.png"), "fr")
    assert request.method == "POST"
    assert str(request.url) == "https://ocr.test/api/ocr"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"url": "https://img.test/a.png"}


def test_url_mode_translate_sends_target_to_translate_path():
    with _client() as client:
        request = build_request(client, Workflow.OCR_TRANSLATE, UrlInput("https://img.test/a.png"), "fr")
    assert request.url.path == "/api/ocr-translate"
    assert json.loads(request.content) == {"url": "https://img.test/a.png", "to": "fr"}


def test_file_mode_ocr_sends_multipart_image_only():
    image = FileInput(data=b"\x89PNGfake", filename="photo.png", content_type="image/png")
    with _client() as client:
        request = build_request(client, Workflow.OCR, image, "de")
    body = request.read()
    assert request.url.path == "/api/ocr"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="image"; filename="photo.png"' in body
    assert b"\x89PNGfake" in body
    assert b'name="to"' not in body


def test_file_mode_translate_adds_target_field():
    image = FileInput(data=b"imagebytes", filename="scan.jpg", content_type="image/jpeg")
    with _client() as client:
        request = build_request(client, Workflow.OCR_TRANSLATE, image, "it")
    body = request.read()
    assert request.url.path == "/api/ocr-translate"
    assert b'name="to"' in body
    assert b"\r\n\r\nit\r\n" in body


def test_base_url_trailing_slash_is_tolerated():
    settings = ServiceSettings(api_base="https://ocr.test/api/")
    with get_service_client(settings) as client:
        request = build_request(client, Workflow.OCR, UrlInput("u"))
    assert str(request.url) == "https://ocr.test/api/ocr"


def test_build_request_rejects_unknown_source():
    with _client() as client:
        with pytest.raises(TypeError):
            build_request(client, Workflow.OCR, "https://img.test/a.png")


def test_request_carries_no_credentials():
    with _client() as client:
        request = build_request(client, Workflow.OCR, UrlInput("https://img.test/a.png"))
    assert "authorization" not in request.headers
    assert "cookie" not in request.headers
    assert isinstance(request, httpx.Request)
