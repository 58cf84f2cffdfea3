"""HTTP client helpers for the OCR service.

This module creates the client, builds the two request shapes (multipart
upload or JSON with an image URL) and performs a single submission.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ocr_uploader.config import ServiceSettings
from ocr_uploader.errors import TransportError
from ocr_uploader.image import FileInput

from .model import ImageSource, UrlInput, Workflow
from .response import OcrResult, parse_response


def get_service_client(settings: ServiceSettings, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Create an HTTP client bound to the service base URL.

    Doxygen:
    - @param settings: Service settings (base URL and timeout).
    - @param transport: Optional transport override (tests use httpx.MockTransport).
    - @return: Configured `httpx.Client`; the caller owns and closes it.
    """
    base = settings.api_base.rstrip("/") + "/"
    return httpx.Client(base_url=base, timeout=settings.timeout, transport=transport)


def build_request(
    client: httpx.Client,
    workflow: Workflow,
    source: ImageSource,
    target_language: Optional[str] = None,
) -> httpx.Request:
    """Build the POST request for a submission without sending it.

    Doxygen:
    - @param client: Client created by `get_service_client`.
    - @param workflow: OCR only or OCR plus translation.
    - @param source: FileInput (multipart upload) or UrlInput (JSON body).
    - @param target_language: Language code; sent only for the translate workflow.
    - @return: Unsent `httpx.Request`.
    - @throws TypeError: If `source` is neither FileInput nor UrlInput.
    """
    if isinstance(source, FileInput):
        data: Dict[str, str] = {}
        if workflow.translates:
            data["to"] = target_language or ""
        return client.build_request(
            "POST",
            workflow.path,
            files={"image": source.as_multipart()},
            data=data or None,
        )
    if isinstance(source, UrlInput):
        body: Dict[str, Any] = {"url": source.url}
        if workflow.translates:
            body["to"] = target_language
        return client.build_request("POST", workflow.path, json=body)
    raise TypeError(f"Unsupported image source: {type(source).__name__}")


def submit(
    client: httpx.Client,
    workflow: Workflow,
    source: ImageSource,
    target_language: Optional[str] = None,
) -> OcrResult:
    """Send exactly one request and return the parsed result.

    No retries are attempted.

    Doxygen:
    - @throws ServerError: Non-2xx response.
    - @throws TransportError: Network failure, timeout or unparseable body.
    """
    # Requests are sent without credentials. The jar is merged into the
    # Cookie header at build time, so it must be empty before building.
    client.cookies.clear()
    request = build_request(client, workflow, source, target_language)
    try:
        response = client.send(request)
    except httpx.HTTPError as e:
        raise TransportError(e) from e
    finally:
        client.cookies.clear()
    try:
        return parse_response(workflow, response)
    finally:
        response.close()


__all__ = [
    "get_service_client",
    "build_request",
    "submit",
]
