"""Parsing of OCR service responses.

The service is not consistent about the shape of the recognised text: it
returns either a single string or a list of lines. Both are accepted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ocr_uploader.errors import ServerError, TransportError

from .model import Workflow

NO_TEXT_PLACEHOLDER = "Could not extract text"
NO_TRANSLATION_PLACEHOLDER = "Could not translate"


@dataclass(frozen=True)
class OcrResult:
    extracted_text: str
    translated_text: Optional[str] = None
    detected_language: Optional[str] = None


def normalize_extracted_text(value: Any, placeholder: str = NO_TEXT_PLACEHOLDER) -> str:
    """Turn a `texto` / `texto_extraido` value into display text.

    Doxygen:
    - @param value: List of lines, a string, or None.
    - @param placeholder: Text used when the value is missing or empty.
    - @return: Lines joined with newlines, the string itself, or the placeholder.
    """
    if isinstance(value, (list, tuple)):
        return "\n".join("" if item is None else str(item) for item in value)
    if not value:
        return placeholder
    return str(value)


def parse_ocr_payload(workflow: Workflow, data: Dict[str, Any]) -> OcrResult:
    """Build the displayed result from a successful response body."""
    if workflow.translates:
        translated = data.get("texto_traducido")
        detected = data.get("idioma_detectado")
        return OcrResult(
            extracted_text=normalize_extracted_text(data.get("texto_extraido")),
            translated_text=str(translated) if translated else NO_TRANSLATION_PLACEHOLDER,
            detected_language=str(detected) if detected else None,
        )
    return OcrResult(extracted_text=normalize_extracted_text(data.get("texto")))


def _read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TransportError(f"invalid JSON in response body ({e})") from e


def parse_response(workflow: Workflow, response: httpx.Response) -> OcrResult:
    """Map an HTTP response to a result or raise the matching error.

    Doxygen:
    - @param workflow: Workflow the request was sent for.
    - @param response: Received (and read) HTTP response.
    - @return: OcrResult for 2xx responses.
    - @throws ServerError: For non-2xx responses.
    - @throws TransportError: If a 2xx body is not a JSON object.
    """
    if not response.is_success:
        message = None
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            data = None
        if isinstance(data, dict) and data.get("error"):
            message = str(data["error"])
        raise ServerError(response.status_code, response.reason_phrase, message)

    data = _read_json(response)
    if not isinstance(data, dict):
        raise TransportError(f"expected a JSON object in response body, got {type(data).__name__}")
    return parse_ocr_payload(workflow, data)


__all__ = [
    "NO_TEXT_PLACEHOLDER",
    "NO_TRANSLATION_PLACEHOLDER",
    "OcrResult",
    "normalize_extracted_text",
    "parse_ocr_payload",
    "parse_response",
]
