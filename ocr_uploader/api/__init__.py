"""OCR service API layer.

Request building, dispatch and response parsing for the hosted OCR service
(`/ocr` and `/ocr-translate`), plus the supported target languages.
"""

from .client import (
    get_service_client,
    build_request,
    submit,
)
from .languages import (
    LANGUAGES,
    language_name,
    normalize_and_validate_target_language,
)
from .model import ImageSource, InputMode, UrlInput, Workflow
from .response import (
    NO_TEXT_PLACEHOLDER,
    NO_TRANSLATION_PLACEHOLDER,
    OcrResult,
    normalize_extracted_text,
    parse_response,
)

__all__ = [
    "get_service_client",
    "build_request",
    "submit",
    "LANGUAGES",
    "language_name",
    "normalize_and_validate_target_language",
    "ImageSource",
    "InputMode",
    "UrlInput",
    "Workflow",
    "NO_TEXT_PLACEHOLDER",
    "NO_TRANSLATION_PLACEHOLDER",
    "OcrResult",
    "normalize_extracted_text",
    "parse_response",
]
