"""Errors raised while submitting an image to the OCR service.

The form layer catches every `OcrUploaderError` and turns it into the
message shown in the error slot; nothing here is meant to reach the caller
of `OcrUploader.submit`.
"""

from __future__ import annotations

from typing import Optional


class OcrUploaderError(RuntimeError):
    """Base class; `str(exc)` is the user-facing message."""


class ValidationError(OcrUploaderError):
    """The active input mode has no value. Raised before any request is built."""


class ServerError(OcrUploaderError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.structured = bool(message)
        super().__init__(message if message else f"Error {status_code}: {reason}")


class TransportError(OcrUploaderError):
    """Network failure, timeout or a response body that could not be parsed."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"Network error: {cause}")
