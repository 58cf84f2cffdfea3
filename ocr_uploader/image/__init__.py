"""Image payload helpers for uploads (bytes, file name, content type)."""

from .payload import (
    FALLBACK_CONTENT_TYPE,
    FileInput,
    guess_image_content_type,
)

__all__ = [
    "FALLBACK_CONTENT_TYPE",
    "FileInput",
    "guess_image_content_type",
]
