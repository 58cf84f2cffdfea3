"""Image payloads for the file-upload input mode.

Uploaded bytes are sent as-is; Pillow is only used to recognise the image
format so the multipart part carries a sensible content type.
"""

from __future__ import annotations

import io
import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

FALLBACK_CONTENT_TYPE = "application/octet-stream"


def guess_image_content_type(data: bytes) -> str:
    """Return the MIME type of an encoded image, or a generic binary type.

    Doxygen:
    - @param data: Encoded image bytes (PNG, JPEG, ...).
    - @return: MIME type such as 'image/png'; FALLBACK_CONTENT_TYPE if unknown.
    """
    if not data:
        return FALLBACK_CONTENT_TYPE
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError):
        return FALLBACK_CONTENT_TYPE
    return Image.MIME.get(fmt or "", FALLBACK_CONTENT_TYPE)


@dataclass(frozen=True)
class FileInput:
    """A locally selected image file."""

    data: bytes
    filename: str = "image"
    content_type: str = FALLBACK_CONTENT_TYPE

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "image") -> "FileInput":
        return cls(data=data, filename=filename, content_type=guess_image_content_type(data))

    @classmethod
    def from_path(cls, path: str) -> "FileInput":
        """Read an image file from disk.

        Doxygen:
        - @param path: Path to the image file.
        - @return: FileInput holding the file bytes.
        - @throws FileNotFoundError: If the path is not an existing regular file.
        - @throws OSError: If the file cannot be read.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Image file not found: {path}")
        with open(path, "rb") as f:
            data = f.read()
        return cls.from_bytes(data, filename=os.path.basename(path))

    def as_multipart(self):
        return (self.filename, self.data, self.content_type)
