import io

import pytest
from PIL import Image

from ocr_uploader.image import FALLBACK_CONTENT_TYPE, FileInput, guess_image_content_type


def _encode(fmt):
    buf = io.BytesIO()
    Image.new("RGB", (10, 10), (200, 200, 200)).save(buf, format=fmt)
    return buf.getvalue()


def test_guess_image_content_type_png_and_jpeg():
    assert guess_image_content_type(_encode("PNG")) == "image/png"
    assert guess_image_content_type(_encode("JPEG")) == "image/jpeg"


def test_guess_image_content_type_unknown_bytes():
    assert guess_image_content_type(b"definitely not an image") == FALLBACK_CONTENT_TYPE
    assert guess_image_content_type(b"") == FALLBACK_CONTENT_TYPE


def test_file_input_from_path(tmp_path):
    path = tmp_path / "scan.png"
    path.write_bytes(_encode("PNG"))
    image = FileInput.from_path(str(path))
    assert image.filename == "scan.png"
    assert image.content_type == "image/png"
    assert image.as_multipart() == ("scan.png", path.read_bytes(), "image/png")


def test_file_input_from_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileInput.from_path(str(tmp_path / "missing.png"))


def test_file_input_from_directory_is_rejected(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileInput.from_path(str(tmp_path))
