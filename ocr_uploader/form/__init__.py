"""Upload form view-model: display state, input setters and submission."""

from .model import FormStatus, ResultState
from .uploader import MISSING_FILE_MESSAGE, MISSING_URL_MESSAGE, OcrUploader
from .render import render_state

__all__ = [
    "FormStatus",
    "ResultState",
    "MISSING_FILE_MESSAGE",
    "MISSING_URL_MESSAGE",
    "OcrUploader",
    "render_state",
]
