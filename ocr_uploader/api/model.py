from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ocr_uploader.image import FileInput


class Workflow(str, Enum):
    """Which service endpoint a submission goes to."""

    OCR = "ocr"
    OCR_TRANSLATE = "ocr-translate"

    @property
    def path(self) -> str:
        return self.value

    @property
    def translates(self) -> bool:
        return self is Workflow.OCR_TRANSLATE


class InputMode(str, Enum):
    FILE = "file"
    URL = "url"


@dataclass(frozen=True)
class UrlInput:
    url: str


ImageSource = Union[FileInput, UrlInput]
