from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class ResultState:
    """What the form currently displays. Empty strings/None mean nothing to show."""

    extracted_text: str = ""
    translated_text: Optional[str] = None
    detected_language: Optional[str] = None
    error_message: Optional[str] = None

    def clear(self) -> None:
        self.extracted_text = ""
        self.translated_text = None
        self.detected_language = None
        self.error_message = None

    @property
    def has_result(self) -> bool:
        return bool(self.extracted_text or self.translated_text)

    @property
    def is_empty(self) -> bool:
        return not self.has_result and not self.detected_language and not self.error_message
