from __future__ import annotations

from typing import List

from ocr_uploader.api import language_name

from .uploader import OcrUploader


def render_state(form: OcrUploader) -> str:
    """Render what the form currently displays as plain text."""
    if form.in_progress:
        return "Processing..."

    state = form.state
    sections: List[str] = []
    if state.extracted_text:
        sections.append(f"Recognized text:\n{state.extracted_text}")
    if state.translated_text:
        lines = ["Translation:"]
        if state.detected_language:
            name = language_name(state.detected_language)
            label = f"{state.detected_language} ({name})" if name else state.detected_language
            lines.append(f"Detected language: {label}")
        lines.append(state.translated_text)
        sections.append("\n".join(lines))
    if state.error_message:
        sections.append(f"Error: {state.error_message}")
    return "\n\n".join(sections)
