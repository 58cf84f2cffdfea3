from __future__ import annotations

from typing import Dict, List, Tuple


LANGUAGES: List[Tuple[str, str]] = [
    ("es", "Spanish"),
    ("en", "English"),
    ("fr", "French"),
    ("de", "German"),
    ("it", "Italian"),
    ("pt", "Portuguese"),
]

_CODE_TO_NAME: Dict[str, str] = dict(LANGUAGES)


def language_name(code: str | None) -> str | None:
    if not code:
        return None
    return _CODE_TO_NAME.get(str(code).strip().lower())


def normalize_and_validate_target_language(code: str) -> str:
    if not code:
        raise ValueError("Target language code must be provided, e.g. 'es', 'en', 'fr'.")
    norm = str(code).strip().lower()
    if norm not in _CODE_TO_NAME:
        allowed = ", ".join(c for c, _ in LANGUAGES)
        raise ValueError(f"Unsupported target language: '{code}'. Allowed values: {allowed}.")
    return norm


__all__ = [
    "LANGUAGES",
    "language_name",
    "normalize_and_validate_target_language",
]
