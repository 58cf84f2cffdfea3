from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "service.json")

DEFAULT_API_BASE = "http://127.0.0.1:5000/api"
DEFAULT_TIMEOUT = 60.0
DEFAULT_TARGET_LANGUAGE = "es"


@dataclass(frozen=True)
class ServiceSettings:
    """Where the OCR service lives and how long to wait for it."""

    api_base: str = DEFAULT_API_BASE
    timeout: Optional[float] = DEFAULT_TIMEOUT
    default_target_language: str = DEFAULT_TARGET_LANGUAGE

    def with_overrides(self, api_base: Optional[str] = None, timeout: Optional[float] = None) -> "ServiceSettings":
        """Return a copy with CLI-provided values applied (None keeps the current value)."""
        out = self
        if api_base:
            out = replace(out, api_base=api_base)
        if timeout is not None:
            out = replace(out, timeout=_normalize_timeout(timeout))
        return out


def _normalize_timeout(value: Any) -> Optional[float]:
    timeout = float(value)
    return None if timeout <= 0 else timeout


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f) or {}


def load_service_settings(path: str = CONFIG_PATH) -> ServiceSettings:
    """Load service settings from config/service.json.

    Missing file, unreadable JSON or bad values print a warning and fall back
    to the built-in defaults for the affected keys.
    """
    settings = ServiceSettings()

    if not os.path.exists(path):
        print(f"Warning: service.json not found at {path}; using defaults")
        return settings

    try:
        cfg = _load_config(path)
    except Exception as exc:
        print(f"Warning: Could not load service settings from {path}: {exc}")
        return settings

    if not isinstance(cfg, dict):
        print(f"Warning: {path} must contain a JSON object; using defaults")
        return settings

    api_base = cfg.get("api_base")
    if api_base:
        settings = replace(settings, api_base=str(api_base))

    if "timeout" in cfg:
        try:
            settings = replace(settings, timeout=_normalize_timeout(cfg["timeout"]))
        except (TypeError, ValueError):
            print(f"Warning: invalid timeout in service.json: {cfg['timeout']!r}")

    lang = cfg.get("default_target_language")
    if lang:
        settings = replace(settings, default_target_language=str(lang).strip().lower())

    return settings
