import json

from ocr_uploader.config import (
    DEFAULT_API_BASE,
    DEFAULT_TIMEOUT,
    ServiceSettings,
    load_service_settings,
)


def test_load_service_settings_reads_file(tmp_path):
    path = tmp_path / "service.json"
    path.write_text(json.dumps({
        "api_base": "https://ocr.example/api",
        "timeout": 15,
        "default_target_language": " FR ",
    }), encoding="utf-8")
    settings = load_service_settings(str(path))
    assert settings.api_base == "https://ocr.example/api"
    assert settings.timeout == 15.0
    assert settings.default_target_language == "fr"


def test_missing_file_falls_back_to_defaults(tmp_path, capsys):
    settings = load_service_settings(str(tmp_path / "absent.json"))
    assert settings == ServiceSettings()
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.timeout == DEFAULT_TIMEOUT
    assert "Warning" in capsys.readouterr().out


def test_invalid_json_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "service.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_service_settings(str(path)) == ServiceSettings()
    assert "Could not load service settings" in capsys.readouterr().out


def test_non_positive_timeout_disables_timeout(tmp_path):
    path = tmp_path / "service.json"
    path.write_text(json.dumps({"timeout": 0}), encoding="utf-8")
    settings = load_service_settings(str(path))
    assert settings.timeout is None
    assert settings.api_base == DEFAULT_API_BASE


def test_with_overrides_applies_only_given_values():
    base = ServiceSettings(api_base="https://a.test/api", timeout=30.0)
    assert base.with_overrides() == base
    out = base.with_overrides(api_base="https://b.test/api", timeout=-1)
    assert out.api_base == "https://b.test/api"
    assert out.timeout is None
