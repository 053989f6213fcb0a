import pytest

from product_service import config
from product_service.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("SERVICE_NAME", "LOG_LEVEL", "JSON_LOGS", "SEED_SAMPLE_DATA", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings == Settings()


def test_from_env(monkeypatch):
    monkeypatch.setenv("SERVICE_NAME", "catalog")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("JSON_LOGS", "true")
    monkeypatch.setenv("SEED_SAMPLE_DATA", "0")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings.from_env()
    assert settings.service_name == "catalog"
    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True
    assert settings.seed_sample_data is False
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setattr(config, "_settings", None)
    assert get_settings() is get_settings()
