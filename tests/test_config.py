import pytest
from pydantic import ValidationError

from advertorial.config import Settings


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "PORT", "OPENAI_MODEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.openai_model == "gpt-4"
    assert settings.is_production is False
    assert settings.allowed_origins == ["http://localhost:5173"]


def test_production_selects_production_origins(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    settings = Settings(_env_file=None)

    assert settings.is_production is True
    assert settings.allowed_origins == ["https://leahboulos96.github.io"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GNEWS_API_KEY", "gnews-key")
    monkeypatch.setenv("DEVELOPMENT_ORIGINS", '["http://localhost:3001"]')

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.gnews_api_key == "gnews-key"
    assert settings.allowed_origins == ["http://localhost:3001"]


def test_log_level_is_normalised():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")
