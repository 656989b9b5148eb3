"""Tests for environment-driven settings."""

import pytest

from prompt_gateway.infrastructure.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_BASE_URL", "REQUEST_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key.get_secret_value() == "env-key"
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.request_timeout_seconds == 30.0
    assert settings.log_level == "INFO"
    assert "env-key" not in repr(settings)


def test_endpoint_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
    monkeypatch.setenv("GEMINI_BASE_URL", "https://example.test/v1/models")

    endpoint = Settings(_env_file=None).endpoint()

    assert endpoint.url == "https://example.test/v1/models/gemini-2.5-flash:generateContent?key=env-key"


def test_api_key_required():
    with pytest.raises(ValueError):
        Settings(_env_file=None)
