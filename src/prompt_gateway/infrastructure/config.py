"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from prompt_gateway.domain.value_objects import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    GenerationEndpoint,
)


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gemini_api_key: SecretStr
    gemini_model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_BASE_URL
    request_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def endpoint(self) -> GenerationEndpoint:
        """Resolve the ``generateContent`` endpoint for the configured model."""
        return GenerationEndpoint(
            api_key=self.gemini_api_key.get_secret_value(),
            model=self.gemini_model,
            base_url=self.gemini_base_url,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()  # type: ignore[call-arg]
