"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from prompt_gateway.domain.exceptions import InvalidPromptError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.0-flash"


@dataclass(frozen=True, slots=True)
class Prompt:
    """Validated user prompt.

    The stored ``text`` is exactly what the caller supplied: it is checked
    for blankness but never trimmed or otherwise transformed.
    """

    text: str

    @classmethod
    def from_string(cls, value: str | None) -> Prompt:
        """Validate a raw prompt string."""
        if value is None or not value.strip():
            msg = "Prompt cannot be empty"
            logger.warning(msg)
            raise InvalidPromptError(msg)
        return cls(text=value)


@dataclass(frozen=True, slots=True)
class GenerationEndpoint:
    """Resolved ``generateContent`` endpoint for one model.

    The provider expects the API key as a ``key`` query parameter, so the
    full URL is a credential; ``repr`` and :attr:`redacted_url` hide it.
    """

    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.model}:generateContent?key={self.api_key}"

    @property
    def redacted_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.model}:generateContent?key=***"
