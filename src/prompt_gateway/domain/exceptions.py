"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
The gateway raises these; the outermost error-handler translates them.
"""

from __future__ import annotations


class PromptGatewayError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidPromptError(PromptGatewayError):
    """The supplied prompt is missing, empty, or whitespace only."""


# ── Provider API errors ─────────────────────────────────────────────────────


class ApiError(PromptGatewayError):
    """The provider answered with a non-2xx status or without a body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiCommunicationError(ApiError):
    """The transport failed before a usable response was received.

    The original transport exception is always chained as ``__cause__``.
    """


# ── Response content errors ─────────────────────────────────────────────────


class ContentError(PromptGatewayError):
    """A successful response is missing candidates, content, parts, or text."""


class SafetyError(PromptGatewayError):
    """The provider blocked the response with ``finishReason == "SAFETY"``.

    Not a :class:`ContentError`, so callers can present a different message.
    """
