"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel


class GenerateRequest(BaseModel):
    """Request body for ``POST /generate``.

    ``prompt`` is nullable on purpose: blank and missing prompts are
    rejected by the gateway itself, not by request validation.
    """

    prompt: str | None = None


class GenerateResponse(BaseModel):
    """Successful response from ``POST /generate``."""

    text: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
