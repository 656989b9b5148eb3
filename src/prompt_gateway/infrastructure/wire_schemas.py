"""Pydantic models for the ``generateContent`` response body.

Only the fields the gateway reads are declared; everything else the
provider sends (``safetyRatings``, ``usageMetadata``, ...) is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from prompt_gateway.domain.entities import (
    Candidate,
    Content,
    GenerationResponse,
    Part,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PartSchema(_WireModel):
    text: str | None = None

    def to_entity(self) -> Part:
        return Part(text=self.text)


class ContentSchema(_WireModel):
    role: str | None = None
    parts: list[PartSchema | None] | None = None

    def to_entity(self) -> Content:
        parts = None
        if self.parts is not None:
            parts = [p.to_entity() if p is not None else None for p in self.parts]
        return Content(role=self.role, parts=parts)


class CandidateSchema(_WireModel):
    finish_reason: str | None = Field(default=None, alias="finishReason")
    content: ContentSchema | None = None

    def to_entity(self) -> Candidate:
        return Candidate(
            finish_reason=self.finish_reason,
            content=self.content.to_entity() if self.content is not None else None,
        )


class GenerationResponseSchema(_WireModel):
    """Top-level response body."""

    candidates: list[CandidateSchema | None] | None = None

    def to_entity(self) -> GenerationResponse:
        candidates = None
        if self.candidates is not None:
            candidates = [c.to_entity() if c is not None else None for c in self.candidates]
        return GenerationResponse(candidates=candidates)
