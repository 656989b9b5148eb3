"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

USER_ROLE = "user"
SAFETY_FINISH_REASON = "SAFETY"


@dataclass(frozen=True, slots=True)
class Part:
    """Smallest unit of content; text only."""

    text: str | None = None


@dataclass(frozen=True, slots=True)
class Content:
    """A role-tagged ordered list of parts (request and response)."""

    role: str | None = None
    parts: list[Part | None] | None = None


@dataclass(frozen=True, slots=True)
class Candidate:
    """One generated alternative returned by the provider."""

    finish_reason: str | None = None
    content: Content | None = None


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Wire request: exactly one user content holding exactly one text part."""

    contents: list[Content] = field(default_factory=list)

    @classmethod
    def for_prompt(cls, text: str) -> GenerationRequest:
        """Build the canonical single-content / single-part request."""
        return cls(contents=[Content(role=USER_ROLE, parts=[Part(text=text)])])

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-serialisable body sent to the provider."""
        return {
            "contents": [
                {
                    "role": content.role,
                    "parts": [{"text": part.text} for part in content.parts or [] if part is not None],
                }
                for content in self.contents
            ]
        }


@dataclass(frozen=True, slots=True)
class GenerationResponse:
    """Wire response: zero or more candidates (the list itself may be absent)."""

    candidates: list[Candidate | None] | None = None


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """What the transport hands back: HTTP status plus a nullable typed body."""

    status_code: int
    body: GenerationResponse | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
