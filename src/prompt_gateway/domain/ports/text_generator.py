"""Port: text generator — what the interface layer depends on."""

from __future__ import annotations

from typing import Protocol


class TextGenerator(Protocol):
    """Abstract contract for turning a single prompt into generated text."""

    async def generate(self, prompt: str | None) -> str:
        """Return the generated text for *prompt* or raise a domain error."""
        ...
