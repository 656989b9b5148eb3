"""Port: generation transport — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

from prompt_gateway.domain.entities import TransportResponse


class GenerationTransport(Protocol):
    """Abstract contract for POSTing a JSON body to the provider."""

    async def post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        """POST *payload* as JSON and return the status with a nullable typed body.

        Non-2xx statuses are returned, not raised.  Connection failures,
        timeouts, and undecodable bodies are raised.
        """
        ...
