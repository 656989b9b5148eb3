"""httpx adapter — implements the GenerationTransport port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from prompt_gateway.domain.entities import TransportResponse
from prompt_gateway.infrastructure.wire_schemas import GenerationResponseSchema

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Concrete ``GenerationTransport`` backed by a shared ``httpx.AsyncClient``.

    Timeouts and pooling are whatever the injected client was built with.
    Network errors, JSON decoding errors and pydantic validation errors
    propagate unchanged; the gateway wraps them.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client
        self._headers: dict[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": "prompt-gateway/1.0",
        }

    async def post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        """POST *payload* and decode the body of a 2xx response."""
        resp = await self._client.post(url, json=payload, headers=self._headers)

        if not resp.is_success:
            logger.debug("Provider returned HTTP %d", resp.status_code)
            return TransportResponse(status_code=resp.status_code)

        if not resp.content.strip():
            return TransportResponse(status_code=resp.status_code)

        data = resp.json()
        if data is None:
            return TransportResponse(status_code=resp.status_code)

        body = GenerationResponseSchema.model_validate(data).to_entity()
        return TransportResponse(status_code=resp.status_code, body=body)
