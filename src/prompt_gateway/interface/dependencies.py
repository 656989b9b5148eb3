"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from prompt_gateway.infrastructure.config import get_settings
from prompt_gateway.infrastructure.httpx_transport import HttpxTransport
from prompt_gateway.services.prompt_gateway import PromptGateway

_http_client: httpx.AsyncClient | None = None
_gateway: PromptGateway | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _gateway  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))
    _gateway = PromptGateway(
        endpoint_url=settings.endpoint().url,
        transport=HttpxTransport(_http_client),
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _gateway  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _gateway = None


def get_text_generator() -> PromptGateway:
    """Return the gateway built on startup."""
    assert _gateway is not None, "startup() was not called"
    return _gateway
