from __future__ import annotations
import logging
import uvicorn
from prompt_gateway.infrastructure.config import get_settings

def main() -> None:
    """Start the uvicorn ASGI server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    # httpx logs every request URL at INFO, and ours carries the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger(__name__).info(
        "Serving %s on %s:%d", settings.endpoint().redacted_url, settings.host, settings.port
    )
    uvicorn.run(
        "prompt_gateway.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
