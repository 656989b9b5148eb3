"""Generate-text use case — the prompt → provider → text pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`GenerationTransport` port; the interface layer injects a
concrete adapter at runtime.

Stages run in order and the first failure aborts the call:

1. validate the prompt (no network activity on failure)
2. build the single-content / single-part request
3. dispatch through the transport
4. validate HTTP status and body presence
5. extract the first candidate's first part text
"""

from __future__ import annotations

import logging

from prompt_gateway.domain.entities import (
    SAFETY_FINISH_REASON,
    GenerationRequest,
    GenerationResponse,
    TransportResponse,
)
from prompt_gateway.domain.exceptions import (
    ApiCommunicationError,
    ApiError,
    ContentError,
    SafetyError,
)
from prompt_gateway.domain.ports.generation_transport import GenerationTransport
from prompt_gateway.domain.value_objects import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    GenerationEndpoint,
    Prompt,
)

logger = logging.getLogger(__name__)


class PromptGateway:
    """Forwards one prompt to the provider and returns the generated text.

    Parameters
    ----------
    endpoint_url:
        Fully resolved ``generateContent`` URL (API key included).
    transport:
        Adapter that can POST a JSON body and return a typed response.
    """

    def __init__(self, endpoint_url: str, transport: GenerationTransport) -> None:
        self._endpoint_url = endpoint_url
        self._transport = transport

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        transport: GenerationTransport,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
    ) -> PromptGateway:
        """Resolve the endpoint for *model* and build a gateway."""
        endpoint = GenerationEndpoint(api_key=api_key, model=model, base_url=base_url)
        return cls(endpoint.url, transport)

    # ── Public entry point ──────────────────────────────────────────────

    async def generate(self, prompt: str | None) -> str:
        """Run the full pipeline and return the generated text."""
        validated = Prompt.from_string(prompt)
        request = GenerationRequest.for_prompt(validated.text)

        response = await self._dispatch(request)
        body = self._validate_transport_response(response)
        return self._extract_text(body)

    # ── Dispatch ────────────────────────────────────────────────────────

    async def _dispatch(self, request: GenerationRequest) -> TransportResponse:
        logger.debug("Dispatching generateContent request")
        try:
            return await self._transport.post_json(self._endpoint_url, request.to_payload())
        except Exception as exc:
            msg = f"API communication failed: {exc}"
            logger.error(msg, exc_info=True)
            raise ApiCommunicationError(msg) from exc

    # ── Response validation ─────────────────────────────────────────────

    @staticmethod
    def _validate_transport_response(response: TransportResponse) -> GenerationResponse:
        if not response.is_success:
            msg = f"API returned HTTP {response.status_code}"
            logger.error(msg)
            raise ApiError(msg, status_code=response.status_code)

        if response.body is None:
            msg = "No response body from API"
            logger.error(msg)
            raise ApiError(msg, status_code=response.status_code)

        return response.body

    # ── Text extraction ─────────────────────────────────────────────────

    @staticmethod
    def _extract_text(response: GenerationResponse) -> str:
        """Walk candidates → content → parts → text, failing on the first gap.

        The safety check comes before the content-shape checks so a blocked
        response is reported as such even when its content is missing.
        """
        if not response.candidates:
            raise _content_error("No response candidates")

        candidate = response.candidates[0]
        if candidate is None:
            raise _content_error("Empty candidate data")

        if candidate.finish_reason == SAFETY_FINISH_REASON:
            msg = "Response blocked by safety filters"
            logger.warning(msg)
            raise SafetyError(msg)

        content = candidate.content
        if content is None:
            raise _content_error("Missing content in candidate")

        if not content.parts:
            raise _content_error("No content parts available")

        part = content.parts[0]
        if part is None or part.text is None:
            raise _content_error("Missing text in response")

        logger.debug("Extracted %d characters of generated text", len(part.text))
        return part.text


def _content_error(msg: str) -> ContentError:
    logger.warning(msg)
    return ContentError(msg)
