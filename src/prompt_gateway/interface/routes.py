"""API routes — thin controllers that delegate to the gateway."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prompt_gateway.domain.ports.text_generator import TextGenerator
from prompt_gateway.interface.dependencies import get_text_generator
from prompt_gateway.interface.schemas import ErrorResponse, GenerateRequest, GenerateResponse

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Prompt is empty"},
        422: {"model": ErrorResponse, "description": "Response blocked by safety filters"},
        502: {"model": ErrorResponse, "description": "Provider error or unusable response"},
        503: {"model": ErrorResponse, "description": "Provider unreachable"},
    },
)
async def generate(
    body: GenerateRequest,
    generator: TextGenerator = Depends(get_text_generator),
) -> GenerateResponse:
    """Generate text for a single prompt."""
    text = await generator.generate(body.prompt)
    return GenerateResponse(text=text)
