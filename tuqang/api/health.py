"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tuqang import __version__
from tuqang.config import Settings
from tuqang.dependencies import get_settings
from tuqang.geometry.shapes import ShapeKind
from tuqang.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shapes_registered=len(ShapeKind),
        advice_configured=bool(settings.anthropic_api_key),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from tuqang.llm.prompts import get_prompt_template

    return {"advice": get_prompt_template()}
