"""POST /api/advice: builder's commentary on a shape (standard + streaming)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from tuqang.api.validate import session_for
from tuqang.config import Settings
from tuqang.dependencies import get_settings
from tuqang.models.requests import AdviceRequest
from tuqang.models.responses import AdviceResponse

router = APIRouter()


def _resolve(req: AdviceRequest, epsilon: float):
    """Normalized dimensions and the validity flag to report."""
    session = session_for(req, epsilon)
    is_valid = req.is_valid if req.is_valid is not None else session.outcome.is_valid
    return session.dimensions, is_valid


@router.post("/advice", response_model=AdviceResponse)
async def advice(
    req: AdviceRequest,
    settings: Settings = Depends(get_settings),
) -> AdviceResponse:
    from tuqang.llm.client import get_advice

    dims, is_valid = _resolve(req, settings.validation_epsilon)
    result = await get_advice(req.shape, dims, is_valid)
    return AdviceResponse(
        advice=result.text,
        available=result.available,
        error=result.error,
        is_valid=is_valid,
    )


@router.post("/advice/stream")
async def advice_stream(
    req: AdviceRequest,
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    from tuqang.llm.stream import stream_advice

    dims, is_valid = _resolve(req, settings.validation_epsilon)
    return StreamingResponse(
        stream_advice(req.shape, dims, is_valid),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
