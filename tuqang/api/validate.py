"""POST /api/validate: check side lengths against the selected shape."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from tuqang.config import Settings
from tuqang.dependencies import get_settings
from tuqang.geometry.session import ValidatorSession
from tuqang.models.requests import ValidateRequest
from tuqang.models.responses import ValidateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def session_for(req: ValidateRequest, epsilon: float) -> ValidatorSession:
    """Build a fresh session for the request's shape and apply its dimensions."""
    session = ValidatorSession(req.shape, epsilon=epsilon)
    session.update(req.dimensions)
    return session


@router.post("/validate", response_model=ValidateResponse)
async def validate_shape(
    req: ValidateRequest,
    settings: Settings = Depends(get_settings),
) -> ValidateResponse:
    session = session_for(req, settings.validation_epsilon)
    outcome = session.outcome
    logger.debug(
        "Validated %s with %d/%d fields: %s",
        req.shape.value, session.filled, session.required, session.status,
    )
    return ValidateResponse(
        shape=req.shape,
        is_valid=outcome.is_valid,
        perimeter=outcome.perimeter,
        message=outcome.message,
        status=session.status,
        filled=session.filled,
        required=session.required,
        epsilon=session.epsilon,
    )
