"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tuqang.geometry.shapes import ShapeKind


class ValidateRequest(BaseModel):
    shape: ShapeKind = Field(..., description="Shape to validate the sides against")
    dimensions: dict[str, Any] = Field(
        default_factory=dict,
        description="Side lengths keyed by field (e.g. base/height/hypotenuse); "
        "blank or non-numeric values count as not supplied",
    )


class AdviceRequest(ValidateRequest):
    is_valid: bool | None = Field(
        None,
        description="Validation result to report; computed from the dimensions when omitted",
    )
