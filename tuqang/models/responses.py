"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tuqang.geometry.shapes import ShapeKind


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes_registered: int = 0
    advice_configured: bool = False


class FieldInfo(BaseModel):
    key: str
    label: str
    min: float = 0.0
    step: float = 0.1


class ShapeInfo(BaseModel):
    shape: ShapeKind
    name: str
    fields: list[FieldInfo] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    shape: ShapeKind
    is_valid: bool
    perimeter: float | None = None
    message: str
    status: str = "waiting"  # valid, invalid, waiting
    filled: int = 0
    required: int = 0
    epsilon: float = 0.1


class AdviceResponse(BaseModel):
    advice: str
    available: bool = True
    error: str | None = None
    is_valid: bool = False
