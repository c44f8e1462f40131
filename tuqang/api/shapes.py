"""GET /api/shapes: the shape catalogue and the fields each shape asks for."""

from __future__ import annotations

from fastapi import APIRouter

from tuqang.geometry.shapes import ShapeKind, fields_for
from tuqang.models.responses import FieldInfo, ShapeInfo

router = APIRouter()


@router.get("/shapes", response_model=list[ShapeInfo])
async def list_shapes() -> list[ShapeInfo]:
    return [
        ShapeInfo(
            shape=shape,
            name=shape.display_name,
            fields=[
                FieldInfo(key=f.key, label=f.label, min=f.min, step=f.step)
                for f in fields_for(shape)
            ],
        )
        for shape in ShapeKind
    ]
