"""Shape catalogue: the closed set of shapes and the input fields each one takes.

Every shape is measured per side. The field order is the order the sides are
asked for and the order the validator reads them in.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ShapeKind(str, enum.Enum):
    SQUARE = "square"
    EQUILATERAL_TRIANGLE = "equilateral_triangle"
    RECTANGLE = "rectangle"
    RIGHT_TRIANGLE = "right_triangle"
    RIGHT_TRAPEZOID = "right_trapezoid"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ShapeKind.SQUARE: "Square",
    ShapeKind.EQUILATERAL_TRIANGLE: "Equilateral Triangle",
    ShapeKind.RECTANGLE: "Rectangle",
    ShapeKind.RIGHT_TRIANGLE: "Right Triangle",
    ShapeKind.RIGHT_TRAPEZOID: "Right Trapezoid",
}

# Shared numeric input constraints
FIELD_MIN = 0.0
FIELD_STEP = 0.1


@dataclass(frozen=True)
class InputField:
    key: str
    label: str
    min: float = FIELD_MIN
    step: float = FIELD_STEP


SHAPE_FIELDS: dict[ShapeKind, tuple[InputField, ...]] = {
    ShapeKind.SQUARE: (
        InputField("s1", "Top side"),
        InputField("s2", "Right side"),
        InputField("s3", "Bottom side"),
        InputField("s4", "Left side"),
    ),
    ShapeKind.EQUILATERAL_TRIANGLE: (
        InputField("s1", "Side A"),
        InputField("s2", "Side B"),
        InputField("s3", "Side C"),
    ),
    ShapeKind.RECTANGLE: (
        InputField("top", "Top side (length)"),
        InputField("right", "Right side (width)"),
        InputField("bottom", "Bottom side (length)"),
        InputField("left", "Left side (width)"),
    ),
    ShapeKind.RIGHT_TRIANGLE: (
        InputField("base", "Base"),
        InputField("height", "Upright side (height)"),
        InputField("hypotenuse", "Hypotenuse"),
    ),
    ShapeKind.RIGHT_TRAPEZOID: (
        InputField("top", "Top side"),
        InputField("bottom", "Bottom side"),
        InputField("height", "Upright side (height)"),
        InputField("slant", "Slanted side"),
    ),
}


def fields_for(shape: ShapeKind) -> tuple[InputField, ...]:
    return SHAPE_FIELDS[shape]


def required_keys(shape: ShapeKind) -> tuple[str, ...]:
    """Ordered dimension keys the validator needs for ``shape``."""
    return tuple(f.key for f in SHAPE_FIELDS[shape])


def parse_shape(value: ShapeKind | str) -> ShapeKind:
    """Resolve a shape from its enum value, member name or display name.

    Matching ignores case and treats spaces, dashes and underscores alike,
    so "right_triangle", "RIGHT_TRIANGLE" and "Right Triangle" all resolve.
    """
    if isinstance(value, ShapeKind):
        return value
    wanted = _fold(value)
    for shape in ShapeKind:
        if wanted in (_fold(shape.value), _fold(shape.name), _fold(shape.display_name)):
            return shape
    raise ValueError(f"Unknown shape: {value!r}")


def _fold(text: str) -> str:
    return text.strip().lower().replace("-", "_").replace(" ", "_")
