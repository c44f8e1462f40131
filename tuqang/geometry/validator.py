"""Geometry validator: do the supplied side lengths close into the selected shape?

Usage:
    outcome = validate(ShapeKind.RIGHT_TRIANGLE, {"base": 3, "height": 4, "hypotenuse": 5})
    outcome.is_valid   # True
    outcome.perimeter  # 12.0

One rule per shape, dispatched through ``_RULES``. Every rule receives the
dimensions already checked for completeness and returns (valid, perimeter,
message). Two lengths are equal when they differ by strictly less than
epsilon, so a difference of exactly epsilon is a mismatch.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from tuqang.geometry.dimensions import is_supplied
from tuqang.geometry.shapes import ShapeKind, required_keys

# Absolute tolerance, in the same unit as the side lengths.
EPSILON = 0.1

MISSING_INPUT_MESSAGE = "Fill in every side with a value greater than 0."
IDLE_MESSAGE = "Enter the side lengths."


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    perimeter: float | None
    message: str

    def __post_init__(self) -> None:
        if self.is_valid != (self.perimeter is not None):
            raise ValueError("perimeter must be set exactly when the outcome is valid")

    @classmethod
    def invalid(cls, message: str) -> ValidationOutcome:
        return cls(is_valid=False, perimeter=None, message=message)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


IDLE_OUTCOME = ValidationOutcome.invalid(IDLE_MESSAGE)

RuleResult = tuple[bool, float, str]


def validate(
    shape: ShapeKind,
    dims: Mapping[str, float],
    epsilon: float = EPSILON,
) -> ValidationOutcome:
    """Check ``dims`` against the rule for ``shape``.

    Never raises for numeric input: incomplete or inconsistent measurements
    come back as an invalid outcome carrying a message for the user.
    """
    if not all(is_supplied(dims, key) for key in required_keys(shape)):
        return ValidationOutcome.invalid(MISSING_INPUT_MESSAGE)

    valid, perimeter, message = _RULES[shape](dims, epsilon)
    if not valid:
        return ValidationOutcome.invalid(message)
    return ValidationOutcome(is_valid=True, perimeter=round(perimeter, 2), message=message)


def _close(x: float, y: float, epsilon: float) -> bool:
    return abs(x - y) < epsilon


def _all_equal(sides: list[float], epsilon: float) -> bool:
    first = sides[0]
    return all(_close(s, first, epsilon) for s in sides)


def _fmt(value: float) -> str:
    """Echo a user-entered length the way it was typed (3, not 3.0)."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _square(dims: Mapping[str, float], epsilon: float) -> RuleResult:
    sides = [dims["s1"], dims["s2"], dims["s3"], dims["s4"]]
    if _all_equal(sides, epsilon):
        return True, sum(sides), "Valid. All sides are the same length."
    return False, 0.0, "Invalid. A square needs all 4 sides to be the same length."


def _equilateral_triangle(dims: Mapping[str, float], epsilon: float) -> RuleResult:
    sides = [dims["s1"], dims["s2"], dims["s3"]]
    if _all_equal(sides, epsilon):
        return True, sum(sides), "Valid. All three sides are the same length."
    return False, 0.0, "Invalid. An equilateral triangle needs three identical sides."


def _rectangle(dims: Mapping[str, float], epsilon: float) -> RuleResult:
    top, right, bottom, left = dims["top"], dims["right"], dims["bottom"], dims["left"]
    horizontal = _close(top, bottom, epsilon)
    vertical = _close(left, right, epsilon)

    if horizontal and vertical:
        return True, top + right + bottom + left, "Valid. Opposite sides are the same length."
    if not horizontal and not vertical:
        pairs = "top and bottom, and left and right"
    elif not horizontal:
        pairs = "top and bottom"
    else:
        pairs = "left and right"
    return False, 0.0, f"Invalid. Opposite sides ({pairs}) are not the same length."


def _right_triangle(dims: Mapping[str, float], epsilon: float) -> RuleResult:
    a, t, m = dims["base"], dims["height"], dims["hypotenuse"]
    expected = math.hypot(a, t)
    if _close(expected, m, epsilon):
        return True, a + t + m, "Valid. The sides satisfy the Pythagorean theorem."
    return (
        False,
        0.0,
        f"Invalid. With base {_fmt(a)} and height {_fmt(t)}, "
        f"the hypotenuse should be ±{expected:.2f}.",
    )


def _right_trapezoid(dims: Mapping[str, float], epsilon: float) -> RuleResult:
    a, b, t, m = dims["top"], dims["bottom"], dims["height"], dims["slant"]
    # The overhang between the parallel sides and the height form a right triangle
    diff = abs(b - a)
    expected = math.hypot(diff, t)
    if _close(expected, m, epsilon):
        return (
            True,
            a + b + t + m,
            "Valid. The slanted side matches the height and the difference of the parallel sides.",
        )
    return (
        False,
        0.0,
        f"Invalid. The outline does not close. The slanted side should be ±{expected:.2f}.",
    )


_RULES: dict[ShapeKind, Callable[[Mapping[str, float], float], RuleResult]] = {
    ShapeKind.SQUARE: _square,
    ShapeKind.EQUILATERAL_TRIANGLE: _equilateral_triangle,
    ShapeKind.RECTANGLE: _rectangle,
    ShapeKind.RIGHT_TRIANGLE: _right_triangle,
    ShapeKind.RIGHT_TRAPEZOID: _right_trapezoid,
}
