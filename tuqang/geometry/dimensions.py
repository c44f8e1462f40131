"""Dimension normalization: raw user input to a clean DimensionSet.

The validator assumes every stored value is a finite float. Anything else the
user can type (blank fields, text, NaN, infinities) is dropped here so the
key reads as "not yet supplied".
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from tuqang.geometry.shapes import ShapeKind, required_keys

DimensionSet = dict[str, float]


def normalize_value(raw: Any) -> float | None:
    """Parse one field value, returning None for anything that isn't a finite number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def normalize_dimensions(raw: Mapping[str, Any]) -> DimensionSet:
    """Keep only the keys whose value parses to a finite float.

    Zero and negative values are kept; the validator reports them as missing.
    """
    dims: DimensionSet = {}
    for key, value in raw.items():
        parsed = normalize_value(value)
        if parsed is not None:
            dims[str(key)] = parsed
    return dims


def is_supplied(dims: Mapping[str, float], key: str) -> bool:
    value = dims.get(key)
    return value is not None and value > 0


def filled_count(shape: ShapeKind, dims: Mapping[str, float]) -> int:
    return sum(1 for key in required_keys(shape) if is_supplied(dims, key))


def is_complete(shape: ShapeKind, dims: Mapping[str, float]) -> bool:
    return filled_count(shape, dims) == len(required_keys(shape))
