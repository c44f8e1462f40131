"""Advice prompt: what the model sees about a validated shape."""

from __future__ import annotations

import json
from collections.abc import Mapping

from tuqang.geometry.shapes import ShapeKind

_ADVICE_TEMPLATE = """Act as "Foreman TuQang", an experienced but friendly building and construction expert.

The user is validating the shape: {shape}.
Measurements entered (abstract units / meters): {dimensions}.
Geometric validation status: {status}.

Your task:
1. If NOT VALID: explain briefly, with a bit of humour, why these measurements cannot be built in the real world.
2. If VALID: give 1 practical builder's tip related to this shape (for example about checking right angles, choosing materials, or structural stability).

Use relaxed but professional language. At most 3 sentences. Do not overuse bold or italic markdown."""

_VALID = "VALID mathematically"
_INVALID = "NOT VALID mathematically"


def build_advice_payload(
    shape: ShapeKind,
    dims: Mapping[str, float],
    is_valid: bool,
) -> dict[str, str]:
    """The exact fields handed to the model, serialized with sorted keys."""
    return {
        "shape": shape.display_name,
        "dimensions": json.dumps(dict(dims), sort_keys=True),
        "status": _VALID if is_valid else _INVALID,
    }


def build_advice_prompt(shape: ShapeKind, dims: Mapping[str, float], is_valid: bool) -> str:
    return _ADVICE_TEMPLATE.format(**build_advice_payload(shape, dims, is_valid))


def get_prompt_template() -> str:
    return _ADVICE_TEMPLATE
