"""Shape validation: catalogue, input normalization, validator and form session."""

from tuqang.geometry.dimensions import DimensionSet, normalize_dimensions, normalize_value
from tuqang.geometry.session import AdviceState, ValidatorSession
from tuqang.geometry.shapes import SHAPE_FIELDS, InputField, ShapeKind, parse_shape, required_keys
from tuqang.geometry.validator import EPSILON, ValidationOutcome, validate

__all__ = [
    "EPSILON",
    "SHAPE_FIELDS",
    "AdviceState",
    "DimensionSet",
    "InputField",
    "ShapeKind",
    "ValidationOutcome",
    "ValidatorSession",
    "normalize_dimensions",
    "normalize_value",
    "parse_shape",
    "required_keys",
    "validate",
]
