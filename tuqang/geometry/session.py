"""In-memory validator session: the state behind one shape form.

Holds the selected shape, the dimensions typed so far, the current outcome and
the advice state. The outcome is recomputed synchronously on every dimension
change; switching shape throws everything away.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from tuqang.geometry.dimensions import (
    DimensionSet,
    filled_count,
    is_complete,
    normalize_value,
)
from tuqang.geometry.shapes import ShapeKind, required_keys
from tuqang.geometry.validator import EPSILON, IDLE_OUTCOME, ValidationOutcome, validate

logger = logging.getLogger(__name__)

Advisor = Callable[[ShapeKind, DimensionSet, bool], Awaitable[Any]]


@dataclass
class AdviceState:
    advice: str = ""
    loading: bool = False
    error: str | None = None


class ValidatorSession:
    """Form state for a single user, single shape at a time."""

    def __init__(self, shape: ShapeKind = ShapeKind.SQUARE, epsilon: float = EPSILON) -> None:
        self.epsilon = epsilon
        self.shape = shape
        self.dimensions: DimensionSet = {}
        self.outcome: ValidationOutcome = IDLE_OUTCOME
        self.advice = AdviceState()

    def select_shape(self, shape: ShapeKind) -> None:
        self.shape = shape
        self.dimensions = {}
        self.outcome = IDLE_OUTCOME
        self.advice = AdviceState()
        logger.debug("Session switched to %s", shape.value)

    def set_dimension(self, key: str, raw: Any) -> ValidationOutcome:
        self._store(key, raw)
        return self._recompute()

    def update(self, values: Mapping[str, Any]) -> ValidationOutcome:
        for key, raw in values.items():
            self._store(key, raw)
        return self._recompute()

    def _store(self, key: str, raw: Any) -> None:
        value = normalize_value(raw)
        if value is None:
            self.dimensions.pop(key, None)
        else:
            self.dimensions[key] = value

    def _recompute(self) -> ValidationOutcome:
        # Nothing typed yet: keep the idle prompt instead of a "missing input" error
        if self.dimensions:
            self.outcome = validate(self.shape, self.dimensions, self.epsilon)
        else:
            self.outcome = IDLE_OUTCOME
        return self.outcome

    @property
    def required(self) -> int:
        return len(required_keys(self.shape))

    @property
    def filled(self) -> int:
        return filled_count(self.shape, self.dimensions)

    @property
    def is_complete(self) -> bool:
        return is_complete(self.shape, self.dimensions)

    @property
    def status(self) -> str:
        """One of valid, invalid (every field filled but inconsistent) or waiting."""
        if self.outcome.is_valid:
            return "valid"
        if self.is_complete:
            return "invalid"
        return "waiting"

    async def request_advice(self, advisor: Advisor) -> AdviceState | None:
        """Ask ``advisor`` about the current measurements.

        The advisor may return plain text or an object with ``text`` and
        ``error`` attributes. Refused while the form is incomplete.
        """
        if not self.is_complete or self.advice.loading:
            return None

        shape = self.shape
        self.advice = AdviceState(loading=True)
        try:
            result = await advisor(shape, dict(self.dimensions), self.outcome.is_valid)
        except Exception:
            self.advice = AdviceState()
            raise

        if shape is not self.shape:
            # Shape changed while waiting; the answer belongs to the old form
            logger.debug("Dropping advice for %s after shape change", shape.value)
            return None

        if isinstance(result, str):
            self.advice = AdviceState(advice=result)
        else:
            self.advice = AdviceState(advice=result.text, error=getattr(result, "error", None))
        return self.advice
