"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tuqang.config import settings
from tuqang.geometry.shapes import ShapeKind


# One consistent set of measurements per shape
VALID_DIMENSIONS = {
    ShapeKind.SQUARE: {"s1": 5.0, "s2": 5.0, "s3": 5.0, "s4": 5.0},
    ShapeKind.EQUILATERAL_TRIANGLE: {"s1": 7.5, "s2": 7.5, "s3": 7.5},
    ShapeKind.RECTANGLE: {"top": 6.0, "right": 3.0, "bottom": 6.0, "left": 3.0},
    ShapeKind.RIGHT_TRIANGLE: {"base": 3.0, "height": 4.0, "hypotenuse": 5.0},
    ShapeKind.RIGHT_TRAPEZOID: {"top": 4.0, "bottom": 10.0, "height": 8.0, "slant": 10.0},
}

VALID_PERIMETERS = {
    ShapeKind.SQUARE: 20.0,
    ShapeKind.EQUILATERAL_TRIANGLE: 22.5,
    ShapeKind.RECTANGLE: 18.0,
    ShapeKind.RIGHT_TRIANGLE: 12.0,
    ShapeKind.RIGHT_TRAPEZOID: 32.0,
}


@pytest.fixture
def right_triangle_dims() -> dict[str, float]:
    return dict(VALID_DIMENSIONS[ShapeKind.RIGHT_TRIANGLE])


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "")


@pytest.fixture
def fake_api_key(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "test-key")


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeLLM:
    """Stands in for ChatAnthropic: canned reply, or raise ``error``."""

    def __init__(self, reply="", chunks=None, error: Exception | None = None):
        self.reply = reply
        self.chunks = chunks or []
        self.error = error
        self.prompts: list[str] = []

    async def ainvoke(self, messages):
        self.prompts.append(messages[-1].content)
        if self.error:
            raise self.error
        return FakeMessage(self.reply)

    async def astream(self, messages):
        self.prompts.append(messages[-1].content)
        for chunk in self.chunks:
            yield FakeMessage(chunk)
        if self.error:
            raise self.error
