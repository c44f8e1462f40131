"""Tests for the advice client (LLM replaced by a fake)."""

from __future__ import annotations

import asyncio

from tests.conftest import FakeLLM
from tuqang.geometry.shapes import ShapeKind
from tuqang.llm import client
from tuqang.llm.client import (
    EMPTY_RESPONSE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
    content_text,
    get_advice,
)

DIMS = {"base": 3.0, "height": 4.0, "hypotenuse": 5.0}


def _ask(is_valid: bool = True):
    return asyncio.run(get_advice(ShapeKind.RIGHT_TRIANGLE, DIMS, is_valid))


def test_without_api_key(no_api_key, monkeypatch):
    def fail():
        raise AssertionError("LLM must not be built without a key")

    monkeypatch.setattr(client, "make_llm", fail)
    result = _ask()
    assert result.text == NOT_CONFIGURED_MESSAGE
    assert result.available is False
    assert result.error == "not_configured"


def test_returns_model_text(fake_api_key, monkeypatch):
    llm = FakeLLM(reply="  Use a 3-4-5 string to check the corner.  ")
    monkeypatch.setattr(client, "make_llm", lambda: llm)
    result = _ask()
    assert result.text == "Use a 3-4-5 string to check the corner."
    assert result.available
    assert result.error is None
    assert "Right Triangle" in llm.prompts[0]
    assert "VALID mathematically" in llm.prompts[0]


def test_upstream_failure(fake_api_key, monkeypatch):
    llm = FakeLLM(error=RuntimeError("quota exceeded"))
    monkeypatch.setattr(client, "make_llm", lambda: llm)
    result = _ask(is_valid=False)
    assert result.text == UPSTREAM_ERROR_MESSAGE
    assert result.error == "upstream_error"


def test_empty_response(fake_api_key, monkeypatch):
    monkeypatch.setattr(client, "make_llm", lambda: FakeLLM(reply="   "))
    result = _ask()
    assert result.text == EMPTY_RESPONSE_MESSAGE
    assert result.error == "empty_response"


def test_content_text_flattens_blocks():
    blocks = [
        {"type": "thinking", "thinking": "hmm"},
        {"type": "text", "text": "Keep "},
        "it level.",
    ]
    assert content_text(blocks) == "Keep it level."
    assert content_text("plain") == "plain"
    assert content_text(None) == ""
