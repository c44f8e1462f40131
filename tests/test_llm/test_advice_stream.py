"""Tests for streamed advice SSE frames."""

from __future__ import annotations

import asyncio
import json

from tests.conftest import FakeLLM
from tuqang.geometry.shapes import ShapeKind
from tuqang.llm import stream
from tuqang.llm.client import NOT_CONFIGURED_MESSAGE, UPSTREAM_ERROR_MESSAGE
from tuqang.llm.stream import stream_advice


def _collect() -> list[tuple[str, dict]]:
    async def run():
        return [
            frame
            async for frame in stream_advice(ShapeKind.SQUARE, {"s1": 2.0}, False)
        ]

    events = []
    for frame in asyncio.run(run()):
        head, data = frame.strip().split("\n")
        events.append((head.removeprefix("event: "), json.loads(data.removeprefix("data: "))))
    return events


def test_not_configured(no_api_key):
    events = _collect()
    assert events == [
        ("response", {"type": "response", "content": NOT_CONFIGURED_MESSAGE}),
        ("done", {"type": "done"}),
    ]


def test_streams_chunks(fake_api_key, monkeypatch):
    monkeypatch.setattr(stream, "make_llm", lambda: FakeLLM(chunks=["Measure ", "", "twice."]))
    events = _collect()
    assert [e for e, _ in events] == ["response", "response", "done"]
    assert "".join(d["content"] for e, d in events if e == "response") == "Measure twice."


def test_error_mid_stream(fake_api_key, monkeypatch):
    llm = FakeLLM(chunks=["Measure "], error=RuntimeError("connection reset"))
    monkeypatch.setattr(stream, "make_llm", lambda: llm)
    events = _collect()
    assert [e for e, _ in events] == ["response", "error", "done"]
    assert events[1][1]["content"] == UPSTREAM_ERROR_MESSAGE


def test_empty_stream(fake_api_key, monkeypatch):
    monkeypatch.setattr(stream, "make_llm", lambda: FakeLLM(chunks=[]))
    events = _collect()
    assert [e for e, _ in events] == ["error", "done"]
