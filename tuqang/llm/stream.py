"""Streaming builder's advice via SSE."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncGenerator, Mapping

from tuqang.config import settings
from tuqang.geometry.shapes import ShapeKind
from tuqang.llm.client import (
    EMPTY_RESPONSE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
    content_text,
    make_llm,
)
from tuqang.llm.prompts import build_advice_prompt

logger = logging.getLogger(__name__)


def _event(event: str, content: str | None = None) -> str:
    payload = {"type": event} if content is None else {"type": event, "content": content}
    return f"event: {event}\ndata: {json.dumps(payload)}\n\n"


async def stream_advice(
    shape: ShapeKind,
    dims: Mapping[str, float],
    is_valid: bool,
) -> AsyncGenerator[str, None]:
    """Yield response/error events, always finishing with a done event."""
    if not settings.anthropic_api_key:
        yield _event("response", NOT_CONFIGURED_MESSAGE)
        yield _event("done")
        return

    from langchain_core.messages import HumanMessage

    prompt = build_advice_prompt(shape, dims, is_valid)
    sent_any = False
    try:
        llm = make_llm()
        async for chunk in llm.astream([HumanMessage(content=prompt)]):
            text = content_text(chunk.content)
            if text:
                sent_any = True
                yield _event("response", text)
    except Exception as e:
        logger.warning("Advice stream failed for %s: %s", shape.value, e)
        yield _event("error", UPSTREAM_ERROR_MESSAGE)
    else:
        if not sent_any:
            yield _event("error", EMPTY_RESPONSE_MESSAGE)

    yield _event("done")
