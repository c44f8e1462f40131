"""LangChain ChatAnthropic wrapper for builder's advice."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tuqang.config import settings
from tuqang.geometry.shapes import ShapeKind
from tuqang.llm.prompts import build_advice_prompt

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "[Advice not configured: set ANTHROPIC_API_KEY in .env]"
UPSTREAM_ERROR_MESSAGE = (
    "Could not reach Foreman TuQang. Check your API quota or try again later."
)
EMPTY_RESPONSE_MESSAGE = "Sorry, Foreman TuQang is on a break (no response)."


@dataclass(frozen=True)
class AdviceResult:
    text: str
    available: bool = True
    error: str | None = None  # not_configured, upstream_error, empty_response


def content_text(content: Any) -> str:
    """Flatten a message content (plain string or list of blocks) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


def make_llm(max_tokens: int | None = None):
    from langchain_anthropic import ChatAnthropic

    return ChatAnthropic(
        model=settings.advice_model,
        api_key=settings.anthropic_api_key,
        max_tokens=max_tokens or settings.advice_max_tokens,
    )


async def get_advice(
    shape: ShapeKind,
    dims: Mapping[str, float],
    is_valid: bool,
) -> AdviceResult:
    """Ask the model to comment on the measurements. Never raises."""
    if not settings.anthropic_api_key:
        return AdviceResult(NOT_CONFIGURED_MESSAGE, available=False, error="not_configured")

    from langchain_core.messages import HumanMessage

    prompt = build_advice_prompt(shape, dims, is_valid)
    try:
        llm = make_llm()
        response = await llm.ainvoke([HumanMessage(content=prompt)])
    except Exception as e:
        logger.warning("Advice request failed for %s: %s", shape.value, e)
        return AdviceResult(UPSTREAM_ERROR_MESSAGE, available=False, error="upstream_error")

    text = content_text(response.content).strip()
    if not text:
        return AdviceResult(EMPTY_RESPONSE_MESSAGE, available=False, error="empty_response")
    return AdviceResult(text)
