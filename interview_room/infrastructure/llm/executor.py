"""
Agent executor for running agents in isolation.
"""
import logging
from collections.abc import AsyncIterator
from typing import Any

from agent_framework import ChatMessage

logger = logging.getLogger(__name__)


async def run_single_agent(agent: Any, input_text: str) -> str:
    """
    Execute an agent in isolation and return its final text.

    Runs exactly once; errors propagate to the caller.
    """
    response = await agent.run(input_text)
    text = response.text or ""
    if not text:
        logger.warning("run_single_agent: No text received from agent %s", getattr(agent, "name", "?"))
    return text


async def stream_agent_text(agent: Any, messages: list[ChatMessage]) -> AsyncIterator[str]:
    """Stream text chunks from an agent run over a full message history."""
    async for update in agent.run_stream(messages):
        if update.text:
            yield update.text
