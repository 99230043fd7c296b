"""LLM infrastructure module."""

from interview_room.infrastructure.llm.executor import run_single_agent, stream_agent_text
from interview_room.infrastructure.llm.factory import (
    build_anthropic_client,
    close_shared_anthropic,
    create_anthropic_agent,
    get_shared_anthropic,
    web_search_tool,
)

__all__ = [
    "run_single_agent",
    "stream_agent_text",
    "build_anthropic_client",
    "close_shared_anthropic",
    "create_anthropic_agent",
    "get_shared_anthropic",
    "web_search_tool",
]
