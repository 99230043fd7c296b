"""Agent factory helpers."""

import logging
from typing import Any

from agent_framework import ChatAgent, FunctionInvocationConfiguration, HostedWebSearchTool
from agent_framework.anthropic import AnthropicClient
from anthropic import AsyncAnthropic

from interview_room.config.settings import Settings

logger = logging.getLogger(__name__)

_shared_anthropic: AsyncAnthropic | None = None


def get_shared_anthropic(settings: Settings) -> AsyncAnthropic:
    """
    Get or create a shared AsyncAnthropic SDK client.

    All agents and the PDF reader go through the same HTTP connection pool,
    pointed at ``anthropic_base_url`` when a proxy is configured.
    """
    global _shared_anthropic  # noqa: PLW0603
    if _shared_anthropic is None:
        kwargs: dict[str, Any] = {"api_key": settings.anthropic_api_key}
        if settings.anthropic_base_url:
            kwargs["base_url"] = settings.anthropic_base_url
        _shared_anthropic = AsyncAnthropic(**kwargs)
    return _shared_anthropic


async def close_shared_anthropic() -> None:
    """
    Close the shared SDK client.

    Should be called during application shutdown to release connections.
    """
    global _shared_anthropic  # noqa: PLW0603
    if _shared_anthropic is not None:
        await _shared_anthropic.close()
        _shared_anthropic = None


def build_anthropic_client(
    settings: Settings,
    model: str,
    max_steps: int,
) -> AnthropicClient:
    """
    Build an agent_framework AnthropicClient with a bounded tool-use budget.

    ``max_steps`` caps the number of model round-trips; once exhausted the
    framework forces a final text response.
    """
    client = AnthropicClient(
        model_id=model,
        anthropic_client=get_shared_anthropic(settings),
    )
    client.function_invocation_configuration = FunctionInvocationConfiguration(
        max_iterations=max_steps
    )
    return client


def create_anthropic_agent(
    settings: Settings,
    name: str,
    instructions: str,
    tools: Any | None = None,
    model: str | None = None,
    max_steps: int = 5,
    max_tokens: int = 4096,
    temperature: float = 0.0,
) -> ChatAgent:
    """
    Create an Anthropic (Claude) agent.

    Usage:
        agent = create_anthropic_agent(settings, "Verifier", prompt, tools, max_steps=3)
        response = await agent.run(user_input)

    Args:
        settings: Application settings
        name: Agent name
        instructions: System prompt/instructions
        tools: Optional tools (@ai_function callables and hosted tools)
        model: Optional model name (defaults to settings.interviewer_model)
        max_steps: Maximum reasoning/tool-use round-trips
        max_tokens: Maximum tokens for response
        temperature: Sampling temperature
    """
    final_model = model or settings.interviewer_model

    logger.debug(f"Creating Anthropic agent '{name}' with model: {final_model}")

    client = build_anthropic_client(settings, final_model, max_steps)
    return client.create_agent(
        name=name,
        instructions=instructions,
        tools=tools,
        max_tokens=max_tokens,
        temperature=temperature,
    )


def web_search_tool(max_uses: int | None = None) -> HostedWebSearchTool:
    """Hosted web search tool, optionally capped to ``max_uses`` searches per run."""
    if max_uses is None:
        return HostedWebSearchTool()
    return HostedWebSearchTool(additional_properties={"max_uses": max_uses})
