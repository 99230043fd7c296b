"""Interviewer agent: stateless, driven by the client-held conversation history."""

import logging
from collections.abc import AsyncIterator

from agent_framework import ChatAgent, ChatMessage, Role

from interview_room.config.constants import MessageRole
from interview_room.config.prompts import build_interviewer_system_prompt
from interview_room.config.settings import Settings
from interview_room.infrastructure.llm.executor import stream_agent_text
from interview_room.infrastructure.llm.factory import create_anthropic_agent
from interview_room.services.interview.models import UIMessage
from interview_room.services.interview.tools import create_interview_tools
from interview_room.services.verification.dispatcher import VerificationDispatcher

logger = logging.getLogger(__name__)

_ROLE_MAP = {
    MessageRole.SYSTEM: Role.SYSTEM,
    MessageRole.USER: Role.USER,
    MessageRole.ASSISTANT: Role.ASSISTANT,
}


def to_chat_messages(messages: list[UIMessage]) -> list[ChatMessage]:
    """Convert wire messages to agent_framework ChatMessages."""
    return [ChatMessage(role=_ROLE_MAP[m.role], text=m.text) for m in messages]


class InterviewAgent:
    """Single interviewer agent with file, memory, lookup and verification tools."""

    def __init__(self, settings: Settings, dispatcher: VerificationDispatcher) -> None:
        self.settings = settings
        self.dispatcher = dispatcher

    def _create_agent(self) -> ChatAgent:
        return create_anthropic_agent(
            settings=self.settings,
            name="Interviewer",
            instructions=build_interviewer_system_prompt(),
            tools=create_interview_tools(self.settings, self.dispatcher),
            model=self.settings.interviewer_model,
            max_steps=self.settings.interviewer_max_steps,
            max_tokens=self.settings.interviewer_max_tokens,
            temperature=self.settings.interviewer_temperature,
        )

    async def respond_stream(self, messages: list[UIMessage]) -> AsyncIterator[str]:
        """Stream the interviewer's reply to the full conversation history."""
        agent = self._create_agent()
        logger.info("[CHAT] Running interviewer over %d message(s)", len(messages))
        async for chunk in stream_agent_text(agent, to_chat_messages(messages)):
            yield chunk
