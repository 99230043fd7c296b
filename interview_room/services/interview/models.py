"""Conversation message models (wire shape of the chat history)."""

import uuid
from typing import Literal

from pydantic import BaseModel, Field

from interview_room.config.constants import MessageRole


class InvalidMessagesError(ValueError):
    """The combined conversation history failed validation."""


class TextPart(BaseModel):
    """A text fragment of a message."""

    type: Literal["text"] = "text"
    text: str


class UIMessage(BaseModel):
    """One conversation message as exchanged with the browser client."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: MessageRole
    parts: list[TextPart] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.parts)

    @classmethod
    def from_text(cls, role: MessageRole, text: str) -> "UIMessage":
        return cls(role=role, parts=[TextPart(text=text)])
