"""Interviewer conversation services."""

from interview_room.services.interview.agent import InterviewAgent, to_chat_messages
from interview_room.services.interview.models import InvalidMessagesError, TextPart, UIMessage
from interview_room.services.interview.turn import (
    merge_verification_messages,
    validate_ui_messages,
    verification_message,
)
from interview_room.services.interview.workspace import ContextWorkspace, MemoryStore, WorkspacePathError

__all__ = [
    "ContextWorkspace",
    "InterviewAgent",
    "InvalidMessagesError",
    "MemoryStore",
    "TextPart",
    "UIMessage",
    "WorkspacePathError",
    "merge_verification_messages",
    "to_chat_messages",
    "validate_ui_messages",
    "verification_message",
]
