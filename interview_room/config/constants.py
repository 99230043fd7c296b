"""
Constants, enums, and static values.
"""

from enum import Enum


class MessageRole(str, Enum):
    """Roles accepted in the conversation history."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ConversationStatus(str, Enum):
    """Lifecycle of a chat turn as seen by the client."""

    SUBMITTED = "submitted"  # Request sent, no chunk received yet
    STREAMING = "streaming"  # Chunks arriving
    READY = "ready"  # Idle, last turn succeeded
    ERROR = "error"  # Idle, last turn failed


PROCESSING_STATUSES = frozenset({ConversationStatus.SUBMITTED, ConversationStatus.STREAMING})
IDLE_STATUSES = frozenset({ConversationStatus.READY, ConversationStatus.ERROR})


class RecorderState(str, Enum):
    """Push-to-talk recorder states."""

    IDLE = "idle"
    RECORDING = "recording"
    TRANSCRIBING = "transcribing"


# SSE event keys emitted by /api/chat
SSE_TEXT = "text"
SSE_DONE = "done"
SSE_ERROR = "error"

# Push-to-talk
PUSH_TO_TALK_KEY = "Space"
TEXT_INPUT_TAGS = frozenset({"INPUT", "TEXTAREA"})

# Audio upload defaults
DEFAULT_AUDIO_FILENAME = "audio.webm"
DEFAULT_AUDIO_CONTENT_TYPE = "audio/webm"
SPEECH_MEDIA_TYPE = "audio/mpeg"
