"""Conversation status edge detection for the push-to-talk queue."""

from enum import Enum

from interview_room.config.constants import (
    IDLE_STATUSES,
    PROCESSING_STATUSES,
    PUSH_TO_TALK_KEY,
    TEXT_INPUT_TAGS,
    ConversationStatus,
)


class StatusEdge(str, Enum):
    """Action emitted by a status transition."""

    NONE = "none"
    FLUSH = "flush"  # processing -> idle: send queued utterances


def is_processing(status: ConversationStatus | None) -> bool:
    return status in PROCESSING_STATUSES


def detect_status_edge(
    previous: ConversationStatus | None,
    current: ConversationStatus,
) -> StatusEdge:
    """Return FLUSH exactly on a {submitted, streaming} -> {ready, error} transition."""
    if previous in PROCESSING_STATUSES and current in IDLE_STATUSES:
        return StatusEdge.FLUSH
    return StatusEdge.NONE


def is_push_to_talk_key(code: str, target_tag: str = "", is_content_editable: bool = False) -> bool:
    """Space toggles recording, except while the user is typing into a text field."""
    if code != PUSH_TO_TALK_KEY:
        return False
    return target_tag.upper() not in TEXT_INPUT_TAGS and not is_content_editable
