"""Turn preparation: splice drained verification results into the history."""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from interview_room.config.constants import MessageRole
from interview_room.services.interview.models import InvalidMessagesError, UIMessage
from interview_room.services.verification.mailbox import VerificationMailbox
from interview_room.services.verification.models import VerificationResult

logger = logging.getLogger(__name__)

# Caller-supplied history arrives as raw JSON objects; spliced results are UIMessages
WireMessage = UIMessage | dict[str, Any]


def verification_message(result: VerificationResult) -> UIMessage:
    """Render a verification result as a synthetic assistant message."""
    return UIMessage.from_text(MessageRole.ASSISTANT, result.describe())


def merge_verification_messages(
    messages: Sequence[WireMessage],
    mailbox: VerificationMailbox,
) -> list[WireMessage]:
    """Drain the mailbox once and append one message per result, in drain order.

    Results arriving after the drain are left for the next turn. With an
    empty mailbox the caller's history is returned unchanged.
    """
    drained = mailbox.drain()
    if not drained:
        return list(messages)
    logger.info("[CHAT] Splicing %d verification result(s) into turn", len(drained))
    return [*messages, *(verification_message(result) for result in drained)]


def _parse_message(index: int, raw: WireMessage) -> UIMessage:
    if isinstance(raw, UIMessage):
        return raw
    try:
        return UIMessage.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidMessagesError(f"message {index} is invalid at {location}: {first['msg']}") from e


def validate_ui_messages(messages: Sequence[WireMessage]) -> list[UIMessage]:
    """Validate the combined history before it reaches the agent.

    Raw messages are parsed into UIMessages, so a wrong role or a non-string
    text part is reported here rather than by request parsing.

    Raises:
        InvalidMessagesError: Empty history, a malformed message, a message
            without parts, or duplicate ids.
    """
    if not messages:
        raise InvalidMessagesError("messages must not be empty")

    validated: list[UIMessage] = []
    seen: set[str] = set()
    for index, raw in enumerate(messages):
        message = _parse_message(index, raw)
        if not message.parts:
            raise InvalidMessagesError(f"message {index} ({message.id}) has no parts")
        if message.id in seen:
            raise InvalidMessagesError(f"duplicate message id: {message.id}")
        seen.add(message.id)
        validated.append(message)
    return validated
