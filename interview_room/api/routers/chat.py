"""Chat endpoint: one interview turn, streamed as Server-Sent Events."""

import json
import logging
import time
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from interview_room.api.dependencies import get_interview_agent, get_mailbox
from interview_room.api.models import ChatRequest
from interview_room.config.constants import SSE_DONE, SSE_ERROR, SSE_TEXT
from interview_room.services.interview.agent import InterviewAgent
from interview_room.services.interview.models import InvalidMessagesError
from interview_room.services.interview.turn import merge_verification_messages, validate_ui_messages
from interview_room.services.verification.mailbox import VerificationMailbox

logger = logging.getLogger(__name__)

router = APIRouter()


def _sse(payload: dict) -> str:
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"


@router.post("/chat", response_class=StreamingResponse)
async def chat(
    request: ChatRequest,
    mailbox: VerificationMailbox = Depends(get_mailbox),  # noqa: B008
    agent: InterviewAgent = Depends(get_interview_agent),  # noqa: B008
) -> StreamingResponse:
    """Run one interviewer turn.

    Verification results that finished since the previous turn are drained
    from the mailbox and appended to the caller's history as assistant
    messages before the agent sees it.

    Text chunks are emitted as ``{"text": "..."}`` events, then ``{"done": true}``.
    A failure after streaming has started is reported as ``{"error": "..."}``.
    """
    messages = merge_verification_messages(request.messages, mailbox)
    try:
        messages = validate_ui_messages(messages)
    except InvalidMessagesError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    async def generate() -> AsyncIterator[str]:
        t_start = time.time()
        t_first_chunk = None
        chunk_count = 0
        try:
            async for chunk in agent.respond_stream(messages):
                chunk_count += 1
                if t_first_chunk is None:
                    t_first_chunk = time.time() - t_start
                    logger.info("[TIMING] Stream first chunk: %.2fs", t_first_chunk)
                yield _sse({SSE_TEXT: chunk})
            logger.info(
                "[TIMING] Stream complete: %.2fs total, %d chunks, first_chunk=%.2fs",
                time.time() - t_start, chunk_count, t_first_chunk or 0,
            )
            yield _sse({SSE_DONE: True})
        except Exception as e:
            logger.error("Error in chat stream: %s", e, exc_info=True)
            yield _sse({SSE_ERROR: "An error occurred"})

    return StreamingResponse(
        generate(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
