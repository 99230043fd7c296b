"""Background verification dispatcher (fire-and-forget)."""

import asyncio
import contextlib
import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from interview_room.infrastructure.logging.logger import StructuredLogger
from interview_room.services.verification.mailbox import VerificationMailbox
from interview_room.services.verification.models import (
    VerificationFailure,
    VerificationRequest,
    VerificationResult,
    VerificationSuccess,
)
from interview_room.services.verification.verifier import parse_verification_answer

logger = logging.getLogger(__name__)
_events = StructuredLogger(__name__)

VerifyFn = Callable[[str], Awaitable[str]]


class VerificationDispatcher:
    """Starts verifications as detached tasks and posts each outcome to the mailbox.

    ``dispatch`` returns the correlation id immediately. Each task appends
    exactly one result (success or failure) and never raises. Task handles
    are retained only so ``shutdown`` can decide their fate; callers get no
    cancellation handle.
    """

    def __init__(
        self,
        mailbox: VerificationMailbox,
        verify: VerifyFn,
        timeout: float,
    ) -> None:
        self.mailbox = mailbox
        self._verify = verify
        self._timeout = timeout
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def dispatch(self, question: str) -> str:
        """Start a background verification and return its id."""
        request = VerificationRequest(id=str(uuid.uuid4()), question=question)
        task = asyncio.create_task(self._run(request), name=f"verify-{request.id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.info("[VERIFY] Dispatched %s: %s", request.id, question[:120])
        return request.id

    async def _run(self, request: VerificationRequest) -> None:
        t0 = time.time()
        result: VerificationResult
        deadline = asyncio.timeout(self._timeout)
        try:
            async with deadline:
                text = await self._verify(request.question)
            answer = parse_verification_answer(text)
            result = VerificationSuccess(
                id=request.id,
                confidence=answer.confidence,
                reason=answer.reason,
                answer=answer.answer,
            )
            _events.log_event(
                "verification_succeeded",
                {"id": request.id, "confidence": answer.confidence},
                duration_ms=(time.time() - t0) * 1000,
            )
        except TimeoutError as e:
            # A TimeoutError raised by the verifier itself keeps its own message
            if deadline.expired():
                result = VerificationFailure(
                    id=request.id,
                    error=f"Verification timed out after {self._timeout:g}s",
                )
                _events.log_error("verification_timeout", e, {"id": request.id})
            else:
                result = VerificationFailure(id=request.id, error=str(e) or type(e).__name__)
                _events.log_error("verification_failed", e, {"id": request.id})
        except Exception as e:
            result = VerificationFailure(id=request.id, error=str(e) or type(e).__name__)
            _events.log_error("verification_failed", e, {"id": request.id})
        self.mailbox.append(result)

    async def wait_for_pending(self) -> None:
        """Wait until every task dispatched so far has posted its result."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def shutdown(self, drain_timeout: float = 0.0) -> int:
        """Stop the dispatcher at process exit.

        Waits up to ``drain_timeout`` seconds for in-flight tasks, then
        cancels the rest. Cancelled tasks post nothing; the mailbox dies
        with the process anyway.

        Returns:
            Number of abandoned tasks.
        """
        if not self._tasks:
            return 0
        if drain_timeout > 0:
            with contextlib.suppress(TimeoutError):
                async with asyncio.timeout(drain_timeout):
                    await asyncio.shield(self.wait_for_pending())
        abandoned = [task for task in self._tasks if not task.done()]
        for task in abandoned:
            task.cancel()
        if abandoned:
            await asyncio.gather(*abandoned, return_exceptions=True)
            logger.warning("[VERIFY] Abandoned %d in-flight verification(s) on shutdown", len(abandoned))
        return len(abandoned)
