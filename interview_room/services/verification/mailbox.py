"""Mailbox for background verification results."""

import logging
import threading

from interview_room.services.verification.models import VerificationResult

logger = logging.getLogger(__name__)


class VerificationMailbox:
    """Unbounded append/drain buffer shared by the dispatcher and the chat route.

    Only two mutations exist: ``append`` (one result, from a finished task) and
    ``drain`` (take everything and clear). Both hold the same lock, so a drain
    is a single step relative to any concurrent append: each result is
    delivered by exactly one drain.
    """

    def __init__(self) -> None:
        self._results: list[VerificationResult] = []
        self._lock = threading.Lock()

    def append(self, result: VerificationResult) -> None:
        with self._lock:
            self._results.append(result)
            size = len(self._results)
        logger.debug("[MAILBOX] Appended %s (size=%d)", result.id, size)

    def drain(self) -> list[VerificationResult]:
        """Atomically take all pending results and clear the mailbox."""
        with self._lock:
            drained, self._results = self._results, []
        if drained:
            logger.info("[MAILBOX] Drained %d result(s)", len(drained))
        return drained

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
