"""
Backoff for Anthropic calls outside the verification flow (PDF conversion).
"""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from typing import TypeVar

import anthropic
import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRANSIENT_TYPES = (
    anthropic.RateLimitError,
    anthropic.APIConnectionError,
    anthropic.InternalServerError,
    httpx.ConnectError,
    httpx.ReadTimeout,
    TimeoutError,
)
_TRANSIENT_MARKERS = ("rate limit", "rate_limit", "overloaded", "connection reset")
_RETRY_AFTER_RE = re.compile(r"(\d+)\s{0,10}seconds?", re.IGNORECASE)


def is_transient_error(exception: Exception) -> bool:
    """True for throttling, overload and dropped-connection failures."""
    if isinstance(exception, _TRANSIENT_TYPES):
        return True
    message = str(exception).lower()
    return any(marker in message for marker in _TRANSIENT_MARKERS)


def _retry_delay(exception: Exception, attempt: int, initial_delay: float, backoff_factor: float) -> float:
    # Honour "retry in N seconds" hints from the API before falling back to backoff
    hint = _RETRY_AFTER_RE.search(str(exception))
    if hint:
        return float(hint.group(1))
    return initial_delay * (backoff_factor**attempt)


async def run_with_retry(
    func: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    initial_delay: float = 5.0,
    backoff_factor: float = 2.0,
    retry_on_rate_limit: bool = True,
) -> T:
    """
    Await ``func()`` up to ``max_retries`` times, sleeping between transient failures.

    Non-transient errors, and the last transient one, are re-raised unchanged.
    """
    for attempt in range(1, max_retries + 1):
        try:
            return await func()
        except Exception as e:
            if not (retry_on_rate_limit and is_transient_error(e)) or attempt == max_retries:
                raise
            delay = _retry_delay(e, attempt - 1, initial_delay, backoff_factor)
            logger.warning(
                "[RETRY] Attempt %d/%d failed (%s); sleeping %.1fs",
                attempt,
                max_retries,
                e,
                delay,
            )
            await asyncio.sleep(delay)
    raise ValueError("max_retries must be at least 1")
