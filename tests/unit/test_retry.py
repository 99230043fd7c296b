"""Tests for the retry helper."""

from unittest.mock import AsyncMock, patch

import pytest

from interview_room.utils.retry import is_transient_error, run_with_retry


def test_is_transient_error():
    assert is_transient_error(RuntimeError("Rate limit exceeded"))
    assert is_transient_error(RuntimeError("Overloaded"))
    assert is_transient_error(TimeoutError())
    assert not is_transient_error(ValueError("bad pdf"))


@pytest.mark.asyncio
async def test_retries_transient_errors_then_succeeds():
    func = AsyncMock(side_effect=[RuntimeError("overloaded"), "markdown"])
    with patch("interview_room.utils.retry.asyncio.sleep", AsyncMock()) as sleep:
        assert await run_with_retry(func, max_retries=2, initial_delay=2.0) == "markdown"

    assert func.await_count == 2
    sleep.assert_awaited_once_with(2.0)


@pytest.mark.asyncio
async def test_uses_retry_hint_from_message():
    func = AsyncMock(side_effect=[RuntimeError("rate limit, retry in 7 seconds"), "ok"])
    with patch("interview_room.utils.retry.asyncio.sleep", AsyncMock()) as sleep:
        await run_with_retry(func, max_retries=3)

    sleep.assert_awaited_once_with(7.0)


@pytest.mark.asyncio
async def test_non_transient_error_is_raised_at_once():
    func = AsyncMock(side_effect=ValueError("bad pdf"))
    with pytest.raises(ValueError):
        await run_with_retry(func, max_retries=3)
    assert func.await_count == 1


@pytest.mark.asyncio
async def test_last_transient_error_is_raised():
    func = AsyncMock(side_effect=RuntimeError("overloaded"))
    with patch("interview_room.utils.retry.asyncio.sleep", AsyncMock()):
        with pytest.raises(RuntimeError, match="overloaded"):
            await run_with_retry(func, max_retries=2)
    assert func.await_count == 2
