"""Tests for the verification mailbox."""

import threading

from interview_room.services.verification.mailbox import VerificationMailbox
from interview_room.services.verification.models import VerificationFailure, VerificationSuccess


def _success(id_: str) -> VerificationSuccess:
    return VerificationSuccess(id=id_, confidence=0.5, reason="r", answer="a")


def test_drain_empty_mailbox_returns_nothing():
    mailbox = VerificationMailbox()
    assert mailbox.drain() == []
    assert len(mailbox) == 0


def test_drain_takes_everything_and_clears():
    mailbox = VerificationMailbox()
    mailbox.append(_success("a"))
    mailbox.append(VerificationFailure(id="b", error="timeout"))

    drained = mailbox.drain()

    assert [r.id for r in drained] == ["a", "b"]
    assert len(mailbox) == 0
    assert mailbox.drain() == []


def test_consecutive_drains_partition_the_append_stream():
    mailbox = VerificationMailbox()
    mailbox.append(_success("a"))
    first = mailbox.drain()
    mailbox.append(_success("b"))
    mailbox.append(_success("c"))
    second = mailbox.drain()

    assert [r.id for r in first] == ["a"]
    assert [r.id for r in second] == ["b", "c"]


def test_concurrent_appends_and_drains_lose_and_duplicate_nothing():
    mailbox = VerificationMailbox()
    collected: list[str] = []
    collected_lock = threading.Lock()
    stop = threading.Event()

    def writer(prefix: str) -> None:
        for i in range(500):
            mailbox.append(_success(f"{prefix}-{i}"))

    def drainer() -> None:
        while not stop.is_set():
            batch = mailbox.drain()
            with collected_lock:
                collected.extend(r.id for r in batch)

    writers = [threading.Thread(target=writer, args=(p,)) for p in ("w1", "w2", "w3")]
    drain_thread = threading.Thread(target=drainer)
    drain_thread.start()
    for t in writers:
        t.start()
    for t in writers:
        t.join()
    stop.set()
    drain_thread.join()
    collected.extend(r.id for r in mailbox.drain())

    assert len(collected) == 1500
    assert len(set(collected)) == 1500
