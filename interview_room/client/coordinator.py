"""Push-to-talk recording and queue-merge coordinator.

States: idle -> recording -> transcribing -> idle. A finished transcript is
sent at once when the conversation is idle, or queued while a previous turn
is still submitted/streaming. The queue is flushed as one space-joined
message on the next processing -> idle status edge.
"""

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Protocol

from interview_room.client.state import StatusEdge, detect_status_edge, is_processing
from interview_room.config.constants import ConversationStatus, RecorderState

logger = logging.getLogger(__name__)


class AudioRecorder(Protocol):
    def start(self) -> None: ...

    async def stop(self) -> bytes | None: ...


class SpeechPlayback(Protocol):
    def stop(self) -> None: ...


def timestamp_utterance(text: str) -> str:
    """Prefix an utterance with the local wall-clock time."""
    now = datetime.now().astimezone()
    return f"[{now.strftime('%a %b %d %Y %H:%M:%S GMT%z (%Z)')}] {text}"


class PushToTalkCoordinator:
    """Turns held-key recordings into outbound chat messages."""

    def __init__(
        self,
        recorder: AudioRecorder,
        transcribe: Callable[[bytes], Awaitable[str]],
        send: Callable[[str], Awaitable[None]],
        playback: SpeechPlayback | None = None,
        stamp: Callable[[str], str] = timestamp_utterance,
    ) -> None:
        self._recorder = recorder
        self._transcribe = transcribe
        self._send = send
        self._playback = playback
        self._stamp = stamp
        self.state = RecorderState.IDLE
        self.status: ConversationStatus | None = None
        self.queue: list[str] = []

    # ------------------------------------------------------------------
    # Gesture handling
    # ------------------------------------------------------------------

    def press(self) -> bool:
        """Start recording; interrupts the interviewer's speech. Returns False if busy."""
        if self.state != RecorderState.IDLE:
            return False
        if self._playback is not None:
            self._playback.stop()
        self._recorder.start()
        self.state = RecorderState.RECORDING
        return True

    async def release(self) -> None:
        """Stop recording, transcribe, then send or queue the utterance."""
        if self.state != RecorderState.RECORDING:
            return
        self.state = RecorderState.TRANSCRIBING
        try:
            audio = await self._recorder.stop()
            if not audio:
                logger.warning("[PTT] No audio captured")
                return
            text = await self._transcribe(audio)
        except Exception as e:
            logger.error("Error transcribing audio: %s", e)
            return
        finally:
            self.state = RecorderState.IDLE
        await self.handle_transcript(text)

    # ------------------------------------------------------------------
    # Queue management
    # ------------------------------------------------------------------

    async def handle_transcript(self, text: str) -> None:
        """Send the utterance now, or queue it while a turn is in progress."""
        if not text:
            return
        stamped = self._stamp(text)
        if is_processing(self.status):
            self.queue.append(stamped)
            logger.info("[PTT] Queued utterance (%d pending)", len(self.queue))
            return
        await self._send(stamped)

    async def on_status_change(self, status: ConversationStatus) -> None:
        """Observe a conversation status; flush the queue on processing -> idle."""
        previous, self.status = self.status, status
        if detect_status_edge(previous, status) != StatusEdge.FLUSH or not self.queue:
            return
        queued, self.queue = self.queue, []
        merged = " ".join(queued)
        if merged.strip():
            logger.info("[PTT] Flushing %d queued utterance(s)", len(queued))
            await self._send(merged)
