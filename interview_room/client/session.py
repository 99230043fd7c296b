"""HTTP clients for the interview room API."""

import json
import logging
from collections.abc import Awaitable, Callable

import httpx

from interview_room.config.constants import (
    DEFAULT_AUDIO_CONTENT_TYPE,
    DEFAULT_AUDIO_FILENAME,
    SSE_DONE,
    SSE_ERROR,
    SSE_TEXT,
    ConversationStatus,
    MessageRole,
)
from interview_room.services.interview.models import UIMessage

logger = logging.getLogger(__name__)

StatusListener = Callable[[ConversationStatus], Awaitable[None]]
ChunkListener = Callable[[str], Awaitable[None]]


class ChatStreamError(Exception):
    """The server reported an error event in the chat stream."""


class ChatSession:
    """Client-held conversation history with a submitted/streaming/ready/error lifecycle."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client
        self.messages: list[UIMessage] = []
        self.status = ConversationStatus.READY
        self._status_listeners: list[StatusListener] = []
        self._chunk_listeners: list[ChunkListener] = []

    def add_status_listener(self, listener: StatusListener) -> None:
        self._status_listeners.append(listener)

    def add_chunk_listener(self, listener: ChunkListener) -> None:
        self._chunk_listeners.append(listener)

    async def _set_status(self, status: ConversationStatus) -> None:
        self.status = status
        for listener in list(self._status_listeners):
            await listener(status)

    async def send_message(self, text: str) -> str:
        """Send a user message and return the assistant's full reply.

        Errors are not raised: the status ends in ``error`` and the partial
        reply (possibly empty) is returned.
        """
        self.messages.append(UIMessage.from_text(MessageRole.USER, text))
        await self._set_status(ConversationStatus.SUBMITTED)

        chunks: list[str] = []
        final_status = ConversationStatus.READY
        try:
            payload = {"messages": [m.model_dump(mode="json") for m in self.messages]}
            async with self.client.stream("POST", "/api/chat", json=payload) as response:
                response.raise_for_status()
                async for line in response.aiter_lines():
                    if not line.startswith("data: "):
                        continue
                    event = json.loads(line[len("data: "):])
                    if SSE_ERROR in event:
                        raise ChatStreamError(event[SSE_ERROR])
                    if event.get(SSE_DONE):
                        break
                    chunk = event.get(SSE_TEXT)
                    if chunk:
                        if not chunks:
                            await self._set_status(ConversationStatus.STREAMING)
                        chunks.append(chunk)
                        for listener in list(self._chunk_listeners):
                            await listener(chunk)
        except (httpx.HTTPError, ChatStreamError, json.JSONDecodeError) as e:
            logger.error("Chat turn failed: %s", e)
            final_status = ConversationStatus.ERROR

        reply = "".join(chunks)
        if reply:
            self.messages.append(UIMessage.from_text(MessageRole.ASSISTANT, reply))
        await self._set_status(final_status)
        return reply


class TranscriptionClient:
    """Posts recorded audio to /api/transcribe."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def __call__(self, audio: bytes) -> str:
        return await self.transcribe(audio)

    async def transcribe(self, audio: bytes) -> str:
        files = {"file": (DEFAULT_AUDIO_FILENAME, audio, DEFAULT_AUDIO_CONTENT_TYPE)}
        response = await self.client.post("/api/transcribe", files=files)
        response.raise_for_status()
        return response.json().get("text", "")


class SpeechClient:
    """Fetches synthesized interviewer speech from /api/speech."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def synthesize(self, text: str, instructions: str = "") -> bytes:
        payload: dict[str, str] = {"text": text}
        if instructions:
            payload["instructions"] = instructions
        response = await self.client.post("/api/speech", json=payload)
        response.raise_for_status()
        return response.content
