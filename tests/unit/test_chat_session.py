"""Tests for the HTTP chat session and audio clients."""

import json

import httpx
import pytest

from interview_room.client.coordinator import PushToTalkCoordinator
from interview_room.client.session import ChatSession, SpeechClient, TranscriptionClient
from interview_room.config.constants import ConversationStatus, MessageRole


def _sse_body(*events: dict) -> bytes:
    return "".join(f"data: {json.dumps(e)}\n\n" for e in events).encode()


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")


def _recording_session(client: httpx.AsyncClient):
    session = ChatSession(client)
    statuses: list[ConversationStatus] = []

    async def record(status: ConversationStatus) -> None:
        statuses.append(status)

    session.add_status_listener(record)
    return session, statuses


@pytest.mark.asyncio
async def test_send_message_streams_reply_and_cycles_status():
    seen_payloads = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_payloads.append(json.loads(request.content))
        body = _sse_body({"text": "Hel"}, {"text": "lo"}, {"done": True})
        return httpx.Response(200, content=body, headers={"content-type": "text/event-stream"})

    async with _client(handler) as client:
        session, statuses = _recording_session(client)
        reply = await session.send_message("hi")

    assert reply == "Hello"
    assert statuses == [
        ConversationStatus.SUBMITTED,
        ConversationStatus.STREAMING,
        ConversationStatus.READY,
    ]
    assert [m.role for m in session.messages] == [MessageRole.USER, MessageRole.ASSISTANT]
    assert session.messages[1].text == "Hello"
    assert seen_payloads[0]["messages"][0]["parts"][0]["text"] == "hi"


@pytest.mark.asyncio
async def test_history_accumulates_across_turns():
    seen_payloads = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_payloads.append(json.loads(request.content))
        return httpx.Response(200, content=_sse_body({"text": "ok"}, {"done": True}))

    async with _client(handler) as client:
        session = ChatSession(client)
        await session.send_message("one")
        await session.send_message("two")

    assert len(seen_payloads[1]["messages"]) == 3


@pytest.mark.asyncio
async def test_error_event_ends_in_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=_sse_body({"text": "par"}, {"error": "An error occurred"}))

    async with _client(handler) as client:
        session, statuses = _recording_session(client)
        reply = await session.send_message("hi")

    assert reply == "par"
    assert statuses[-1] == ConversationStatus.ERROR
    assert session.status == ConversationStatus.ERROR


@pytest.mark.asyncio
async def test_http_error_ends_in_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"detail": "messages must not be empty"})

    async with _client(handler) as client:
        session, statuses = _recording_session(client)
        reply = await session.send_message("hi")

    assert reply == ""
    assert statuses == [ConversationStatus.SUBMITTED, ConversationStatus.ERROR]
    assert len(session.messages) == 1


@pytest.mark.asyncio
async def test_session_drives_coordinator_flush():
    sent: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=_sse_body({"text": "ok"}, {"done": True}))

    async with _client(handler) as client:
        session = ChatSession(client)

        async def send(text: str) -> None:
            sent.append(text)

        coordinator = PushToTalkCoordinator(
            recorder=None,
            transcribe=None,
            send=send,
            stamp=lambda text: text,
        )

        async def speak_mid_stream(chunk: str) -> None:
            await coordinator.handle_transcript("while streaming")

        session.add_status_listener(coordinator.on_status_change)
        session.add_chunk_listener(speak_mid_stream)
        await session.send_message("first")

    assert sent == ["while streaming"]
    assert coordinator.queue == []


@pytest.mark.asyncio
async def test_transcription_client_posts_multipart():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/transcribe"
        assert b'name="file"' in request.content
        assert b"audio.webm" in request.content
        return httpx.Response(200, json={"text": "transcribed"})

    async with _client(handler) as client:
        assert await TranscriptionClient(client)(b"bytes") == "transcribed"


@pytest.mark.asyncio
async def test_speech_client_returns_bytes():
    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        assert payload == {"text": "Welcome", "instructions": "warm"}
        return httpx.Response(200, content=b"mp3", headers={"content-type": "audio/mpeg"})

    async with _client(handler) as client:
        audio = await SpeechClient(client).synthesize("Welcome", "warm")

    assert audio == b"mp3"


@pytest.mark.asyncio
async def test_speech_client_raises_on_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "Failed to generate speech"})

    async with _client(handler) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await SpeechClient(client).synthesize("Welcome")
