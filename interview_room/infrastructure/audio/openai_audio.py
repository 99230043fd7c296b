"""OpenAI audio client: transcription and speech synthesis."""

import logging
from dataclasses import dataclass
from typing import Any

from openai import AsyncOpenAI

from interview_room.config.constants import SPEECH_MEDIA_TYPE
from interview_room.config.settings import Settings

logger = logging.getLogger(__name__)


class SpeechGenerationError(Exception):
    """The speech service answered but produced no audio."""


@dataclass(frozen=True)
class SynthesizedSpeech:
    """Audio bytes plus their media type."""

    audio: bytes
    media_type: str = SPEECH_MEDIA_TYPE


class OpenAIAudioClient:
    """Thin wrapper over the OpenAI audio endpoints."""

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None) -> None:
        self.settings = settings
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # Created on first use so the app starts without OpenAI credentials
        if self._client is None:
            kwargs: dict[str, Any] = {"api_key": self.settings.openai_api_key}
            if self.settings.openai_base_url:
                kwargs["base_url"] = self.settings.openai_base_url
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def transcribe(self, filename: str, data: bytes, content_type: str) -> str:
        """Transcribe an audio upload to plain text."""
        transcription = await self.client.audio.transcriptions.create(
            file=(filename, data, content_type),
            model=self.settings.transcription_model,
            prompt=self.settings.transcription_prompt,
        )
        text = transcription.text or ""
        logger.info("[TRANSCRIBE] %d bytes -> %d chars", len(data), len(text))
        return text

    async def synthesize(self, text: str, instructions: str | None = None) -> SynthesizedSpeech:
        """Synthesize speech for ``text``; raises SpeechGenerationError on empty audio."""
        kwargs: dict[str, Any] = {
            "model": self.settings.speech_model,
            "voice": self.settings.speech_voice,
            "input": text,
            "speed": self.settings.speech_speed,
            "response_format": "mp3",
        }
        if instructions:
            kwargs["instructions"] = instructions

        response = await self.client.audio.speech.create(**kwargs)
        audio = response.content
        if not audio:
            raise SpeechGenerationError(f"No audio generated for {len(text)} chars of text")
        logger.info("[SPEECH] %d chars -> %d bytes", len(text), len(audio))
        return SynthesizedSpeech(audio=audio)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
