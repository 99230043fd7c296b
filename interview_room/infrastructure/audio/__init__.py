"""Audio infrastructure module."""

from interview_room.infrastructure.audio.openai_audio import (
    OpenAIAudioClient,
    SpeechGenerationError,
    SynthesizedSpeech,
)

__all__ = [
    "OpenAIAudioClient",
    "SpeechGenerationError",
    "SynthesizedSpeech",
]
