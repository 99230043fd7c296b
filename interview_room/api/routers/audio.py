"""Audio endpoints: transcription (speech → text) and speech synthesis (text → speech)."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from interview_room.api.dependencies import get_audio_client
from interview_room.api.models import SpeechRequest, TranscriptionResponse
from interview_room.config.constants import DEFAULT_AUDIO_CONTENT_TYPE, DEFAULT_AUDIO_FILENAME
from interview_room.infrastructure.audio.openai_audio import OpenAIAudioClient, SpeechGenerationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    file: UploadFile | None = File(None),  # noqa: B008
    audio_client: OpenAIAudioClient = Depends(get_audio_client),  # noqa: B008
) -> TranscriptionResponse:
    """Transcribe a recorded utterance uploaded as multipart ``file``."""
    if file is None:
        raise HTTPException(status_code=400, detail="No file provided")

    try:
        data = await file.read()
        text = await audio_client.transcribe(
            file.filename or DEFAULT_AUDIO_FILENAME,
            data,
            file.content_type or DEFAULT_AUDIO_CONTENT_TYPE,
        )
    except Exception as e:
        logger.error("Transcription error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to transcribe audio") from e

    return TranscriptionResponse(text=text)


@router.post("/speech")
async def speech(
    request: SpeechRequest,
    audio_client: OpenAIAudioClient = Depends(get_audio_client),  # noqa: B008
) -> Response:
    """Synthesize the interviewer's speech; returns raw audio bytes."""
    if not request.text:
        raise HTTPException(status_code=400, detail="No text provided")

    try:
        result = await audio_client.synthesize(request.text, request.instructions)
    except SpeechGenerationError as e:
        logger.error("No speech generated: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e
    except Exception as e:
        logger.error("Speech generation error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate speech") from e

    return Response(content=result.audio, media_type=result.media_type)
