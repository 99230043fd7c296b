"""FastAPI dependencies.

Process-scoped collaborators (mailbox, dispatcher, audio client) live on
``app.state`` and are created in the application lifespan.
"""

from fastapi import Depends, Request

from interview_room.config.settings import Settings, get_settings
from interview_room.infrastructure.audio.openai_audio import OpenAIAudioClient
from interview_room.services.interview.agent import InterviewAgent
from interview_room.services.verification.dispatcher import VerificationDispatcher
from interview_room.services.verification.mailbox import VerificationMailbox


def get_mailbox(request: Request) -> VerificationMailbox:
    return request.app.state.mailbox


def get_dispatcher(request: Request) -> VerificationDispatcher:
    return request.app.state.dispatcher


def get_audio_client(request: Request) -> OpenAIAudioClient:
    return request.app.state.audio_client


def get_interview_agent(
    settings: Settings = Depends(get_settings),  # noqa: B008
    dispatcher: VerificationDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> InterviewAgent:
    return InterviewAgent(settings, dispatcher)
