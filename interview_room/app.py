"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from interview_room.api.routers import api_router
from interview_room.config.settings import Settings, get_settings
from interview_room.infrastructure.audio.openai_audio import OpenAIAudioClient
from interview_room.infrastructure.llm.factory import close_shared_anthropic
from interview_room.infrastructure.logging.logger import setup_logging
from interview_room.services.verification.dispatcher import VerificationDispatcher
from interview_room.services.verification.mailbox import VerificationMailbox
from interview_room.services.verification.verifier import AuthenticityVerifier

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.anthropic_api_key:
        logger.warning("anthropic_api_key is empty; interviewer and verifier calls will fail")
    if not settings.openai_api_key:
        logger.warning("openai_api_key is empty; transcription and speech calls will fail")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s", settings.app_name)
    _validate_startup_config(settings)

    # One mailbox per process, shared by the dispatcher (writer) and /chat (drainer)
    mailbox = VerificationMailbox()
    app.state.mailbox = mailbox
    app.state.dispatcher = VerificationDispatcher(
        mailbox=mailbox,
        verify=AuthenticityVerifier(settings),
        timeout=settings.verification_timeout,
    )
    app.state.audio_client = OpenAIAudioClient(settings)

    yield
    logger.info("Shutting down %s", settings.app_name)
    try:
        await app.state.dispatcher.shutdown(settings.shutdown_drain_timeout)
    except Exception as e:
        logger.error("Error stopping verification dispatcher: %s", e, exc_info=True)
    try:
        await app.state.audio_client.close()
        logger.info("Audio client closed")
    except Exception as e:
        logger.error("Error closing audio client: %s", e, exc_info=True)
    try:
        await close_shared_anthropic()
        logger.info("Shared Anthropic client closed")
    except Exception as e:
        logger.error("Error closing Anthropic client: %s", e, exc_info=True)


app = FastAPI(
    title="Interview Room",
    description="Mock interview backend: interviewer agent, background fact checks, audio I/O",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")
