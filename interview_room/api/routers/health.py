"""Health endpoint."""

from fastapi import APIRouter, Depends

from interview_room.api.dependencies import get_dispatcher
from interview_room.api.models import HealthResponse
from interview_room.config.settings import Settings, get_settings
from interview_room.services.verification.dispatcher import VerificationDispatcher

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings),  # noqa: B008
    dispatcher: VerificationDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        pending_verifications=dispatcher.in_flight,
    )
