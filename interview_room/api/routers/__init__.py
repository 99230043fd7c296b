"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from interview_room.api.routers.audio import router as audio_router
from interview_room.api.routers.chat import router as chat_router
from interview_room.api.routers.health import router as health_router

api_router = APIRouter()

api_router.include_router(chat_router, tags=["chat"])
api_router.include_router(audio_router, tags=["audio"])
api_router.include_router(health_router, tags=["health"])
