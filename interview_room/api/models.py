"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request model for chat endpoint."""

    # Parsed into UIMessages by validate_ui_messages
    messages: list[dict[str, Any]] = Field(..., description="Caller-held conversation history (UIMessage objects)")


class TranscriptionResponse(BaseModel):
    """Response model for transcription endpoint."""

    text: str = Field(..., description="Transcribed text")


class SpeechRequest(BaseModel):
    """Request model for speech endpoint."""

    text: str | None = Field(None, description="Text to speak")
    instructions: str | None = Field(None, description="Optional tone-of-voice instructions")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    pending_verifications: int = Field(0, description="Background verifications still running")
