"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Interview Room"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_budgets_positive(self) -> "Settings":
        for field_name in (
            "verification_timeout",
            "interviewer_max_steps",
            "verifier_max_steps",
            "web_search_max_uses",
            "fetch_timeout",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        if self.shutdown_drain_timeout < 0:
            raise ValueError(
                f"shutdown_drain_timeout must be >= 0, got {self.shutdown_drain_timeout}"
            )
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*']; consider restricting in production"
            )
        return self

    # Anthropic (interviewer, verifier, PDF reader)
    anthropic_api_key: str | None = None
    anthropic_base_url: str | None = None

    # OpenAI (transcription + speech)
    openai_api_key: str | None = None
    openai_base_url: str | None = None

    # Interviewer Agent
    interviewer_model: str = "claude-sonnet-4-5"
    interviewer_max_steps: int = 5
    interviewer_max_tokens: int = 4096
    interviewer_temperature: float = 0.7

    # Authenticity Verifier Agent
    verifier_model: str = "claude-haiku-4-5"
    verifier_max_steps: int = 3
    verifier_max_tokens: int = 1024
    verification_timeout: float = 60.0
    web_search_max_uses: int = 1
    fetch_timeout: float = 15.0
    fetch_max_chars: int = 20000

    # PDF reader
    pdf_model: str = "claude-haiku-4-5"
    pdf_max_tokens: int = 8192

    # Transcription
    transcription_model: str = "gpt-4o-transcribe"
    transcription_prompt: str = "The following audio is in a tech interview of a candidate."

    # Speech synthesis
    speech_model: str = "gpt-4o-mini-tts"
    speech_voice: str = "alloy"
    speech_speed: float = 1.2

    # Workspace
    context_dir: str = "./context"
    memory_dir: str = "./generated"

    # Shutdown: seconds to wait for in-flight verifications (0 = abandon them)
    shutdown_drain_timeout: float = 0.0

    # CORS
    allowed_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
