"""Logging setup and structured event logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Third-party loggers that flood INFO with per-request lines
_NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "anthropic",
    "openai",
    "agent_framework",
    "uvicorn.access",
)


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    json_output: bool = True,
    silence_noisy_loggers: bool = True,
) -> None:
    """Configure the root logger.

    Args:
        level: Root log level name.
        json_output: Emit JSON lines (production) instead of plain text (debug).
        silence_noisy_loggers: Raise HTTP/SDK client loggers to WARNING.
    """
    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    if silence_noisy_loggers:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


class StructuredLogger:
    """Structured logger for background task events."""

    def __init__(self, name: str = __name__):
        """Initialize structured logger."""
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        event: str,
        data: dict[str, Any],
        duration_ms: float | None = None,
    ) -> None:
        """Log a completed event."""
        log_data: dict[str, Any] = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "data": data,
        }
        if duration_ms:
            log_data["duration_ms"] = round(duration_ms, 1)

        self.logger.info(json.dumps(log_data, ensure_ascii=False, default=str))

    def log_error(
        self,
        event: str,
        error: BaseException,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Log an error with context."""
        log_data: dict[str, Any] = {
            "event": event,
            "error": str(error),
            "error_type": type(error).__name__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if context:
            log_data["context"] = context

        self.logger.error(json.dumps(log_data, ensure_ascii=False, default=str), exc_info=error)
