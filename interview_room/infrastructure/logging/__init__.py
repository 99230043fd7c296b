"""Logging infrastructure module."""

from interview_room.infrastructure.logging.logger import JSONFormatter, StructuredLogger, setup_logging

__all__ = [
    "JSONFormatter",
    "StructuredLogger",
    "setup_logging",
]
