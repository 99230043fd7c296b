"""Pytest configuration and fixtures."""

import pytest

from interview_room.config.settings import Settings


@pytest.fixture
def settings(tmp_path):
    """Provide settings fixture with workspace folders under tmp_path."""
    return Settings(
        anthropic_api_key="test-anthropic",
        openai_api_key="test-openai",
        context_dir=str(tmp_path / "context"),
        memory_dir=str(tmp_path / "generated"),
        verification_timeout=1.0,
    )
