"""Tests for the interviewer's tool wiring, message conversion and verifier setup."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from agent_framework import Role

from interview_room.config.constants import MessageRole
from interview_room.infrastructure.llm.executor import run_single_agent
from interview_room.services.interview.agent import to_chat_messages
from interview_room.services.interview.models import UIMessage
from interview_room.services.interview.tools import create_interview_tools
from interview_room.services.interview.workspace import ContextWorkspace, MemoryStore
from interview_room.services.verification.verifier import AuthenticityVerifier


def _tools_by_name(tools) -> dict:
    return {tool.name: tool for tool in tools}


@pytest.fixture
def dispatcher():
    fake = MagicMock()
    fake.dispatch.return_value = "3f2b6c1e-verification-id"
    return fake


@pytest.fixture
def tools(settings, dispatcher, tmp_path):
    context = tmp_path / "context"
    context.mkdir()
    (context / "README.md").write_text("# Backend interview\n", encoding="utf-8")
    return _tools_by_name(
        create_interview_tools(
            settings,
            dispatcher,
            workspace=ContextWorkspace(context),
            memory=MemoryStore(tmp_path / "generated"),
        )
    )


# ==========================================
#  TOOL WIRING
# ==========================================


def test_tool_set(tools):
    assert {
        "memory",
        "file_search",
        "grep_search",
        "read_file",
        "list_dir",
        "read_pdf",
        "do_authenticity_verification_on_background",
        "evaluate_interview",
        "fetch_url",
    } <= set(tools)


@pytest.mark.asyncio
async def test_background_verification_tool_returns_dispatch_id(tools, dispatcher):
    result = await tools["do_authenticity_verification_on_background"](
        question="Was Postgres 16 released in 2019?"
    )

    assert result == "3f2b6c1e-verification-id"
    dispatcher.dispatch.assert_called_once_with("Was Postgres 16 released in 2019?")


def test_file_tools_report_errors_as_text(tools):
    assert tools["read_file"](path="README.md") == "# Backend interview\n"
    assert tools["read_file"](path="../outside.md").startswith("Error:")


def test_memory_tool_routes_commands(tools):
    assert tools["memory"](command="create", path="notes.md", file_text="strong") == "File created: notes.md"
    assert tools["memory"](command="view", path="notes.md") == "strong"
    assert tools["memory"](command="format", path="notes.md").startswith("Error:")


# ==========================================
#  MESSAGE CONVERSION
# ==========================================


def test_to_chat_messages_keeps_roles_and_text():
    history = [
        UIMessage.from_text(MessageRole.SYSTEM, "be concise"),
        UIMessage.from_text(MessageRole.USER, "I know Go"),
        UIMessage.from_text(MessageRole.ASSISTANT, "Authenticity verification error: ID: b\nError: timeout"),
    ]

    converted = to_chat_messages(history)

    assert [m.role for m in converted] == [Role.SYSTEM, Role.USER, Role.ASSISTANT]
    assert [m.text for m in converted] == [m.text for m in history]


# ==========================================
#  VERIFIER
# ==========================================


@pytest.mark.asyncio
async def test_verifier_uses_step_budget_and_single_run(settings):
    agent = MagicMock()
    with (
        patch("interview_room.services.verification.verifier.create_anthropic_agent", return_value=agent) as create,
        patch(
            "interview_room.services.verification.verifier.run_single_agent",
            AsyncMock(return_value='{"confidence": 1, "reason": "r", "answer": "a"}'),
        ) as run,
    ):
        text = await AuthenticityVerifier(settings)("Is Kafka a message broker?")

    assert text == '{"confidence": 1, "reason": "r", "answer": "a"}'
    kwargs = create.call_args.kwargs
    assert kwargs["model"] == settings.verifier_model
    assert kwargs["max_steps"] == settings.verifier_max_steps == 3
    assert kwargs["max_tokens"] == settings.verifier_max_tokens
    assert {getattr(tool, "name", None) for tool in kwargs["tools"]} >= {"web_search", "fetch_url"}
    run.assert_awaited_once()
    assert run.await_args.args[0] is agent
    assert "Is Kafka a message broker?" in run.await_args.args[1]


@pytest.mark.asyncio
async def test_run_single_agent_does_not_retry():
    agent = MagicMock()
    agent.run = AsyncMock(side_effect=RuntimeError("rate limit exceeded"))

    with pytest.raises(RuntimeError):
        await run_single_agent(agent, "question")

    assert agent.run.await_count == 1
