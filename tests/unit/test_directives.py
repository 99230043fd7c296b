"""Tests for interviewer reply directives."""

from interview_room.client.directives import AgentDirectives, parse_agent_directives


def test_plain_reply_has_no_directives():
    assert parse_agent_directives("Just text.") == AgentDirectives()


def test_plain_speech_and_screen():
    content = "<speech>Tell me about a hard bug.</speech>\n<screen>\n# Question 2\n</screen>"
    directives = parse_agent_directives(content)

    assert directives.speech == "Tell me about a hard bug."
    assert directives.instructions == ""
    assert directives.screen == "# Question 2"


def test_json_speech_carries_instructions():
    content = '<speech>{"speech": "Welcome!", "instructions": "Warm and upbeat"}</speech>'
    directives = parse_agent_directives(content)

    assert directives.speech == "Welcome!"
    assert directives.instructions == "Warm and upbeat"
    assert directives.screen is None


def test_json_without_speech_key_is_kept_verbatim():
    content = '<speech>{"note": 1}</speech>'
    assert parse_agent_directives(content).speech == '{"note": 1}'


def test_only_first_block_is_used():
    content = "<speech>first</speech> and <speech>second</speech>"
    assert parse_agent_directives(content).speech == "first"
