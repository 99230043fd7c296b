"""Client-side coordination for the interview room."""

from interview_room.client.coordinator import PushToTalkCoordinator, timestamp_utterance
from interview_room.client.directives import AgentDirectives, parse_agent_directives
from interview_room.client.session import ChatSession, ChatStreamError, SpeechClient, TranscriptionClient
from interview_room.client.state import StatusEdge, detect_status_edge, is_push_to_talk_key

__all__ = [
    "AgentDirectives",
    "ChatSession",
    "ChatStreamError",
    "PushToTalkCoordinator",
    "SpeechClient",
    "StatusEdge",
    "TranscriptionClient",
    "detect_status_edge",
    "is_push_to_talk_key",
    "parse_agent_directives",
    "timestamp_utterance",
]
