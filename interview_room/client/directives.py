"""Parse the <speech> and <screen> directives the interviewer embeds in its replies."""

import json
import re
from dataclasses import dataclass

_SPEECH_RE = re.compile(r"<speech>(.*?)</speech>", re.DOTALL)
_SCREEN_RE = re.compile(r"<screen>(.*?)</screen>", re.DOTALL)


@dataclass(frozen=True)
class AgentDirectives:
    """What the client should say aloud and show on the whiteboard."""

    speech: str | None = None
    instructions: str = ""
    screen: str | None = None


def parse_agent_directives(content: str) -> AgentDirectives:
    """Extract the first <speech> and <screen> blocks from agent text.

    Speech content may be plain text or JSON ``{"speech": ..., "instructions": ...}``.
    """
    speech: str | None = None
    instructions = ""
    speech_match = _SPEECH_RE.search(content)
    if speech_match:
        speech = speech_match.group(1).strip()
        try:
            parsed = json.loads(speech)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict) and parsed.get("speech"):
            speech = str(parsed["speech"])
            instructions = str(parsed.get("instructions") or "")

    screen_match = _SCREEN_RE.search(content)
    screen = screen_match.group(1).strip() if screen_match else None
    return AgentDirectives(speech=speech, instructions=instructions, screen=screen)
