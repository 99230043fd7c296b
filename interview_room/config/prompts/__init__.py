"""System prompts for interview room agents."""

from interview_room.config.prompts.documents import PDF_TO_MARKDOWN_PROMPT
from interview_room.config.prompts.interviewer import build_interviewer_system_prompt
from interview_room.config.prompts.verification import (
    build_verification_system_prompt,
    build_verification_user_input,
)

__all__ = [
    "PDF_TO_MARKDOWN_PROMPT",
    "build_interviewer_system_prompt",
    "build_verification_system_prompt",
    "build_verification_user_input",
]
