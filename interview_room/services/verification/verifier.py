"""Authenticity verifier service."""

import logging

from interview_room.config.prompts import (
    build_verification_system_prompt,
    build_verification_user_input,
)
from interview_room.config.settings import Settings
from interview_room.infrastructure.llm.executor import run_single_agent
from interview_room.infrastructure.llm.factory import create_anthropic_agent
from interview_room.services.verification.models import (
    MalformedVerificationError,
    VerificationAnswer,
)
from interview_room.services.verification.tools import create_lookup_tools
from interview_room.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)


def parse_verification_answer(text: str) -> VerificationAnswer:
    """Parse verifier output into a VerificationAnswer.

    Raises:
        MalformedVerificationError: No JSON object could be extracted.
        pydantic.ValidationError: The object does not have the expected shape.
    """
    data = JSONParser.extract_json(text)
    if not data:
        raise MalformedVerificationError(
            f"Verifier output is not valid JSON: {text[:200]!r}"
        )
    return VerificationAnswer.model_validate(data)


class AuthenticityVerifier:
    """Answers a factual question with web lookups and returns the raw agent text."""

    def __init__(self, settings: Settings):
        """Initialize authenticity verifier."""
        self.settings = settings

    async def __call__(self, question: str) -> str:
        return await self.verify(question)

    async def verify(self, question: str) -> str:
        """
        Run one verification.

        A fresh agent is created per call so concurrent verifications share
        no conversation state. Retries are disabled: a failure is reported
        once, as data, by the dispatcher.
        """
        agent = create_anthropic_agent(
            settings=self.settings,
            name="AuthenticityVerifier",
            instructions=build_verification_system_prompt(),
            tools=create_lookup_tools(self.settings, max_uses=self.settings.web_search_max_uses),
            model=self.settings.verifier_model,
            max_steps=self.settings.verifier_max_steps,
            max_tokens=self.settings.verifier_max_tokens,
        )
        text = await run_single_agent(agent, build_verification_user_input(question))
        logger.info("[VERIFY] Raw verifier output: %s", text[:500])
        return text
