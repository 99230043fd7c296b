"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import logging
import re
from typing import Any, Dict

logger = logging.getLogger(__name__)


class JSONParser:
    """Helper class to extract clean JSON from LLM responses."""

    @staticmethod
    def _loads_object(candidate: str) -> Dict[str, Any] | None:
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            return None
        return value if isinstance(value, dict) else None

    @staticmethod
    def extract_json(text: str) -> Dict[str, Any]:
        """Attempts to extract a JSON object from text.

        Returns an empty dict when nothing parseable is found; callers decide
        whether that is an error.
        """
        if not text:
            return {}

        direct = JSONParser._loads_object(text.strip())
        if direct is not None:
            return direct

        # Models sometimes echo the prompt's <answer> example wrapper
        answer_match = re.search(r"<answer>\s*(.*?)\s*</answer>", text, re.DOTALL | re.IGNORECASE)
        if answer_match:
            parsed = JSONParser._loads_object(answer_match.group(1))
            if parsed is not None:
                return parsed

        # Fallback: try to find JSON in code blocks
        match = re.search(r"```(?:json)?\s*(\{.*?\})\s*```", text, re.DOTALL)
        if match:
            parsed = JSONParser._loads_object(match.group(1))
            if parsed is not None:
                return parsed

        # Fallback: try to find any JSON object
        match = re.search(r"(\{.*\})", text, re.DOTALL)
        if match:
            parsed = JSONParser._loads_object(match.group(1))
            if parsed is not None:
                return parsed

        logger.warning("JSONParser: Could not extract JSON from text, returning empty dict")
        return {}
