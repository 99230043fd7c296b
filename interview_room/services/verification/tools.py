"""Knowledge-lookup tools: hosted web search + page fetch."""

import html
import logging
import re
from typing import Any

import httpx
from agent_framework import ai_function

from interview_room.config.settings import Settings
from interview_room.infrastructure.llm.factory import web_search_tool

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(r"<(script|style)[^>]*>.*?</\1>", re.DOTALL | re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_BLANK_RE = re.compile(r"\n\s*\n+")


def html_to_text(markup: str) -> str:
    """Crude HTML → text: drop scripts/styles and tags, decode entities, squeeze blank lines."""
    text = _SCRIPT_RE.sub("", markup)
    text = html.unescape(_TAG_RE.sub("", text))
    return _BLANK_RE.sub("\n\n", text).strip()


async def fetch_page_text(url: str, timeout: float, max_chars: int) -> str:
    """Fetch ``url`` and return its readable text, truncated to ``max_chars``."""
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        response = await client.get(url)
        response.raise_for_status()
    content_type = response.headers.get("content-type", "")
    text = html_to_text(response.text) if "html" in content_type else response.text
    if len(text) > max_chars:
        text = text[:max_chars] + "\n[truncated]"
    return text


def create_lookup_tools(settings: Settings, max_uses: int | None = None) -> list[Any]:
    """Create web search + fetch tools.

    Args:
        settings: Application settings (fetch timeout and size limits).
        max_uses: Cap on hosted web searches per run; None means unlimited.
    """

    @ai_function
    async def fetch_url(url: str) -> str:
        """Fetch a web page and return its text content. Use it to read a page found by web_search."""
        try:
            return await fetch_page_text(url, settings.fetch_timeout, settings.fetch_max_chars)
        except Exception as e:
            logger.warning("[FETCH] %s failed: %s", url, e)
            return f"Error: {e}"

    return [web_search_tool(max_uses), fetch_url]
