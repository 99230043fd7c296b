"""PDF → markdown conversion through Anthropic document input."""

import base64
import logging

from interview_room.config.prompts import PDF_TO_MARKDOWN_PROMPT
from interview_room.config.settings import Settings
from interview_room.infrastructure.llm.factory import get_shared_anthropic
from interview_room.utils.retry import run_with_retry

logger = logging.getLogger(__name__)


class PdfReader:
    """Converts PDF bytes to markdown with a small Claude model."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def to_markdown(self, data: bytes) -> str:
        encoded = base64.standard_b64encode(data).decode("ascii")

        async def _convert() -> str:
            message = await get_shared_anthropic(self.settings).messages.create(
                model=self.settings.pdf_model,
                max_tokens=self.settings.pdf_max_tokens,
                system=PDF_TO_MARKDOWN_PROMPT,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "document",
                                "source": {
                                    "type": "base64",
                                    "media_type": "application/pdf",
                                    "data": encoded,
                                },
                            }
                        ],
                    }
                ],
            )
            return "".join(
                block.text for block in message.content if getattr(block, "type", "") == "text"
            )

        markdown = await run_with_retry(_convert, max_retries=2, initial_delay=2.0)
        logger.info("[PDF] Converted %d bytes -> %d chars of markdown", len(data), len(markdown))
        return markdown
