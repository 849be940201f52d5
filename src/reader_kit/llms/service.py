# src/reader_kit/llms/service.py

"""Text-in/text-out facade over an LLMClient.

The reader only ever needs `generate(prompt) -> str`; conversation shape,
provider and token accounting stay behind the LLMClient protocol.
"""

import logging
from typing import Protocol

from reader_kit.errors import EmptyCompletionError

from .base import LLMClient, Message, Role

logger = logging.getLogger(__name__)


class TextService(Protocol):
    async def generate(self, prompt: str) -> str: ...


class LLMTextService:
    def __init__(
        self,
        client: LLMClient,
        *,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> None:
        self.client = client
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def generate(self, prompt: str) -> str:
        response = await self.client.complete(
            messages=[Message(role=Role.USER, content=prompt)],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        if not response.content:
            logger.warning("Completion returned no text (finish=%s)", response.finish_reason)
            raise EmptyCompletionError(
                f"completion returned no text (finish={response.finish_reason})"
            )
        return response.content
