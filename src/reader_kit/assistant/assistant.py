# src/reader_kit/assistant/assistant.py

import logging
from dataclasses import dataclass
from time import monotonic

from reader_kit.bridge.models import ActionKind, ActionPayload
from reader_kit.bridge.node_index import RenderedNodeIndex
from reader_kit.bridge.selection import SelectionBridge
from reader_kit.llms.service import TextService
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook
from reader_kit.parsing.models import Document
from reader_kit.prompts.prompts_library import PromptsLibrary

logger = logging.getLogger(__name__)

DISABLED_MESSAGE = "AI features are disabled."
FAILURE_MESSAGE = "AI request failed."


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one assistant action, shown inline where it was requested."""

    action: ActionKind
    content: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ReadingAssistant:
    """Runs explain/translate/summarize actions against the text service.

    Text-service failures never propagate: they come back as an ActionResult
    carrying an error message, and leave document, position and bookmarks
    untouched.
    """

    def __init__(
        self,
        text_service: TextService | None,
        prompts: PromptsLibrary | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.text_service = text_service
        self.metrics_hook = metrics_hook
        self._bridge = SelectionBridge(RenderedNodeIndex(), prompts=prompts)

    @property
    def enabled(self) -> bool:
        return self.text_service is not None

    async def run(self, payload: ActionPayload) -> ActionResult:
        if self.text_service is None:
            logger.debug("Skipping %s: no text service configured", payload.action.value)
            return ActionResult(action=payload.action, error=DISABLED_MESSAGE)

        start = monotonic()
        labels = {"action": payload.action.value}
        self.metrics_hook.increment(names.ASSISTANT_ACTIONS_TOTAL, labels=labels)
        try:
            content = await self.text_service.generate(payload.prompt)
        except Exception:
            self.metrics_hook.increment(names.ASSISTANT_ERRORS_TOTAL, labels=labels)
            logger.warning("AI action %s failed", payload.action.value, exc_info=True)
            return ActionResult(action=payload.action, error=FAILURE_MESSAGE)

        logger.info(
            "AI action %s finished in %.0fms",
            payload.action.value,
            1000 * (monotonic() - start),
        )
        return ActionResult(action=payload.action, content=content)

    async def explain(self, selection_text: str) -> ActionResult:
        return await self.run(
            self._bridge.to_action_payload(selection_text, action=ActionKind.EXPLAIN)
        )

    async def translate(self, selection_text: str) -> ActionResult:
        return await self.run(
            self._bridge.to_action_payload(selection_text, action=ActionKind.TRANSLATE)
        )

    async def summarize_chapter(
        self, document: Document, chapter_index: int, book_title: str
    ) -> ActionResult:
        chapter = document.chapter(chapter_index)
        payload = self._bridge.to_action_payload(
            chapter.text,
            {"book_title": book_title, "chapter_title": chapter.title},
            action=ActionKind.SUMMARIZE,
        )
        return await self.run(payload)
