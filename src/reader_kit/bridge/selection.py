# src/reader_kit/bridge/selection.py

"""Turning live selections into bookmarks or text-service payloads.

Multi-paragraph selections are anchored to the paragraph the selection
starts in; the bookmark stores the full selected text, which will then only
resolve if it happens to occur inside that single paragraph. Cross-paragraph
bookmarks are not supported.
"""

import logging
from collections.abc import Callable, Mapping
from time import time
from uuid import uuid4

from reader_kit.anchors.models import Bookmark
from reader_kit.errors import EmptySelectionError, UnanchorableSelectionError
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook
from reader_kit.prompts.prompts_library import PromptsLibrary

from .models import ActionKind, ActionPayload, Selection
from .node_index import RenderedNodeIndex

logger = logging.getLogger(__name__)


def _new_bookmark_id() -> str:
    return uuid4().hex


class SelectionBridge:
    def __init__(
        self,
        node_index: RenderedNodeIndex,
        prompts: PromptsLibrary | None = None,
        id_factory: Callable[[], str] = _new_bookmark_id,
        clock: Callable[[], float] = time,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.node_index = node_index
        self._prompts = prompts
        self._id_factory = id_factory
        self._clock = clock
        self.metrics_hook = metrics_hook

    @property
    def prompts(self) -> PromptsLibrary:
        if self._prompts is None:
            self._prompts = PromptsLibrary.default()
        return self._prompts

    def to_bookmark(
        self,
        selection_text: str,
        source_paragraph_index: int,
        source_chapter_index: int,
    ) -> Bookmark:
        """Create a bookmark storing `selection_text` verbatim."""
        if not selection_text.strip():
            raise EmptySelectionError("cannot bookmark an empty selection")
        bookmark = Bookmark(
            id=self._id_factory(),
            text=selection_text,
            chapter_index=source_chapter_index,
            paragraph_index=source_paragraph_index,
            created_at=self._clock(),
        )
        self.metrics_hook.increment(names.BOOKMARKS_CREATED_TOTAL)
        logger.debug(
            "Created bookmark %s at chapter=%d paragraph=%d",
            bookmark.id,
            source_chapter_index,
            source_paragraph_index,
        )
        return bookmark

    def bookmark_from_selection(self, selection: Selection) -> Bookmark:
        """Anchor `selection` to the paragraph its start node belongs to.

        Raises:
            UnanchorableSelectionError: the start node is not a registered
                paragraph node.
            EmptySelectionError: the selection holds only whitespace.
        """
        position = self.node_index.lookup(selection.start_node)
        if position is None:
            self.metrics_hook.increment(names.SELECTIONS_UNANCHORABLE_TOTAL)
            logger.warning(
                "Selection start node %r is not a rendered paragraph",
                selection.start_node,
            )
            raise UnanchorableSelectionError(
                "selection does not start inside a known paragraph"
            )
        if self.spans_paragraphs(selection):
            logger.info(
                "Selection spans several paragraphs; anchoring to chapter=%d paragraph=%d",
                position.chapter_index,
                position.paragraph_index,
            )
        return self.to_bookmark(
            selection.text, position.paragraph_index, position.chapter_index
        )

    def spans_paragraphs(self, selection: Selection) -> bool:
        if selection.end_node is None:
            return False
        start = self.node_index.lookup(selection.start_node)
        end = self.node_index.lookup(selection.end_node)
        return end is not None and start != end

    def to_action_payload(
        self,
        selection_text: str,
        surrounding_context: Mapping[str, str] | None = None,
        action: ActionKind | str = ActionKind.EXPLAIN,
    ) -> ActionPayload:
        """Render the prompt for `action` over `selection_text`.

        `surrounding_context` supplies any extra prompt inputs, e.g.
        `book_title` and `chapter_title` for summaries.
        """
        if not selection_text.strip():
            raise EmptySelectionError("cannot act on an empty selection")
        kind = ActionKind(action)
        context = dict(surrounding_context or {})
        values = {**context, "text": selection_text}
        prompt = self.prompts.latest(kind.value).render(**values)
        return ActionPayload(
            action=kind,
            prompt=prompt,
            source_text=selection_text,
            context=context,
        )


def to_bookmark(
    selection_text: str, source_paragraph_index: int, source_chapter_index: int
) -> Bookmark:
    return SelectionBridge(RenderedNodeIndex()).to_bookmark(
        selection_text, source_paragraph_index, source_chapter_index
    )


def to_action_payload(
    selection_text: str,
    surrounding_context: Mapping[str, str] | None = None,
    action: ActionKind | str = ActionKind.EXPLAIN,
) -> ActionPayload:
    return SelectionBridge(RenderedNodeIndex()).to_action_payload(
        selection_text, surrounding_context, action
    )
