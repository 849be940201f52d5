# src/reader_kit/session/session.py

import logging
from collections.abc import Callable
from enum import Enum

from reader_kit.anchors.models import Bookmark, ResolvedParagraph
from reader_kit.anchors.resolver import AnchorResolver
from reader_kit.bridge.models import ActionKind, ActionPayload, Selection
from reader_kit.bridge.node_index import RenderedNodeIndex
from reader_kit.bridge.selection import SelectionBridge
from reader_kit.errors import BookmarkNotFoundError, DecodeError
from reader_kit.navigation import navigator
from reader_kit.navigation.position import Direction, Position
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook
from reader_kit.parsing.decoding import decode
from reader_kit.parsing.models import Document
from reader_kit.parsing.segmenter import PlainTextSegmenter
from reader_kit.prompts.prompts_library import PromptsLibrary
from reader_kit.store.types import BookRecord

from .config import ReaderConfig

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[BookRecord], None]


class LoadState(str, Enum):
    READY = "ready"
    EMPTY = "empty"  # decoded fine, no text
    UNREADABLE = "unreadable"  # decoding failed; offer another encoding


def _ignore_update(record: BookRecord) -> None:
    pass


class ReaderSession:
    """Reading state for one open book.

    Holds the current Document, the reading position and the book record.
    Every change to position, bookmarks or encoding produces a new record
    handed to `on_update` (normally `Library.update`, which persists it
    without waiting). The session never rolls back when saving fails.

    All methods are synchronous and may run outside an event loop; writes
    queued through `Library.update` then start on the next `drain` or
    `submit` made from inside one.
    """

    def __init__(
        self,
        record: BookRecord,
        on_update: UpdateCallback = _ignore_update,
        config: ReaderConfig | None = None,
        prompts: PromptsLibrary | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.record = record
        self.on_update = on_update
        self.config = config or ReaderConfig()
        self.metrics_hook = metrics_hook
        self.node_index = RenderedNodeIndex()
        self.bridge = SelectionBridge(
            self.node_index, prompts=prompts, metrics_hook=metrics_hook
        )
        self.resolver = AnchorResolver(metrics_hook)
        self._segmenter = PlainTextSegmenter(self.config.segmenter, metrics_hook)
        self.state = LoadState.EMPTY
        self.document = Document()
        self.position: Position | None = None
        self._open()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _open(self) -> None:
        self.node_index.clear()
        try:
            text = decode(self.record.content, self.record.encoding)
        except DecodeError as exc:
            self.metrics_hook.increment(names.DECODE_ERRORS_TOTAL)
            logger.error(
                "Failed to parse book %s with encoding %s: %s",
                self.record.id,
                self.record.encoding,
                exc.reason,
            )
            self.state = LoadState.UNREADABLE
            self.document = Document()
            self.position = None
            return

        self.document = self._segmenter.segment(text)
        if self.document.is_empty:
            self.state = LoadState.EMPTY
            self.position = None
            return

        self.state = LoadState.READY
        self.position = navigator.clamp(self.document, self.record.last_read_position)
        if self.position != self.record.last_read_position:
            logger.info(
                "Stored position %s of book %s is outside the document, moved to %s",
                self.record.last_read_position,
                self.record.id,
                self.position,
            )
            self._commit(self.record.with_position(self.position))

    def change_encoding(self, encoding: str) -> LoadState:
        """Re-decode and re-segment the book; the old Document is dropped."""
        logger.info("Switching book %s to encoding %s", self.record.id, encoding)
        self._commit(self.record.with_encoding(encoding))
        self._open()
        return self.state

    @property
    def ready(self) -> bool:
        return self.state is LoadState.READY

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> bool:
        return self._move(self._step(Direction.FORWARD))

    def previous(self) -> bool:
        return self._move(self._step(Direction.BACKWARD))

    def next_chapter(self) -> bool:
        return self._move(self._step_chapter(Direction.FORWARD))

    def previous_chapter(self) -> bool:
        return self._move(self._step_chapter(Direction.BACKWARD))

    def select_chapter(self, chapter_index: int) -> bool:
        if self.position is None:
            return False
        return self._move(
            navigator.jump_to_chapter(self.document, self.position, chapter_index)
        )

    def go_to_bookmark(self, bookmark_id: str) -> Position | None:
        bookmark = self._bookmark(bookmark_id)
        if self.position is None:
            return None
        target = navigator.clamp(
            self.document,
            Position(bookmark.chapter_index, bookmark.paragraph_index),
        )
        self._move(target)
        return self.position

    @property
    def at_start(self) -> bool:
        return self.position is None or navigator.is_first(self.document, self.position)

    @property
    def at_end(self) -> bool:
        return self.position is None or navigator.is_last(self.document, self.position)

    @property
    def current_paragraph(self) -> str | None:
        if self.position is None:
            return None
        return self.document.paragraph(
            self.position.chapter_index, self.position.paragraph_index
        )

    def progress_label(self) -> str:
        if self.position is None:
            return "0 / 0"
        return navigator.progress_label(self.document, self.position)

    def _step(self, direction: Direction) -> Position | None:
        if self.position is None:
            return None
        return navigator.advance(self.document, self.position, direction)

    def _step_chapter(self, direction: Direction) -> Position | None:
        if self.position is None:
            return None
        return navigator.step_chapter(self.document, self.position, direction)

    def _move(self, target: Position | None) -> bool:
        if target is None or target == self.position:
            return False
        self.position = target
        self._commit(self.record.with_position(target))
        return True

    # ------------------------------------------------------------------
    # Bookmarks
    # ------------------------------------------------------------------

    @property
    def bookmarks(self) -> list[Bookmark]:
        return list(self.record.bookmarks)

    def add_bookmark(self, selection: Selection) -> Bookmark:
        """Bookmark a live selection.

        Raises UnanchorableSelectionError or EmptySelectionError; callers
        should treat both as a no-op.
        """
        bookmark = self.bridge.bookmark_from_selection(selection)
        self._commit(self.record.with_bookmarks([*self.record.bookmarks, bookmark]))
        return bookmark

    def delete_bookmark(self, bookmark_id: str) -> bool:
        remaining = [b for b in self.record.bookmarks if b.id != bookmark_id]
        if len(remaining) == len(self.record.bookmarks):
            return False
        self._commit(self.record.with_bookmarks(remaining))
        return True

    def resolved_chapter(self, chapter_index: int | None = None) -> list[ResolvedParagraph]:
        if chapter_index is None:
            if self.position is None:
                return []
            chapter_index = self.position.chapter_index
        return self.resolver.resolve_chapter(
            self.document, chapter_index, self.record.bookmarks
        )

    def stale_bookmarks(self) -> list[Bookmark]:
        return self.resolver.find_unresolvable(self.document, self.record.bookmarks)

    def chapter_title_for(self, bookmark: Bookmark) -> str | None:
        if 0 <= bookmark.chapter_index < len(self.document.chapters):
            return self.document.chapters[bookmark.chapter_index].title
        return None

    def _bookmark(self, bookmark_id: str) -> Bookmark:
        for bookmark in self.record.bookmarks:
            if bookmark.id == bookmark_id:
                return bookmark
        raise BookmarkNotFoundError(f"Bookmark '{bookmark_id}' not found")

    # ------------------------------------------------------------------
    # Text-service payloads
    # ------------------------------------------------------------------

    def selection_payload(
        self, selection_text: str, action: ActionKind | str
    ) -> ActionPayload:
        return self.bridge.to_action_payload(selection_text, action=action)

    def summary_payload(self, chapter_index: int | None = None) -> ActionPayload:
        if chapter_index is None:
            if self.position is None:
                raise ValueError("no chapter to summarize in an unreadable or empty book")
            chapter_index = self.position.chapter_index
        chapter = self.document.chapter(chapter_index)
        return self.bridge.to_action_payload(
            chapter.text,
            {"book_title": self.record.title, "chapter_title": chapter.title},
            action=ActionKind.SUMMARIZE,
        )

    def _commit(self, record: BookRecord) -> None:
        self.record = record
        self.on_update(record)
