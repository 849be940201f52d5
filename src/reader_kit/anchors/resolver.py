# src/reader_kit/anchors/resolver.py

import logging
from collections.abc import Iterable, Sequence

from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook
from reader_kit.parsing.models import Document

from .models import Bookmark, HighlightSegment, LiteralSegment, ResolvedParagraph, Segment

logger = logging.getLogger(__name__)


def order_bookmarks(bookmarks: Iterable[Bookmark]) -> list[Bookmark]:
    """Registration order: oldest `created_at` first, input order on ties."""
    return sorted(bookmarks, key=lambda b: b.created_at)


def bookmarks_for_paragraph(
    bookmarks: Iterable[Bookmark], chapter_index: int, paragraph_index: int
) -> list[Bookmark]:
    return [
        b
        for b in bookmarks
        if b.chapter_index == chapter_index and b.paragraph_index == paragraph_index
    ]


class AnchorResolver:
    """Maps bookmark text back onto current paragraph text.

    Resolution is paragraph scoped, left to right and non-overlapping:
    bookmarks are taken in order of where their text first occurs (ties by
    registration order), and each one claims the first occurrence at or
    after the end of the previous match.
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def resolve_paragraph(
        self, paragraph_text: str, bookmarks: Sequence[Bookmark]
    ) -> ResolvedParagraph:
        if not bookmarks:
            return ResolvedParagraph(segments=(LiteralSegment(paragraph_text),))

        located: list[tuple[int, Bookmark]] = []
        unresolved: list[str] = []
        for bookmark in order_bookmarks(bookmarks):
            first = paragraph_text.find(bookmark.text)
            if first == -1:
                unresolved.append(bookmark.id)
            else:
                located.append((first, bookmark))
        located.sort(key=lambda item: item[0])

        segments: list[Segment] = []
        shadowed: list[str] = []
        offset = 0
        for _, bookmark in located:
            start = paragraph_text.find(bookmark.text, offset)
            if start == -1:
                shadowed.append(bookmark.id)
                continue
            if start > offset:
                segments.append(LiteralSegment(paragraph_text[offset:start]))
            segments.append(HighlightSegment(bookmark.text, bookmark.id))
            offset = start + len(bookmark.text)

        if offset < len(paragraph_text) or not segments:
            segments.append(LiteralSegment(paragraph_text[offset:]))

        resolved_count = len(located) - len(shadowed)
        if resolved_count:
            self.metrics_hook.increment(names.ANCHORS_RESOLVED_TOTAL, resolved_count)
        if unresolved:
            self.metrics_hook.increment(names.ANCHORS_UNRESOLVED_TOTAL, len(unresolved))
            logger.debug("Bookmarks no longer found in paragraph: %s", unresolved)

        return ResolvedParagraph(
            segments=tuple(segments),
            unresolved=tuple(unresolved),
            shadowed=tuple(shadowed),
        )

    def resolve_chapter(
        self, document: Document, chapter_index: int, bookmarks: Iterable[Bookmark]
    ) -> list[ResolvedParagraph]:
        chapter = document.chapter(chapter_index)
        in_chapter = [b for b in bookmarks if b.chapter_index == chapter_index]
        return [
            self.resolve_paragraph(
                text, bookmarks_for_paragraph(in_chapter, chapter_index, index)
            )
            for index, text in enumerate(chapter.paragraphs)
        ]

    def find_unresolvable(
        self, document: Document, bookmarks: Iterable[Bookmark]
    ) -> list[Bookmark]:
        """Bookmarks whose stored text is gone from their paragraph."""
        stale = []
        for bookmark in bookmarks:
            try:
                paragraph = document.paragraph(
                    bookmark.chapter_index, bookmark.paragraph_index
                )
            except IndexError:
                paragraph = None
            if paragraph is None or bookmark.text not in paragraph:
                stale.append(bookmark)
        return stale


def resolve_anchors(
    paragraph_text: str,
    bookmarks: Sequence[Bookmark],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Segment]:
    """Split `paragraph_text` into literal and highlighted segments."""
    resolved = AnchorResolver(metrics_hook).resolve_paragraph(paragraph_text, bookmarks)
    return list(resolved.segments)
