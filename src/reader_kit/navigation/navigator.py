# src/reader_kit/navigation/navigator.py

"""Navigation over the positions of a Document.

An empty chapter is a single virtual position (paragraph index 0), so every
chapter can be landed on. All functions are total over valid positions:
stepping past either end of the document returns None instead of raising.
"""

from collections.abc import Iterator

from reader_kit.errors import PositionOutOfRangeError
from reader_kit.parsing.models import Document

from .position import Direction, Position


def _last_index(document: Document, chapter_index: int) -> int:
    return max(0, len(document.chapters[chapter_index].paragraphs) - 1)


def is_valid(document: Document, position: Position) -> bool:
    if not 0 <= position.chapter_index < len(document.chapters):
        return False
    return 0 <= position.paragraph_index <= _last_index(
        document, position.chapter_index
    )


def clamp(document: Document, position: Position) -> Position | None:
    """Pull a (possibly stale) position into the bounds of `document`.

    Returns None only for a document without chapters.
    """
    if document.is_empty:
        return None
    chapter_index = min(max(position.chapter_index, 0), len(document.chapters) - 1)
    paragraph_index = min(
        max(position.paragraph_index, 0), _last_index(document, chapter_index)
    )
    return Position(chapter_index, paragraph_index)


def first_position(document: Document) -> Position | None:
    if document.is_empty:
        return None
    return Position(0, 0)


def last_position(document: Document) -> Position | None:
    if document.is_empty:
        return None
    chapter_index = len(document.chapters) - 1
    return Position(chapter_index, _last_index(document, chapter_index))


def is_first(document: Document, position: Position) -> bool:
    return position == first_position(document)


def is_last(document: Document, position: Position) -> bool:
    return position == last_position(document)


def advance(
    document: Document, position: Position, direction: Direction
) -> Position | None:
    """Step one paragraph in `direction`, crossing chapter boundaries.

    Returns None when already at the start (backward) or end (forward).
    """
    chapter_index, paragraph_index = position.chapter_index, position.paragraph_index

    if Direction(direction) is Direction.FORWARD:
        if paragraph_index < _last_index(document, chapter_index):
            return Position(chapter_index, paragraph_index + 1)
        if chapter_index + 1 < len(document.chapters):
            return Position(chapter_index + 1, 0)
        return None

    if paragraph_index > 0:
        return Position(chapter_index, paragraph_index - 1)
    if chapter_index > 0:
        return Position(chapter_index - 1, _last_index(document, chapter_index - 1))
    return None


def step_chapter(
    document: Document, position: Position, direction: Direction
) -> Position | None:
    """Move to the start of the neighbouring chapter, or None at the ends."""
    offset = 1 if Direction(direction) is Direction.FORWARD else -1
    target = position.chapter_index + offset
    if not 0 <= target < len(document.chapters):
        return None
    return jump_to_chapter(document, position, target)


def jump_to_chapter(
    document: Document, position: Position, chapter_index: int
) -> Position:
    """Select a chapter; reselecting the current one keeps the paragraph."""
    if not 0 <= chapter_index < len(document.chapters):
        raise PositionOutOfRangeError(
            f"chapter index {chapter_index} out of range "
            f"(document has {len(document.chapters)} chapters)"
        )
    if chapter_index == position.chapter_index:
        return position
    return Position(chapter_index, 0)


def iter_positions(document: Document) -> Iterator[Position]:
    for chapter_index, chapter in enumerate(document.chapters):
        for paragraph_index in range(max(1, len(chapter.paragraphs))):
            yield Position(chapter_index, paragraph_index)


def progress_label(document: Document, position: Position) -> str:
    """Paragraph counter for the current chapter, e.g. "3 / 12"."""
    chapter = document.chapter(position.chapter_index)
    if chapter.is_empty:
        return "0 / 0"
    return f"{position.paragraph_index + 1} / {len(chapter.paragraphs)}"
