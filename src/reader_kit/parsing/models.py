# parsing/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chapter:
    title: str
    paragraphs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs

    @property
    def text(self) -> str:
        return "\n".join(self.paragraphs)


@dataclass(frozen=True)
class Document:
    """Segmented chapter/paragraph structure of one decoded text.

    Immutable. Re-segmenting the same book produces a new Document; nothing
    computed against an older one (positions, resolved anchors, selections)
    carries over without being checked again.
    """

    chapters: tuple[Chapter, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.chapters)

    @property
    def is_empty(self) -> bool:
        return not self.chapters

    @property
    def position_count(self) -> int:
        """Number of navigable positions; an empty chapter counts once."""
        return sum(max(1, len(c.paragraphs)) for c in self.chapters)

    def chapter(self, index: int) -> Chapter:
        if not 0 <= index < len(self.chapters):
            raise IndexError(f"chapter index {index} out of range")
        return self.chapters[index]

    def paragraph(self, chapter_index: int, paragraph_index: int) -> str | None:
        """Paragraph text, or None for the virtual slot of an empty chapter."""
        chapter = self.chapter(chapter_index)
        if chapter.is_empty and paragraph_index == 0:
            return None
        if not 0 <= paragraph_index < len(chapter.paragraphs):
            raise IndexError(f"paragraph index {paragraph_index} out of range")
        return chapter.paragraphs[paragraph_index]

    def chapter_text(self, index: int) -> str:
        return self.chapter(index).text

    def titles(self) -> list[str]:
        return [c.title for c in self.chapters]
