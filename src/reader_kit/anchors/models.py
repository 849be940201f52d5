# src/reader_kit/anchors/models.py

from dataclasses import dataclass
from time import time

from pydantic import BaseModel, Field, field_validator


class Bookmark(BaseModel):
    """A saved text fragment anchored to one paragraph.

    `text` is the verbatim selection at creation time. The bookmark stays
    attached to (chapter_index, paragraph_index) and becomes unresolvable,
    not deleted, when that paragraph no longer contains the text.
    """

    id: str
    text: str
    chapter_index: int = Field(ge=0)
    paragraph_index: int = Field(ge=0)
    created_at: float = Field(default_factory=time)

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("bookmark text must not be blank")
        return value


@dataclass(frozen=True)
class LiteralSegment:
    text: str


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    bookmark_id: str


Segment = LiteralSegment | HighlightSegment


@dataclass(frozen=True)
class ResolvedParagraph:
    """Segments of one paragraph plus the bookmarks that produced nothing.

    `unresolved` holds bookmarks whose text no longer occurs in the
    paragraph at all; `shadowed` holds bookmarks whose text occurs only
    inside a region already claimed by an earlier bookmark.
    """

    segments: tuple[Segment, ...]
    unresolved: tuple[str, ...] = ()
    shadowed: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)

    @property
    def highlights(self) -> list[HighlightSegment]:
        return [s for s in self.segments if isinstance(s, HighlightSegment)]
