from pydantic import BaseModel, Field

from reader_kit.anchors.models import Bookmark
from reader_kit.navigation.position import Position

UNKNOWN_AUTHOR = "Unknown author"


class BookRecord(BaseModel):
    """A book as persisted by the store: raw bytes plus reading state."""

    id: str
    title: str
    author: str = UNKNOWN_AUTHOR
    content: bytes
    encoding: str = "utf-8"
    last_read_chapter_index: int = Field(default=0, ge=0)
    last_read_paragraph_index: int = Field(default=0, ge=0)
    bookmarks: list[Bookmark] = Field(default_factory=list)
    is_temporary: bool = False

    class Config:
        extra = "forbid"
        frozen = True

    @property
    def last_read_position(self) -> Position:
        return Position(self.last_read_chapter_index, self.last_read_paragraph_index)

    def with_position(self, position: Position) -> "BookRecord":
        return self.model_copy(
            update={
                "last_read_chapter_index": position.chapter_index,
                "last_read_paragraph_index": position.paragraph_index,
            }
        )

    def with_bookmarks(self, bookmarks: list[Bookmark]) -> "BookRecord":
        return self.model_copy(update={"bookmarks": list(bookmarks)})

    def with_encoding(self, encoding: str) -> "BookRecord":
        return self.model_copy(update={"encoding": encoding})
