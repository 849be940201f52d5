# src/reader_kit/session/library.py

import asyncio
import logging
import re
from pathlib import Path
from uuid import uuid4

from reader_kit.errors import BookNotFoundError
from reader_kit.parsing.decoding import detect_encoding
from reader_kit.store.base import BookStore
from reader_kit.store.types import BookRecord

from .config import ReaderConfig
from .writer import BookWriter

logger = logging.getLogger(__name__)

_TXT_SUFFIX = re.compile(r"\.txt$", re.IGNORECASE)


class Library:
    """The shelf of imported books, mirrored in a BookStore.

    Imports and removals wait for the store and propagate StoreError, since
    the shelf must not show a book that was never saved. Reading-state
    updates go through the BookWriter instead and never block.
    """

    def __init__(
        self,
        store: BookStore,
        writer: BookWriter | None = None,
        config: ReaderConfig | None = None,
    ) -> None:
        self.store = store
        self.writer = writer or BookWriter(store)
        self.config = config or ReaderConfig()
        self._books: dict[str, BookRecord] = {}

    @property
    def books(self) -> list[BookRecord]:
        return list(self._books.values())

    async def load(self) -> list[BookRecord]:
        records = await self.store.load_all()
        self._books = {r.id: r for r in records}
        logger.info("Loaded %d books", len(records))
        return self.books

    def get(self, book_id: str) -> BookRecord:
        try:
            return self._books[book_id]
        except KeyError:
            raise BookNotFoundError(f"Book '{book_id}' not found") from None

    async def import_bytes(
        self, filename: str, data: bytes, *, temporary: bool = False
    ) -> BookRecord:
        if self.config.detect_encoding:
            encoding = detect_encoding(data)
        else:
            encoding = self.config.default_encoding
        record = BookRecord(
            id=uuid4().hex,
            title=_TXT_SUFFIX.sub("", Path(filename).name),
            content=data,
            encoding=encoding,
            is_temporary=temporary,
        )
        if not temporary:
            await self.store.upsert(record)
        self._books[record.id] = record
        logger.info(
            "Imported %s (%d bytes, encoding=%s)", record.title, len(data), encoding
        )
        return record

    async def import_file(self, path: str | Path) -> BookRecord:
        path = Path(path)
        data = await asyncio.to_thread(path.read_bytes)
        return await self.import_bytes(path.name, data)

    async def remove(self, book_id: str) -> None:
        record = self.get(book_id)
        if not record.is_temporary:
            await self.store.remove(book_id)
        del self._books[book_id]
        logger.info("Removed book %s", book_id)

    def update(self, record: BookRecord) -> None:
        """Replace the in-memory record and queue it for saving."""
        self._books[record.id] = record
        self.writer.submit(record)
