"""SQLite book store built on apsw."""

import asyncio
import json
import logging
from pathlib import Path
from time import monotonic
from typing import Any

import apsw

from reader_kit.errors import StoreError
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import BookStore
from .types import BookRecord

logger = logging.getLogger(__name__)


class SQLiteBookStore(BookStore):
    """Book store keeping one row per book in a SQLite database.

    Reading state (position, bookmarks, encoding) is stored as JSON next to
    the raw file bytes, which go into a BLOB column untouched so that a book
    can be re-decoded with another encoding later.

    Example:
        >>> store = SQLiteBookStore(db_path="library.db")
        >>> await store.upsert(record)
        >>> books = await store.load_all()
    """

    def __init__(
        self,
        db_path: str | Path = ":memory:",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        """
        Initialize the store. The connection is opened lazily.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
            metrics_hook: Hook for recording metrics.
        """
        self.metrics_hook = metrics_hook
        self._db_path = str(db_path)
        self._conn: apsw.Connection | None = None

    def _get_connection(self) -> apsw.Connection:
        """Get or create SQLite connection (lazy initialization)."""
        if self._conn is None:
            self._conn = apsw.Connection(self._db_path)
            self._initialize_schema()
        return self._conn

    def _initialize_schema(self) -> None:
        if self._conn is None:
            return

        # rowid keeps import order; upserts update in place and keep it
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS books (
                id TEXT PRIMARY KEY,
                metadata TEXT NOT NULL,
                content BLOB NOT NULL
            )
            """
        )

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            await asyncio.to_thread(self._conn.close)
            self._conn = None

    async def _run(self, operation: str, func: Any) -> Any:
        try:
            return await asyncio.to_thread(func)
        except apsw.Error as exc:
            logger.error("SQLite %s failed: %s", operation, exc)
            raise StoreError(f"{operation} failed: {exc}") from exc

    async def load_all(self) -> list[BookRecord]:
        start = monotonic()

        def _load() -> list[BookRecord]:
            conn = self._get_connection()
            rows = list(
                conn.execute("SELECT metadata, content FROM books ORDER BY rowid")
            )
            return [
                BookRecord.model_validate({**json.loads(metadata), "content": content})
                for metadata, content in rows
            ]

        records: list[BookRecord] = await self._run("load", _load)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SQLITE_LOAD_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SQLITE_OPERATIONS_TOTAL, labels={"operation": "load"}
        )
        logger.debug("Loaded %d books", len(records))
        return records

    async def upsert(self, record: BookRecord) -> None:
        """
        Insert or update one book.

        Args:
            record: Book to store, keyed by its id.
        """
        start = monotonic()
        metadata = record.model_dump_json(exclude={"content"})

        def _upsert() -> None:
            conn = self._get_connection()
            conn.execute(
                """
                INSERT INTO books(id, metadata, content) VALUES (?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    metadata = excluded.metadata,
                    content = excluded.content
                """,
                (record.id, metadata, record.content),
            )

        await self._run("upsert", _upsert)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SQLITE_UPSERT_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SQLITE_OPERATIONS_TOTAL, labels={"operation": "upsert"}
        )

    async def remove(self, book_id: str) -> bool:
        start = monotonic()

        def _remove() -> bool:
            conn = self._get_connection()
            conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
            return conn.changes() > 0

        removed: bool = await self._run("remove", _remove)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SQLITE_REMOVE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SQLITE_OPERATIONS_TOTAL, labels={"operation": "remove"}
        )
        return removed

    async def count(self) -> int:
        def _count() -> int:
            conn = self._get_connection()
            result: int = list(conn.execute("SELECT COUNT(*) FROM books"))[0][0]
            return result

        return await self._run("count", _count)
