# tests/unit/store/test_sqlite_store.py

from pathlib import Path

import pytest

from reader_kit.anchors.models import Bookmark
from reader_kit.errors import StoreError
from reader_kit.navigation.position import Position
from reader_kit.observability import CountingMetricsHook, names
from reader_kit.store import BookRecord, SQLiteBookStore


def _record(book_id: str, title: str = "秋日", content: bytes = b"abc") -> BookRecord:
    return BookRecord(id=book_id, title=title, content=content)


class TestSQLiteBookStore:
    @pytest.mark.asyncio
    async def test_upsert_and_load(self) -> None:
        """Test basic upsert and load operations."""
        store = SQLiteBookStore(db_path=":memory:")

        await store.upsert(_record("1", content="第一章\n秋风".encode("gbk")))

        books = await store.load_all()

        assert len(books) == 1
        assert books[0].id == "1"
        assert books[0].title == "秋日"
        assert books[0].content == "第一章\n秋风".encode("gbk")

        await store.close()

    @pytest.mark.asyncio
    async def test_reading_state_round_trips(self) -> None:
        """Test that position, encoding and bookmarks survive storage."""
        store = SQLiteBookStore(db_path=":memory:")
        bookmark = Bookmark(
            id="b1", text="秋风", chapter_index=1, paragraph_index=2, created_at=5.0
        )
        record = (
            _record("1")
            .with_position(Position(1, 2))
            .with_encoding("gbk")
            .with_bookmarks([bookmark])
        )

        await store.upsert(record)
        (loaded,) = await store.load_all()

        assert loaded == record
        assert loaded.last_read_position == Position(1, 2)
        assert loaded.bookmarks[0].text == "秋风"

        await store.close()

    @pytest.mark.asyncio
    async def test_upsert_updates_existing_and_keeps_order(self) -> None:
        """Test that upsert replaces a record in place."""
        store = SQLiteBookStore(db_path=":memory:")
        await store.upsert(_record("a", "First"))
        await store.upsert(_record("b", "Second"))

        await store.upsert(_record("a", "First, renamed"))

        books = await store.load_all()
        assert [b.id for b in books] == ["a", "b"]
        assert books[0].title == "First, renamed"
        assert await store.count() == 2

        await store.close()

    @pytest.mark.asyncio
    async def test_remove(self) -> None:
        """Test removing a book by id."""
        store = SQLiteBookStore(db_path=":memory:")
        await store.upsert(_record("a"))

        assert await store.remove("a") is True
        assert await store.remove("a") is False
        assert await store.load_all() == []

        await store.close()

    @pytest.mark.asyncio
    async def test_persists_across_connections(self, tmp_path: Path) -> None:
        """Test that records survive reopening a file database."""
        db_path = tmp_path / "library.db"
        store = SQLiteBookStore(db_path=db_path)
        await store.upsert(_record("a"))
        await store.close()

        reopened = SQLiteBookStore(db_path=db_path)
        books = await reopened.load_all()

        assert [b.id for b in books] == ["a"]
        await reopened.close()

    @pytest.mark.asyncio
    async def test_database_errors_become_store_errors(self, tmp_path: Path) -> None:
        """Test that apsw failures surface as StoreError."""
        store = SQLiteBookStore(db_path=tmp_path)

        with pytest.raises(StoreError):
            await store.load_all()

    @pytest.mark.asyncio
    async def test_metrics_recorded(self) -> None:
        """Test that store operations are counted and timed."""
        metrics = CountingMetricsHook()
        store = SQLiteBookStore(db_path=":memory:", metrics_hook=metrics)

        await store.upsert(_record("a"))
        await store.load_all()
        await store.remove("a")

        assert metrics.count(names.SQLITE_OPERATIONS_TOTAL) == 3
        assert len(metrics.latencies[names.SQLITE_UPSERT_DURATION]) == 1
        assert len(metrics.latencies[names.SQLITE_LOAD_DURATION]) == 1
        assert len(metrics.latencies[names.SQLITE_REMOVE_DURATION]) == 1

        await store.close()
