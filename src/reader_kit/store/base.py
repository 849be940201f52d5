from typing import Protocol

from reader_kit.observability.base import MetricsHook

from .types import BookRecord


class BookStore(Protocol):
    """Asynchronous persistence for book records.

    Implementations raise StoreError on failure. Callers treat failures as
    non-fatal: in-memory state stays authoritative for the session.
    """

    metrics_hook: MetricsHook

    async def load_all(self) -> list[BookRecord]: ...

    async def upsert(self, record: BookRecord) -> None: ...

    async def remove(self, book_id: str) -> bool:
        """
        Delete a book by id.
        Returns True when a record was removed.
        """
        ...
