import logging

from reader_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import BookStore
from .types import BookRecord

logger = logging.getLogger(__name__)


class InMemoryBookStore(BookStore):
    """Dict-backed store for tests and throwaway sessions.

    Keeps insertion order, so `load_all` lists books in import order.
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook
        self._records: dict[str, BookRecord] = {}

    async def load_all(self) -> list[BookRecord]:
        return list(self._records.values())

    async def upsert(self, record: BookRecord) -> None:
        self._records[record.id] = record
        logger.debug("Stored book %s", record.id)

    async def remove(self, book_id: str) -> bool:
        return self._records.pop(book_id, None) is not None
