# src/reader_kit/session/writer.py

import asyncio
import logging
from collections.abc import Callable

from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook
from reader_kit.store.base import BookStore
from reader_kit.store.types import BookRecord

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[BookRecord, Exception], None]


class BookWriter:
    """Fire-and-forget, ordered persistence of book records.

    `submit` never blocks the caller. A single worker task applies writes in
    the order they were submitted. A failed write is logged, counted and
    reported to `on_error`; nothing is retried or rolled back.

    Records submitted while no event loop is running stay queued; the worker
    starts on the next `submit` or `drain` made from inside a loop.
    """

    def __init__(
        self,
        store: BookStore,
        on_error: ErrorCallback | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.store = store
        self.on_error = on_error
        self.metrics_hook = metrics_hook
        self._queue: asyncio.Queue[BookRecord | None] = asyncio.Queue()
        self._worker: asyncio.Task[None] | None = None

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def submit(self, record: BookRecord) -> None:
        """Queue `record` for writing."""
        if record.is_temporary:
            logger.debug("Not persisting temporary book %s", record.id)
            return
        self._queue.put_nowait(record)
        self.metrics_hook.record_gauge(names.WRITER_QUEUE_DEPTH, self._queue.qsize())
        self._ensure_worker()

    async def drain(self) -> None:
        """Wait until every submitted write has been attempted."""
        if not self._queue.empty():
            self._ensure_worker()
        await self._queue.join()

    async def close(self) -> None:
        await self.drain()
        if self._worker is not None and not self._worker.done():
            self._queue.put_nowait(None)
            await self._worker
        self._worker = None

    def _ensure_worker(self) -> None:
        # Restarts reuse the same queue
        if self._worker is not None and not self._worker.done():
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(
                "No running event loop, %d writes wait for the next submit or drain",
                self._queue.qsize(),
            )
            return
        self._worker = loop.create_task(self._run())

    async def _run(self) -> None:
        while True:
            record = await self._queue.get()
            try:
                if record is None:
                    return
                await self.store.upsert(record)
                self.metrics_hook.increment(names.WRITER_WRITES_TOTAL)
            except Exception as exc:
                self.metrics_hook.increment(names.WRITER_ERRORS_TOTAL)
                logger.error("Failed to save book %s: %s", record.id, exc)
                self._report(record, exc)
            finally:
                self._queue.task_done()

    def _report(self, record: BookRecord, exc: Exception) -> None:
        if self.on_error is None:
            return
        try:
            self.on_error(record, exc)
        except Exception:
            logger.exception("Error callback failed for book %s", record.id)
