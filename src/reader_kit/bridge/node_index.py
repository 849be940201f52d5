# src/reader_kit/bridge/node_index.py

import logging
from collections.abc import Hashable, Iterable

from reader_kit.navigation.position import Position

logger = logging.getLogger(__name__)


class RenderedNodeIndex:
    """Lookup from rendered paragraph nodes to document positions.

    The rendering layer registers one entry per paragraph node it draws and
    clears the index whenever it re-renders, so a stale node can never
    resolve to a paragraph of a newer Document.
    """

    def __init__(self) -> None:
        self._positions: dict[Hashable, Position] = {}

    def register(self, node_id: Hashable, position: Position) -> None:
        self._positions[node_id] = position

    def register_chapter(
        self, chapter_index: int, node_ids: Iterable[Hashable]
    ) -> None:
        """Register the nodes of one chapter, in paragraph order."""
        for paragraph_index, node_id in enumerate(node_ids):
            self.register(node_id, Position(chapter_index, paragraph_index))

    def lookup(self, node_id: Hashable | None) -> Position | None:
        if node_id is None:
            return None
        return self._positions.get(node_id)

    def clear(self) -> None:
        logger.debug("Clearing %d rendered nodes", len(self._positions))
        self._positions.clear()

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._positions
