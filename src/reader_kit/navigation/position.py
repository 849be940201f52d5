# src/reader_kit/navigation/position.py

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Reading direction for navigation steps."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, order=True)
class Position:
    """A reading location, comparable by document order.

    Ordering is lexicographic on (chapter_index, paragraph_index), which
    matches reading order for any Document.
    """

    chapter_index: int = 0
    paragraph_index: int = 0
