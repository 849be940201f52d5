from .base import BookStore
from .memory import InMemoryBookStore
from .sqlite import SQLiteBookStore
from .types import UNKNOWN_AUTHOR, BookRecord

__all__ = [
    "BookRecord",
    "BookStore",
    "InMemoryBookStore",
    "SQLiteBookStore",
    "UNKNOWN_AUTHOR",
]
