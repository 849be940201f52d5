from .config import ReaderConfig
from .library import Library
from .session import LoadState, ReaderSession
from .writer import BookWriter

__all__ = [
    "BookWriter",
    "Library",
    "LoadState",
    "ReaderConfig",
    "ReaderSession",
]
