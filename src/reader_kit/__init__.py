# Segmentation
from .parsing import Chapter, Document, PlainTextSegmenter, SegmenterConfig, segment

# Navigation
from .navigation import Direction, Position, advance, jump_to_chapter

# Anchors
from .anchors import (
    AnchorResolver,
    Bookmark,
    HighlightSegment,
    LiteralSegment,
    resolve_anchors,
)

# Selection bridge
from .bridge import (
    ActionKind,
    ActionPayload,
    RenderedNodeIndex,
    Selection,
    SelectionBridge,
    to_action_payload,
    to_bookmark,
)

# Errors
from .errors import (
    DecodeError,
    EmptySelectionError,
    ReaderKitError,
    StoreError,
    UnanchorableSelectionError,
)

# Observability
from .observability import CountingMetricsHook, MetricsHook, NoOpMetricsHook

# Prompts
from .prompts import Prompt, PromptsLibrary

# Text service
from .llms import LLMConfig, TextService, create_text_service

# Assistant
from .assistant import ActionResult, ReadingAssistant

# Storage and sessions
from .store import BookRecord, BookStore, InMemoryBookStore, SQLiteBookStore
from .session import BookWriter, Library, LoadState, ReaderConfig, ReaderSession

__all__ = [
    # Segmentation
    "Chapter",
    "Document",
    "PlainTextSegmenter",
    "SegmenterConfig",
    "segment",
    # Navigation
    "Direction",
    "Position",
    "advance",
    "jump_to_chapter",
    # Anchors
    "AnchorResolver",
    "Bookmark",
    "HighlightSegment",
    "LiteralSegment",
    "resolve_anchors",
    # Selection bridge
    "ActionKind",
    "ActionPayload",
    "RenderedNodeIndex",
    "Selection",
    "SelectionBridge",
    "to_action_payload",
    "to_bookmark",
    # Errors
    "DecodeError",
    "EmptySelectionError",
    "ReaderKitError",
    "StoreError",
    "UnanchorableSelectionError",
    # Observability
    "CountingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Text service
    "LLMConfig",
    "TextService",
    "create_text_service",
    # Assistant
    "ActionResult",
    "ReadingAssistant",
    # Storage and sessions
    "BookRecord",
    "BookStore",
    "InMemoryBookStore",
    "SQLiteBookStore",
    "BookWriter",
    "Library",
    "LoadState",
    "ReaderConfig",
    "ReaderSession",
]
