from .models import (
    Bookmark,
    HighlightSegment,
    LiteralSegment,
    ResolvedParagraph,
    Segment,
)
from .resolver import (
    AnchorResolver,
    bookmarks_for_paragraph,
    order_bookmarks,
    resolve_anchors,
)

__all__ = [
    "AnchorResolver",
    "Bookmark",
    "HighlightSegment",
    "LiteralSegment",
    "ResolvedParagraph",
    "Segment",
    "bookmarks_for_paragraph",
    "order_bookmarks",
    "resolve_anchors",
]
