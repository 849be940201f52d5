from .base import TextSegmenter
from .config import SegmenterConfig
from .decoding import SUPPORTED_ENCODINGS, decode, detect_encoding
from .headings import DEFAULT_HEADING_TABLE, HeadingPattern, HeadingTable
from .models import Chapter, Document
from .segmenter import PlainTextSegmenter, segment

__all__ = [
    "Chapter",
    "DEFAULT_HEADING_TABLE",
    "Document",
    "HeadingPattern",
    "HeadingTable",
    "PlainTextSegmenter",
    "SUPPORTED_ENCODINGS",
    "SegmenterConfig",
    "TextSegmenter",
    "decode",
    "detect_encoding",
    "segment",
]
