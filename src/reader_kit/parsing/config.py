# src/reader_kit/parsing/config.py

from dataclasses import dataclass

from .headings import DEFAULT_HEADING_TABLE, HeadingTable


@dataclass(frozen=True)
class SegmenterConfig:
    """Configuration for text segmentation.

    Immutable. Explicit. Identical config and input give identical chapters.
    """

    default_title: str = "Preface"  # Title of text before the first heading
    fallback_title: str = "Full Text"
    headings: HeadingTable = DEFAULT_HEADING_TABLE
