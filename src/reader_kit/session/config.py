# src/reader_kit/session/config.py

from dataclasses import dataclass, field

from reader_kit.parsing.config import SegmenterConfig
from reader_kit.parsing.decoding import DEFAULT_ENCODING


@dataclass(frozen=True)
class ReaderConfig:
    """Configuration for reader sessions and the library.

    Passed explicitly to every session; there is no global reader state.
    """

    segmenter: SegmenterConfig = field(default_factory=SegmenterConfig)
    default_encoding: str = DEFAULT_ENCODING
    detect_encoding: bool = True  # Sniff UTF-8 vs GBK on import
