# parsing/segmenter.py

import logging
import re
from time import monotonic

from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import TextSegmenter
from .config import SegmenterConfig
from .models import Chapter, Document

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


class PlainTextSegmenter(TextSegmenter):
    """
    Deterministic plain-text segmenter.
    - Splits on LF or CRLF
    - Starts a chapter at every line matching the heading table
    - Drops blank lines and chapters with no text
    """

    def __init__(
        self,
        config: SegmenterConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or SegmenterConfig()
        self.metrics_hook = metrics_hook

    def segment(self, raw_text: str) -> Document:
        start = monotonic()
        lines = _LINE_BREAK.split(raw_text)
        headings = self.config.headings

        chapters: list[Chapter] = []
        heading_seen = False
        current_title = self.config.default_title
        current_lines: list[str] = []

        for line in lines:
            clean = line.strip()

            if clean and headings.is_heading(clean):
                heading_seen = True
                self._flush(chapters, current_title, current_lines)
                current_title = clean
                current_lines = []
                continue

            current_lines.append(clean)

        self._flush(chapters, current_title, current_lines)

        if raw_text.strip() and (not chapters or not heading_seen):
            # Text without any heading, or headings with nothing between
            # them, is read as one undivided chapter.
            chapters = [
                Chapter(
                    title=self.config.fallback_title,
                    paragraphs=tuple(c for c in (line.strip() for line in lines) if c),
                )
            ]
            self.metrics_hook.increment(names.SEGMENT_FALLBACK_TOTAL)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SEGMENT_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SEGMENT_CHAPTERS_CREATED, len(chapters))
        logger.debug(
            "Segmented %d lines into %d chapters in %.1fms",
            len(lines),
            len(chapters),
            elapsed_ms,
        )
        return Document(chapters=tuple(chapters))

    def _flush(
        self, chapters: list[Chapter], title: str, content: list[str]
    ) -> None:
        """Emit the accumulated chapter unless it holds only blank lines."""
        if not "".join(content).strip():
            return
        chapters.append(
            Chapter(title=title, paragraphs=tuple(p for p in content if p))
        )


def segment(raw_text: str, config: SegmenterConfig | None = None) -> Document:
    """Segment `raw_text` with a default-configured PlainTextSegmenter."""
    return PlainTextSegmenter(config).segment(raw_text)
