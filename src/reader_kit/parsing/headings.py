# parsing/headings.py

"""Closed, extendable vocabulary of chapter heading patterns.

A line is a heading when one of the table's patterns matches at its start.
Tables are plain data: extending one returns a new table, so a segmenter
configured with a given table always produces the same chapters.
"""

import re
from dataclasses import dataclass, field
from typing import Literal

IDEOGRAPHIC_NUMERALS = "一二三四五六七八九十百千零〇"

HeadingKind = Literal["numbered", "label"]


@dataclass(frozen=True)
class HeadingPattern:
    name: str
    pattern: str
    kind: HeadingKind = "numbered"
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def matches(self, line: str) -> bool:
        return self._compiled.match(line) is not None


@dataclass(frozen=True)
class HeadingTable:
    patterns: tuple[HeadingPattern, ...]

    def match(self, line: str) -> HeadingPattern | None:
        """Return the first pattern matching at the start of `line`."""
        for heading in self.patterns:
            if heading.matches(line):
                return heading
        return None

    def is_heading(self, line: str) -> bool:
        return self.match(line) is not None

    def extend(self, *patterns: HeadingPattern) -> "HeadingTable":
        return HeadingTable(patterns=self.patterns + tuple(patterns))


CHINESE_NUMBERED = HeadingPattern(
    name="zh-numbered",
    pattern=rf"第\s*[{IDEOGRAPHIC_NUMERALS}\d]+\s*[章节回]",
)
CHINESE_LABELS = HeadingPattern(
    name="zh-label",
    pattern=r"(?:序章|引子|楔子|前言|后记|番外)",
    kind="label",
)
ENGLISH_NUMBERED = HeadingPattern(
    name="en-numbered",
    pattern=r"(?i:chapter)\s+\d+\b",
)
ENGLISH_LABELS = HeadingPattern(
    name="en-label",
    pattern=r"(?i:prologue|epilogue|foreword|afterword|preface|interlude)\b",
    kind="label",
)

DEFAULT_HEADING_TABLE = HeadingTable(
    patterns=(CHINESE_NUMBERED, CHINESE_LABELS, ENGLISH_NUMBERED, ENGLISH_LABELS)
)
