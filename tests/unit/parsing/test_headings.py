import pytest

from reader_kit.parsing.headings import (
    DEFAULT_HEADING_TABLE,
    HeadingPattern,
    HeadingTable,
)


class TestDefaultHeadingTable:
    @pytest.mark.parametrize(
        "line",
        [
            "第一章",
            "第十二章 风起",
            "第 3 节",
            "第一百零八回",
            "第〇章",
            "第２章",  # full-width digit
            "序章",
            "楔子 旧事",
            "番外一",
            "Chapter 7",
            "CHAPTER 12 The End",
            "Epilogue",
        ],
    )
    def test_recognizes_headings(self, line: str) -> None:
        assert DEFAULT_HEADING_TABLE.is_heading(line)

    @pytest.mark.parametrize(
        "line",
        [
            "他说第一章很好看",
            "第章",
            "第一部",
            "Chapters of life",
            "Chapter seven",
            "Prologues are dull",
            "",
        ],
    )
    def test_rejects_ordinary_lines(self, line: str) -> None:
        assert not DEFAULT_HEADING_TABLE.is_heading(line)

    def test_match_reports_pattern_kind(self) -> None:
        assert DEFAULT_HEADING_TABLE.match("后记").kind == "label"
        assert DEFAULT_HEADING_TABLE.match("第五章").kind == "numbered"


class TestHeadingTable:
    def test_extend_returns_new_table(self) -> None:
        volume = HeadingPattern(name="zh-volume", pattern=r"第[一二三\d]+卷")
        extended = DEFAULT_HEADING_TABLE.extend(volume)

        assert extended.is_heading("第二卷 远行")
        assert not DEFAULT_HEADING_TABLE.is_heading("第二卷 远行")

    def test_empty_table_matches_nothing(self) -> None:
        assert HeadingTable(patterns=()).match("第一章") is None
