# tests/unit/parsing/test_segmenter.py

from unittest.mock import MagicMock

import pytest

from reader_kit.observability import names
from reader_kit.parsing.config import SegmenterConfig
from reader_kit.parsing.models import Chapter, Document
from reader_kit.parsing.segmenter import PlainTextSegmenter, segment

NOVEL = """第一章 开端
　　天色已晚。

他推开了门。
第二章 重逢
她笑了。
番外 后日谈
很久以后。"""


class TestSegment:
    def test_splits_on_chinese_headings(self) -> None:
        """Each heading line starts a chapter titled with that line."""
        doc = segment(NOVEL)

        assert doc.titles() == ["第一章 开端", "第二章 重逢", "番外 后日谈"]
        assert doc.chapters[0].paragraphs == ("天色已晚。", "他推开了门。")
        assert doc.chapters[1].paragraphs == ("她笑了。",)
        assert doc.chapters[2].paragraphs == ("很久以后。",)

    def test_heading_lines_are_not_paragraphs(self) -> None:
        doc = segment(NOVEL)

        all_paragraphs = [p for c in doc.chapters for p in c.paragraphs]
        assert not any(p.startswith("第") for p in all_paragraphs)

    def test_text_before_first_heading_goes_to_preface(self) -> None:
        """Lines ahead of the first heading form the default chapter."""
        doc = segment("作者的话\n\n第1章 起\n正文")

        assert doc.titles() == ["Preface", "第1章 起"]
        assert doc.chapters[0].paragraphs == ("作者的话",)

    def test_blank_accumulator_is_discarded(self) -> None:
        """Consecutive headings do not produce empty chapters."""
        doc = segment("第一章\n   \n第二章\n内容")

        assert doc.titles() == ["第二章"]

    def test_crlf_and_lf_both_split_lines(self) -> None:
        doc = segment("第一章\r\n甲\r\n乙\n丙")

        assert doc.chapters[0].paragraphs == ("甲", "乙", "丙")

    def test_paragraphs_are_trimmed(self) -> None:
        """Surrounding whitespace, including ideographic spaces, is removed."""
        doc = segment("第一章\n  　正文一　 \n\t正文二\t")

        assert doc.chapters[0].paragraphs == ("正文一", "正文二")

    def test_heading_title_is_trimmed_line(self) -> None:
        doc = segment("   第 十二 章  风起   \n内容")

        assert doc.titles() == ["第 十二 章  风起"]

    def test_reconstructs_non_heading_lines_in_order(self) -> None:
        """Concatenated paragraphs equal the non-blank, non-heading lines."""
        raw = "序章\n一\n\n二\n第3回\n三\n后记\n四\n  \n五"
        doc = segment(raw)

        paragraphs = [p for c in doc.chapters for p in c.paragraphs]
        assert paragraphs == ["一", "二", "三", "四", "五"]
        assert all(p.strip() for p in paragraphs)

    def test_english_headings(self) -> None:
        doc = segment("Prologue\nIt began.\nChapter 1: Arrival\nShe arrived.")

        assert doc.titles() == ["Prologue", "Chapter 1: Arrival"]

    def test_headings_only_match_at_line_start(self) -> None:
        """A heading word in the middle of a line is ordinary text."""
        doc = segment("第一章\n他读到了第二章的结尾。")

        assert doc.titles() == ["第一章"]
        assert doc.chapters[0].paragraphs == ("他读到了第二章的结尾。",)


class TestSegmentEdgeCases:
    @pytest.mark.parametrize("raw", ["", "   \n  ", "\r\n\r\n"])
    def test_blank_input_yields_no_chapters(self, raw: str) -> None:
        assert segment(raw) == Document(chapters=())

    def test_text_without_headings_is_full_text(self) -> None:
        doc = segment("plain line one\nplain line two")

        assert doc.chapters == (
            Chapter(title="Full Text", paragraphs=("plain line one", "plain line two")),
        )

    def test_only_headings_falls_back_to_full_text(self) -> None:
        """Headings with no text between them still give a readable chapter."""
        doc = segment("第一章\n\n第二章")

        assert doc.titles() == ["Full Text"]
        assert doc.chapters[0].paragraphs == ("第一章", "第二章")

    def test_deterministic(self) -> None:
        assert segment(NOVEL) == segment(NOVEL)

    def test_custom_titles(self) -> None:
        config = SegmenterConfig(default_title="前言", fallback_title="全文")

        assert segment("没有标题", config).titles() == ["全文"]
        assert segment("开头\n第一章\n正文", config).titles() == ["前言", "第一章"]


class TestPlainTextSegmenterMetrics:
    def test_records_duration_and_chapter_count(self) -> None:
        metrics_hook = MagicMock()
        PlainTextSegmenter(metrics_hook=metrics_hook).segment(NOVEL)

        metrics_hook.record_latency.assert_called_once()
        assert metrics_hook.record_latency.call_args[0][0] == names.SEGMENT_DURATION
        metrics_hook.increment.assert_called_with(names.SEGMENT_CHAPTERS_CREATED, 3)

    def test_counts_fallback(self) -> None:
        metrics_hook = MagicMock()
        PlainTextSegmenter(metrics_hook=metrics_hook).segment("no headings here")

        metrics_hook.increment.assert_any_call(names.SEGMENT_FALLBACK_TOTAL)
