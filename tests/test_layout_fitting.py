from __future__ import annotations

import pytest

from conftest import fixed_measure

from pdf_text_replacer.processors.layout import fit_line, fit_text, min_font_size, wrap_words


class TestMinFontSize:
    def test_eighty_percent_of_anchor(self):
        assert min_font_size(12.0) == pytest.approx(9.6)

    def test_absolute_floor(self):
        assert min_font_size(7.0) == 6.0

    def test_never_above_anchor(self):
        assert min_font_size(5.0) == 5.0


class TestFitText:
    def test_verbatim_when_it_fits(self, measure):
        fit = fit_text("Short", 12.0, 500.0, measure)
        assert fit.sub_lines == ("Short",)
        assert fit.font_size == 12.0
        assert fit.line_height == pytest.approx(14.4)
        assert not fit.shrunk and not fit.wrapped

    def test_shrinks_in_half_point_steps(self, measure):
        # 20 字符 * 0.5 -> 宽度 = 10 * size；可用 115 -> 11.5pt 恰好放得下
        fit = fit_text("x" * 20, 12.0, 115.0, measure)
        assert fit.sub_lines == ("x" * 20,)
        assert fit.font_size == 11.5
        assert fit.shrunk

    def test_wraps_at_floor_when_shrink_insufficient(self, measure):
        text = "Ingeniero de Software Senior con mucha experiencia en sistemas distribuidos"
        fit = fit_text(text, 12.0, 80.0, measure)
        assert fit.wrapped
        assert fit.font_size == pytest.approx(9.6)
        assert " ".join(fit.sub_lines).split() == text.split()

    def test_oversized_word_kept_whole(self, measure):
        word = "Supercalifragilisticexpialidocious"
        fit = fit_text(word, 12.0, 50.0, measure)
        assert fit.sub_lines == (word,)

    def test_oversized_word_own_sub_line(self, measure):
        fit = fit_text("a Supercalifragilisticexpialidocious b", 12.0, 50.0, measure)
        assert "Supercalifragilisticexpialidocious" in fit.sub_lines
        assert " ".join(fit.sub_lines) == "a Supercalifragilisticexpialidocious b"


class TestWrapWords:
    def test_greedy_packing(self):
        measure = fixed_measure(1.0)
        # 字号 1 -> 宽度 = 字符数
        assert wrap_words("aa bb cc dd", 5, 1.0, measure) == ["aa bb", "cc dd"]


class TestFitLineEmphasis:
    def test_body_text_regular(self, measure):
        assert fit_line("Body", 12.0, 500.0, measure).bold is False

    def test_heading_bold(self, measure):
        fit = fit_line("Title", 18.0, 500.0, measure)
        assert fit.bold is True
        assert fit.font_size == 18.0

    def test_shrunk_below_threshold_falls_back_to_regular(self):
        # 粗体更宽：粗体只能缩到阈值以下，改用常规体
        def measure(text, size, bold=False):
            return len(text) * size * (0.7 if bold else 0.5)

        fit = fit_line("x" * 10, 14.0, 68.0, measure, heading_font_size=14.0)
        assert fit.font_size < 14.0
        assert fit.bold is False
