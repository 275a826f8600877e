from __future__ import annotations

from pdf_text_replacer.components import (
    count_words,
    flip_y,
    padded_rect,
    round_half_up,
    split_replacement_lines,
    split_words,
)


class TestSplitReplacementLines:
    def test_empty_string_yields_no_lines(self):
        assert split_replacement_lines("") == []

    def test_blank_and_whitespace_lines_dropped(self):
        text = "Hola\n\n   \nMundo\n"
        assert split_replacement_lines(text) == ["Hola", "Mundo"]

    def test_crlf_and_trailing_space_trimmed(self):
        assert split_replacement_lines("uno  \r\ndos\r\n") == ["uno", "dos"]

    def test_leading_indent_kept(self):
        assert split_replacement_lines("  - item") == ["  - item"]


class TestWords:
    def test_split_words_collapses_whitespace(self):
        assert split_words("a  b\tc") == ["a", "b", "c"]

    def test_count_words_over_lines(self):
        assert count_words(["one two", "three", ""]) == 3


class TestGeometry:
    def test_round_half_up_differs_from_bankers(self):
        # Python round(2.5) == 2，这里需要 3
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(1.49) == 1

    def test_padded_rect_expands_each_side(self):
        assert padded_rect(10, 20, 100, 12) == (8, 18, 104, 16)

    def test_flip_y_is_self_inverse(self):
        assert flip_y(flip_y(100.0, 792.0), 792.0) == 100.0
        assert flip_y(0.0, 792.0) == 792.0
