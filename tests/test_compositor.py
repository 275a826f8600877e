from __future__ import annotations

import pytest

from conftest import RecordingSurface, fixed_measure, make_line, make_page

from pdf_text_replacer.components import count_words
from pdf_text_replacer.exceptions import TextMeasurementError
from pdf_text_replacer.processors.compositor import PageCompositor, compose_document

LONG_TEXT = " ".join(["word"] * 40)


def compose_single(page, lines, margin=36.0):
    surface = RecordingSurface([(page.width, page.height)])
    compositions = compose_document(surface, [page], {page.page_index: list(lines)}, page_margin=margin)
    return surface, compositions[0]


def assert_no_overlap(placements):
    by_page = {}
    for p in placements:
        by_page.setdefault(p.page_index, []).append(p)
    for items in by_page.values():
        for prev, cur in zip(items, items[1:]):
            assert cur.y <= prev.y - cur.font_size + 1e-6


class TestWhiteout:
    def test_all_rects_drawn_before_any_text(self):
        page = make_page(0, [make_line("One", 50, 700), make_line("Two", 50, 680), make_line("Three", 50, 660)])
        surface, _ = compose_single(page, ["Uno", "Dos", "Tres"])
        kinds = [op[0] for op in surface.ops]
        assert kinds == ["rect"] * 3 + ["text"] * 3

    def test_rect_covers_line_box_with_padding(self):
        page = make_page(0, [make_line("One", 50, 700, font_size=12, width=30)])
        surface, _ = compose_single(page, [])
        assert surface.ops == [("rect", 0, 48, 698, 34, 16)]

    def test_rect_extends_below_baseline_by_descent(self):
        page = make_page(0, [make_line("gjpqy", 50, 700, font_size=16, width=40, descent=3.5)])
        surface, _ = compose_single(page, [])
        # 下边：700 - 3.5 - 2；高：16 + 3.5 + 4
        assert surface.ops == [("rect", 0, 48, 694.5, 44, 23.5)]

    def test_empty_replacement_only_blanks(self):
        page = make_page(0, [make_line("One", 50, 700), make_line("Two", 50, 680)])
        surface, composition = compose_single(page, [])
        assert surface.texts() == []
        assert len(composition.whiteouts) == 2
        assert surface.page_count == 1


class TestAnchoredPlacement:
    def test_short_lines_keep_anchor(self):
        page = make_page(0, [make_line("One", 50, 700), make_line("Two", 60, 680, font_size=10)])
        surface, _ = compose_single(page, ["Uno", "Dos"])
        assert surface.texts() == [
            ("text", 0, 50, 700, "Uno", 12.0, False),
            ("text", 0, 60, 680, "Dos", 10.0, False),
        ]

    def test_wrapped_line_pushes_following_anchor_down(self):
        page = make_page(0, [make_line("One", 50, 700), make_line("Two", 50, 686)])
        _, composition = compose_single(page, [LONG_TEXT, "Dos"])
        first, second = composition.plans
        assert first.fit.wrapped
        last_sub = first.placements[-1]
        assert second.y < last_sub.y
        assert_no_overlap(composition.placements)

    def test_heading_drawn_bold(self):
        page = make_page(0, [make_line("Title", 50, 700, font_size=18)])
        surface, _ = compose_single(page, ["Titulo"])
        assert surface.texts()[0][-1] is True


class TestOverflow:
    def test_extra_lines_flow_from_left_margin(self):
        page = make_page(0, [make_line("One", 80, 700)])
        _, composition = compose_single(page, ["Uno", "Extra uno", "Extra dos"])
        assert composition.overflow_line_count == 2
        extra = composition.plans[1:]
        assert all(plan.x == 36.0 and plan.fit.font_size == 10.0 for plan in extra)
        assert_no_overlap(composition.placements)

    def test_continuation_page_same_size(self):
        page = make_page(0, [make_line("A", 50, 60), make_line("B", 50, 40)], width=300, height=200)
        surface, composition = compose_single(page, ["A", "B", "C", "D", "E"])
        assert surface.page_count == 2
        assert surface.sizes[1] == (300, 200)
        assert composition.continuation_pages == [1]
        on_new_page = surface.by_page()[1]
        assert on_new_page[0][3] == pytest.approx(200 - 36)
        assert [op[4] for op in on_new_page] == ["C", "D", "E"]

    def test_anchored_lines_after_overflow_move_to_continuation(self):
        page = make_page(0, [make_line("A", 50, 50), make_line("B", 80, 40)], width=300, height=200)
        _, composition = compose_single(page, [LONG_TEXT, "Beta"])
        second = composition.plans[1]
        assert second.page_index == 1
        assert second.x == 80
        assert_no_overlap(composition.placements)

    def test_words_conserved_under_overflow(self):
        page = make_page(0, [make_line("A", 50, 60)], width=300, height=200)
        lines = [LONG_TEXT, LONG_TEXT, "tail words here"]
        _, composition = compose_single(page, lines)
        drawn = [p.text for p in composition.placements]
        assert count_words(drawn) == count_words(lines)
        assert len(composition.continuation_pages) >= 1


class TestPlanPage:
    def test_plan_is_pure_and_numbers_pages_from_hint(self):
        compositor = PageCompositor(fixed_measure())
        page = make_page(2, [make_line("A", 50, 40)], width=300, height=200)
        composition = compositor.plan_page(page, ["A", "B"], next_page_index=7)
        assert composition.continuation_pages == [7]
        assert composition.plans[1].page_index == 7

    def test_each_page_independent(self):
        pages = [
            make_page(0, [make_line("A", 50, 700)]),
            make_page(1, [make_line("B", 50, 700)]),
        ]
        surface = RecordingSurface([(612, 792), (612, 792)])
        compose_document(surface, pages, {0: ["Uno"], 1: ["Dos"]})
        assert surface.by_page()[0][0][3] == 700
        assert surface.by_page()[1][0][3] == 700


class BrokenMeasureSurface(RecordingSurface):
    def width_of_string_at_size(self, text, font_size, bold=False):
        raise TextMeasurementError(f"无法度量：{text!r}")


class TestMeasurementFailure:
    def test_failure_aborts_before_any_text(self):
        page = make_page(0, [make_line("One", 50, 700), make_line("Two", 50, 680)])
        surface = BrokenMeasureSurface([(612, 792)])
        with pytest.raises(TextMeasurementError):
            compose_document(surface, [page], {0: ["Uno", "Dos"]})
        assert surface.texts() == []
        assert surface.page_count == 1
