"""
文件路径：pdf_text_replacer/processors/compositor.py

说明：页面合成：遮盖原文、绘制替换文本、溢出时追加续页。

分两步进行，便于逐页单测：
1. plan_page：对本页替换行序列做显式折叠（PageCursor 为折叠状态），
   得到遮盖矩形、每行的渲染方案与需要追加的续页，纯计算、无副作用；
2. apply：按"先全部遮盖、再追加续页、最后绘制文字"的顺序写入文档，
   保证新绘制的文字不会再被遮盖。

定位规则：
- 有原始行对应的替换行：x 取原始行 x，y = 原始行 y - 累计偏移；
- 溢出行（替换行多于原始行）：x 取左边距，y 取游标（上一子行下方一个行高，初始为上边距）；
- 任一行首子行基线不高于"上一子行基线 - 本行字号"，由此产生的下移计入累计偏移；
- 子行低于下边距时追加同尺寸续页，游标回到续页上边距、累计偏移清零，
  本页剩余各行在续页上顺序排布（保留各自 x）。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..components import get_logger, padded_rect
from ..models import Line, PageComposition, PageText, PlacedText, RenderPlan
from ..variables import (
    CONST_PAGE_MARGIN,
    STYLE_FONT_SIZE_OVERFLOW,
    STYLE_HEADING_FONT_SIZE,
)
from .engines.base import DocumentSurface
from .layout import MeasureFn, fit_line


logger = get_logger(__name__)


@dataclass(frozen=True)
class PageCursor:
    """单页合成的折叠状态。

    属性：
        page_index: 当前写入页（源页或其续页）。
        y_offset: 累计竖直偏移（换行与防重叠造成的下移）。
        continuation_y: 溢出行的下一基线位置。
        last_baseline: 当前写入页上最后一个子行的基线；None 表示尚未绘制。
        overflowed: 是否已转入续页（DRAWING -> OVERFLOWED -> 续页上继续 DRAWING）。
    """

    page_index: int
    y_offset: float
    continuation_y: float
    last_baseline: Optional[float] = None
    overflowed: bool = False


class PageCompositor:
    """逐页规划并写入替换文本。

    用法示例：
        compositor = PageCompositor(surface.width_of_string_at_size)
        plan = compositor.plan_page(page, lines, next_page_index=surface.page_count)
        compositor.apply(surface, page, plan)
    """

    def __init__(
        self,
        measure: MeasureFn,
        page_margin: float = CONST_PAGE_MARGIN,
        heading_font_size: float = STYLE_HEADING_FONT_SIZE,
        overflow_font_size: float = STYLE_FONT_SIZE_OVERFLOW,
    ) -> None:
        self.measure = measure
        self.page_margin = float(page_margin)
        self.heading_font_size = float(heading_font_size)
        self.overflow_font_size = float(overflow_font_size)

    # -----------------------------
    # 规划（纯计算）
    # -----------------------------
    def plan_page(self, page: PageText, replacement_lines: Sequence[str], next_page_index: int) -> PageComposition:
        """规划单页的遮盖与绘制。

        参数：
            page: 源页（尺寸与原始行）。
            replacement_lines: 分配到本页的替换行（按序）。
            next_page_index: 若需续页，第一张续页将获得的页索引（即当前文档页数）。

        返回：
            PageComposition（遮盖矩形、渲染方案、续页索引）。
        """
        composition = PageComposition(page_index=page.page_index)
        # 遮盖范围向下延伸到字形下伸部分
        composition.whiteouts = [
            padded_rect(line.x, line.y - line.descent, line.width, line.height + line.descent) for line in page.lines
        ]

        def allocate_page() -> int:
            index = next_page_index + len(composition.continuation_pages)
            composition.continuation_pages.append(index)
            logger.info("第 %s 页内容溢出，追加续页（新页索引 %s）", page.page_index + 1, index)
            return index

        cursor = PageCursor(
            page_index=page.page_index,
            y_offset=0.0,
            continuation_y=page.height - self.page_margin,
        )
        for i, text in enumerate(replacement_lines):
            original = page.lines[i] if i < len(page.lines) else None
            cursor, plan = self._place_line(cursor, page, original, text, allocate_page)
            composition.plans.append(plan)
        return composition

    def _anchor(self, page: PageText, original: Optional[Line]) -> Tuple[float, float, float]:
        """返回 (x, 锚点字号, 可用宽度)。"""
        if original is not None:
            return original.x, original.font_size, page.width - original.x - self.page_margin
        return self.page_margin, self.overflow_font_size, page.width - self.page_margin * 2

    def _place_line(
        self,
        cursor: PageCursor,
        page: PageText,
        original: Optional[Line],
        text: str,
        allocate_page: Callable[[], int],
    ) -> Tuple[PageCursor, RenderPlan]:
        x, anchor_size, available_width = self._anchor(page, original)
        fit = fit_line(text, anchor_size, available_width, self.measure, self.heading_font_size)

        if original is not None and not cursor.overflowed:
            base_y = original.y - cursor.y_offset
        else:
            base_y = cursor.continuation_y

        shift = 0.0
        if cursor.last_baseline is not None and base_y > cursor.last_baseline - fit.font_size:
            shift = base_y - (cursor.last_baseline - fit.font_size)
            base_y -= shift

        page_index = cursor.page_index
        y_offset = cursor.y_offset + shift
        overflowed = cursor.overflowed
        placements: List[PlacedText] = []
        y = base_y
        for k, sub_line in enumerate(fit.sub_lines):
            if k:
                y -= fit.line_height
            if y < self.page_margin:
                page_index = allocate_page()
                y = page.height - self.page_margin
                y_offset = 0.0
                overflowed = True
            placements.append(PlacedText(page_index, x, y, sub_line, fit.font_size, fit.bold))

        y_offset += (len(fit.sub_lines) - 1) * fit.line_height
        first = placements[0]
        plan = RenderPlan(
            text=text,
            fit=fit,
            page_index=first.page_index,
            x=x,
            y=first.y,
            anchored=original is not None,
            placements=placements,
        )
        next_cursor = replace(
            cursor,
            page_index=page_index,
            y_offset=y_offset,
            continuation_y=y - fit.line_height,
            last_baseline=y,
            overflowed=overflowed,
        )
        return next_cursor, plan

    # -----------------------------
    # 写入（副作用）
    # -----------------------------
    def apply(self, surface: DocumentSurface, page: PageText, composition: PageComposition) -> None:
        """按"遮盖 -> 续页 -> 文字"的顺序写入文档。"""
        for rect in composition.whiteouts:
            surface.draw_opaque_rect(page.page_index, *rect)
        for planned_index in composition.continuation_pages:
            inserted = surface.insert_page(page.width, page.height)
            if inserted != planned_index:
                raise RuntimeError(f"续页索引不一致：期望 {planned_index}，实际 {inserted}")
        for placed in composition.placements:
            surface.draw_text(placed.page_index, placed.x, placed.y, placed.text, placed.font_size, placed.bold)


def compose_document(
    surface: DocumentSurface,
    pages: Sequence[PageText],
    distribution: Dict[int, List[str]],
    *,
    page_margin: float = CONST_PAGE_MARGIN,
    heading_font_size: float = STYLE_HEADING_FONT_SIZE,
) -> List[PageComposition]:
    """依次合成所有源页；续页一律追加在文档末尾。"""
    compositor = PageCompositor(
        surface.width_of_string_at_size,
        page_margin=page_margin,
        heading_font_size=heading_font_size,
    )
    compositions: List[PageComposition] = []
    for page in pages:
        composition = compositor.plan_page(page, distribution.get(page.page_index, []), surface.page_count)
        compositor.apply(surface, page, composition)
        compositions.append(composition)
    return compositions


__all__ = [
    "PageCursor",
    "PageCompositor",
    "compose_document",
]
