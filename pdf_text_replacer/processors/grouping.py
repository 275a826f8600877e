"""
文件路径：pdf_text_replacer/processors/grouping.py

说明：将原始文本片段按 y 坐标聚类为逻辑行（阅读顺序：自上而下、自左而右）。
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from ..models import Line, TextItem
from ..variables import CONST_LINE_Y_TOLERANCE


def _reading_order(a: TextItem, b: TextItem, tolerance: float) -> float:
    # y 差超过容差时按 y 降序（自上而下），否则按 x 升序
    y_diff = b.y - a.y
    if abs(y_diff) > tolerance:
        return y_diff
    return a.x - b.x


def build_line(items: Iterable[TextItem]) -> Line:
    """由同一行的片段构造 Line：片段按 x 排序，文本以单个空格拼接。

    字号、高度与下伸深度取各片段最大值，宽度从最左片段 x 到最右片段右边缘。
    """
    ordered = sorted(items, key=lambda it: it.x)
    first, last = ordered[0], ordered[-1]
    return Line(
        items=tuple(ordered),
        text=" ".join(it.text for it in ordered),
        x=first.x,
        y=first.y,
        font_size=max(it.font_size for it in ordered),
        width=last.x + last.width - first.x,
        height=max(it.height for it in ordered),
        descent=max(it.descent for it in ordered),
    )


def group_into_lines(items: List[TextItem], tolerance: float = CONST_LINE_Y_TOLERANCE) -> List[Line]:
    """将片段聚类为逻辑行。

    遍历排序后的片段；当前片段与活动行锚点 y 的差超过容差时开启新行，
    否则并入活动行。单个片段自成一行。

    参数：
        items: 单页的文本片段。
        tolerance: 同行判定的 y 容差（pt）。

    返回：
        按阅读顺序排列的 Line 列表；无片段时返回空列表。
    """
    if not items:
        return []

    ordered = sorted(items, key=cmp_to_key(lambda a, b: _reading_order(a, b, tolerance)))

    lines: List[Line] = []
    current: List[TextItem] = [ordered[0]]
    anchor_y = ordered[0].y
    for item in ordered[1:]:
        if abs(item.y - anchor_y) <= tolerance:
            current.append(item)
        else:
            lines.append(build_line(current))
            current = [item]
            anchor_y = item.y
    lines.append(build_line(current))
    return lines


__all__ = ["build_line", "group_into_lines"]
