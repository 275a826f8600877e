"""
文件路径：pdf_text_replacer/processors/layout.py

说明：单行替换文本的版式适配（混合字号策略）。

依次尝试，直到成功：
1. 原样：按锚点字号度量，放得下则单行输出；
2. 缩小：按固定步长缩小字号，下限为锚点字号的 80%（且不低于绝对最小字号），
   首个放得下的字号单行输出；
3. 换行：在下限字号按单词换行；单个超宽单词独占一行，绝不拆词、绝不截断。

字宽度量通过 measure(text, font_size, bold) 回调注入，由宿主文档库提供。
"""

from __future__ import annotations

from typing import Callable, List, Optional

from ..components import split_words
from ..models import FitResult
from ..variables import (
    CONST_FONT_SHRINK_STEP,
    CONST_LINE_HEIGHT_FACTOR,
    CONST_MIN_FONT_SCALE,
    CONST_MIN_FONT_SIZE_ABS,
    STYLE_HEADING_FONT_SIZE,
)

MeasureFn = Callable[[str, float, bool], float]


def min_font_size(anchor_size: float) -> float:
    """缩小下限：max(锚点 * 0.8, 绝对最小字号)，但不高于锚点本身。"""
    return min(anchor_size, max(anchor_size * CONST_MIN_FONT_SCALE, CONST_MIN_FONT_SIZE_ABS))


def wrap_words(
    text: str,
    max_width: float,
    font_size: float,
    measure: MeasureFn,
    bold: bool = False,
) -> List[str]:
    """贪心按单词换行。

    - 候选行（当前行 + 空格 + 单词）放得下则并入，否则另起一行；
    - 单个单词超宽时照样独占一行（不拆分）。
    """
    words = split_words(text)
    if not words:
        return [text]

    sub_lines: List[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if measure(candidate, font_size, bold) <= max_width:
            current = candidate
        else:
            if current:
                sub_lines.append(current)
            current = word
    if current:
        sub_lines.append(current)
    return sub_lines


def _candidate_sizes(anchor_size: float, floor: float) -> List[float]:
    """原字号在前，随后按步长递减直到下限（含）。"""
    sizes = [anchor_size]
    step = 1
    while anchor_size - CONST_FONT_SHRINK_STEP * step >= floor:
        sizes.append(anchor_size - CONST_FONT_SHRINK_STEP * step)
        step += 1
    return sizes


def fit_text(
    text: str,
    anchor_size: float,
    available_width: float,
    measure: MeasureFn,
    bold: bool = False,
    below: Optional[float] = None,
) -> FitResult:
    """按固定字体计算单行替换文本的渲染方案。

    参数：
        text: 替换行。
        anchor_size: 锚点字号（原始行字号，或溢出行默认字号）。
        available_width: 可用宽度（至页面右边距）。
        measure: 字宽度量回调。
        bold: 是否按粗体度量。
        below: 若给出，单行候选字号必须小于该值。

    返回：
        FitResult(sub_lines, font_size, line_height)。
    """
    floor = min_font_size(anchor_size)
    for size in _candidate_sizes(anchor_size, floor):
        if below is not None and size >= below:
            continue
        if measure(text, size, bold) <= available_width:
            return FitResult(
                (text,),
                size,
                size * CONST_LINE_HEIGHT_FACTOR,
                bold=bold,
                shrunk=size < anchor_size,
            )

    sub_lines = wrap_words(text, available_width, floor, measure, bold=bold)
    return FitResult(
        tuple(sub_lines),
        floor,
        floor * CONST_LINE_HEIGHT_FACTOR,
        bold=bold,
        shrunk=floor < anchor_size,
    )


def fit_line(
    text: str,
    anchor_size: float,
    available_width: float,
    measure: MeasureFn,
    heading_font_size: float = STYLE_HEADING_FONT_SIZE,
) -> FitResult:
    """带字重选择的适配：解析后字号 >= 标题阈值时用粗体，否则用常规体。

    锚点达到阈值时先按粗体适配；若缩小后低于阈值，改用常规体重新适配，
    此时只接受低于阈值的字号。
    """
    if anchor_size < heading_font_size:
        return fit_text(text, anchor_size, available_width, measure, bold=False)
    fit = fit_text(text, anchor_size, available_width, measure, bold=True)
    if fit.font_size >= heading_font_size:
        return fit
    return fit_text(text, anchor_size, available_width, measure, bold=False, below=heading_font_size)


__all__ = [
    "MeasureFn",
    "min_font_size",
    "wrap_words",
    "fit_text",
    "fit_line",
]
