"""
文件路径：pdf_text_replacer/components/coords.py

说明：坐标计算相关通用函数。引擎内部统一使用左下角原点（PDF 用户空间），
仅在写入 PyMuPDF 页面时翻转为左上角原点。
"""

from __future__ import annotations

import math
from typing import Tuple

from ..variables import CONST_WHITEOUT_PADDING


def padded_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    padding: float = CONST_WHITEOUT_PADDING,
) -> Tuple[float, float, float, float]:
    """返回四周外扩 padding 后的矩形 (x, y, width, height)。

    参数：
        x, y: 矩形左下角（对文本行而言 y 为基线）。
        width, height: 宽高（pt）。
        padding: 外扩量。
    """
    return (x - padding, y - padding, width + padding * 2, height + padding * 2)


def flip_y(y: float, page_height: float) -> float:
    """左下原点与左上原点（PyMuPDF 页面坐标）之间互转 y，变换自逆。"""
    return page_height - y


def round_half_up(value: float) -> int:
    """四舍五入到整数（0.5 向上取整），区别于内置 round 的银行家舍入。"""
    return int(math.floor(value + 0.5))


__all__ = [
    "padded_rect",
    "flip_y",
    "round_half_up",
]
