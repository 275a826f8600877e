"""
文件路径：pdf_text_replacer/models.py

说明：带位置的文本与渲染方案的数据模型。

坐标均为 PDF 点、左下角原点（y 向上递增），提取阶段输出与合成阶段写入使用同一坐标系。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class TextItem:
    """一段字号与基线一致的连续字符。

    属性：
        x, y: 基线起点。
        width, height: 宽度与高度（高度取字号）。
        descent: 字形在基线以下的深度（g/j/p/q/y 等下伸部分），>= 0。
    """

    text: str
    x: float
    y: float
    font_size: float
    width: float
    height: float
    descent: float = 0.0


@dataclass(frozen=True)
class Line:
    """同一行的片段（自左向右）。"""

    items: Tuple[TextItem, ...]
    text: str
    x: float
    y: float
    font_size: float
    width: float
    height: float
    descent: float = 0.0


@dataclass(frozen=True)
class PageText:
    page_index: int
    width: float
    height: float
    lines: Tuple[Line, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class FitResult:
    """单行替换文本的适配结果：同一字号下的若干子行。"""

    sub_lines: Tuple[str, ...]
    font_size: float
    line_height: float
    bold: bool = False
    shrunk: bool = False

    @property
    def wrapped(self) -> bool:
        return len(self.sub_lines) > 1


@dataclass(frozen=True)
class PlacedText:
    """定位到具体页面与基线的子行。"""

    page_index: int
    x: float
    y: float
    text: str
    font_size: float
    bold: bool


@dataclass
class RenderPlan:
    """单行替换文本的渲染方案：适配结果 + 解析后的锚点。

    anchored 为 False 表示溢出行（没有对应的原始行）。
    """

    text: str
    fit: FitResult
    page_index: int
    x: float
    y: float
    anchored: bool
    placements: List[PlacedText] = field(default_factory=list)


@dataclass
class PageComposition:
    """合成器对单个源页的全部操作：遮盖矩形、渲染方案、追加的续页。"""

    page_index: int
    whiteouts: List[Tuple[float, float, float, float]] = field(default_factory=list)
    plans: List[RenderPlan] = field(default_factory=list)
    continuation_pages: List[int] = field(default_factory=list)

    @property
    def placements(self) -> List[PlacedText]:
        return [p for plan in self.plans for p in plan.placements]

    @property
    def overflow_line_count(self) -> int:
        return sum(1 for plan in self.plans if not plan.anchored)
