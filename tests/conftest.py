from __future__ import annotations

"""
pytest 全局配置：将项目根目录加入 sys.path，确保 `from pdf_text_replacer...` 可被导入；
并提供用 ReportLab 画布生成测试 PDF 的工具。
"""

import io
import sys
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from reportlab.lib.pagesizes import letter  # noqa: E402
from reportlab.pdfgen import canvas  # noqa: E402

from pdf_text_replacer.models import Line, PageText, TextItem  # noqa: E402
from pdf_text_replacer.processors.engines.base import DocumentSurface  # noqa: E402

# 单页内容：[(x, y, text, font_size, font_name), ...]
PageContent = Sequence[Tuple[float, float, str, float, str]]


def build_pdf(pages: Sequence[PageContent], pagesize: Tuple[float, float] = letter) -> bytes:
    """用 ReportLab 生成多页 PDF；空页也会输出。"""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=pagesize)
    for content in pages:
        for x, y, text, size, font in content:
            c.setFont(font, size)
            c.drawString(x, y, text)
        c.showPage()
    c.save()
    return buf.getvalue()


def text_line(x: float, y: float, text: str, size: float = 12.0, font: str = "Helvetica"):
    return (x, y, text, size, font)


@pytest.fixture
def pdf_builder():
    return build_pdf


# -----------------------------
# 纯计算测试用的替身
# -----------------------------
def fixed_measure(char_width: float = 0.5):
    """等宽度量：宽度 = 字符数 * 字号 * char_width（粗体同宽）。"""

    def measure(text: str, font_size: float, bold: bool = False) -> float:
        return len(text) * font_size * char_width

    return measure


def make_line(
    text: str, x: float, y: float, font_size: float = 12.0, width: float = 100.0, descent: float = 0.0
) -> Line:
    item = TextItem(text=text, x=x, y=y, font_size=font_size, width=width, height=font_size, descent=descent)
    return Line(
        items=(item,), text=text, x=x, y=y, font_size=font_size, width=width, height=font_size, descent=descent
    )


def make_page(index: int, lines: Sequence[Line] = (), width: float = 612.0, height: float = 792.0) -> PageText:
    return PageText(page_index=index, width=width, height=height, lines=tuple(lines))


class RecordingSurface(DocumentSurface):
    """记录调用顺序的内存文档，度量方式同 fixed_measure。"""

    def __init__(self, page_sizes: Sequence[Tuple[float, float]], char_width: float = 0.5) -> None:
        self.sizes: List[Tuple[float, float]] = list(page_sizes)
        self.ops: List[tuple] = []
        self._measure = fixed_measure(char_width)

    @property
    def page_count(self) -> int:
        return len(self.sizes)

    def width_of_string_at_size(self, text: str, font_size: float, bold: bool = False) -> float:
        return self._measure(text, font_size, bold)

    def draw_opaque_rect(self, page_index, x, y, width, height) -> None:
        self.ops.append(("rect", page_index, x, y, width, height))

    def draw_text(self, page_index, x, y, text, font_size, bold=False) -> None:
        self.ops.append(("text", page_index, x, y, text, font_size, bold))

    def insert_page(self, width, height) -> int:
        self.sizes.append((width, height))
        self.ops.append(("page", len(self.sizes) - 1, width, height))
        return len(self.sizes) - 1

    def to_bytes(self) -> bytes:
        return b""

    def texts(self) -> List[tuple]:
        return [op for op in self.ops if op[0] == "text"]

    def by_page(self) -> Dict[int, List[tuple]]:
        grouped: Dict[int, List[tuple]] = {}
        for op in self.texts():
            grouped.setdefault(op[1], []).append(op)
        return grouped


@pytest.fixture
def measure():
    return fixed_measure()


__all__ = [
    "build_pdf",
    "text_line",
    "fixed_measure",
    "make_line",
    "make_page",
    "RecordingSurface",
]
