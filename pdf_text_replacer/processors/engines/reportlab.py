"""
文件路径：pdf_text_replacer/processors/engines/reportlab.py

说明：ReportLab 路径。合成期间只记录每页绘制计划，序列化时一次性生成
遮盖+文字图层，并用 PyPDF2 合并到源文档；图层中超出源页数的页作为续页追加。

合成器会交错访问源页与续页（第 1 页 -> 续页 -> 第 2 页），而 Canvas 只能顺序出页，
因此必须先记录、后渲染。
"""

from __future__ import annotations

import io
from typing import Dict, List, Tuple

from PyPDF2 import PdfReader, PdfWriter
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from ...components import get_logger
from ...exceptions import DocumentWriteError, TextMeasurementError
from ...variables import (
    ERR_PDF_MERGE_FAILED,
    STYLE_FONT_NAME_BOLD,
    STYLE_FONT_NAME_REGULAR,
    STYLE_TEXT_COLOR_RGB,
    STYLE_WHITEOUT_COLOR_RGB,
)
from ..context import RenderContext
from .base import DocumentSurface


logger = get_logger(__name__)

# 绘制计划项：("rect", x, y, w, h) 或 ("text", x, y, text, size, bold)
DrawOp = Tuple


class ReportLabSurface(DocumentSurface):
    """记录绘制计划、最终以图层合并方式输出的文档。"""

    def __init__(self, ctx: RenderContext) -> None:
        # 合并底稿取自已解密的句柄，加密源文档无需 PyPDF2 再解密
        try:
            self._base_bytes = ctx.plain_source_bytes()
        except Exception as exc:  # noqa: BLE001
            raise DocumentWriteError(f"读取合并底稿失败：{exc}") from exc
        self._page_sizes: List[Tuple[float, float]] = ctx.page_sizes()
        self._source_page_count = len(self._page_sizes)
        self.draw_plan: Dict[int, List[DrawOp]] = {}

    @property
    def page_count(self) -> int:
        return len(self._page_sizes)

    @staticmethod
    def _font_name(bold: bool) -> str:
        return STYLE_FONT_NAME_BOLD if bold else STYLE_FONT_NAME_REGULAR

    def width_of_string_at_size(self, text: str, font_size: float, bold: bool = False) -> float:
        try:
            return float(pdfmetrics.stringWidth(text, self._font_name(bold), font_size))
        except Exception as exc:  # noqa: BLE001
            raise TextMeasurementError(f"字宽度量失败：{text!r} @ {font_size}pt：{exc}") from exc

    def draw_opaque_rect(self, page_index: int, x: float, y: float, width: float, height: float) -> None:
        self.draw_plan.setdefault(page_index, []).append(("rect", x, y, width, height))

    def draw_text(self, page_index: int, x: float, y: float, text: str, font_size: float, bold: bool = False) -> None:
        self.draw_plan.setdefault(page_index, []).append(("text", x, y, text, font_size, bold))

    def insert_page(self, width: float, height: float) -> int:
        self._page_sizes.append((float(width), float(height)))
        return len(self._page_sizes) - 1

    # -----------------------------
    # 序列化：图层生成 + 合并
    # -----------------------------
    def build_overlay(self) -> bytes:
        """使用 ReportLab 生成遮盖与文字图层，页数与当前页数一致。"""
        buf = io.BytesIO()
        c = canvas.Canvas(buf)
        for page_index, (w, h) in enumerate(self._page_sizes):
            c.setPageSize((w, h))
            for op in self.draw_plan.get(page_index, []):
                if op[0] == "rect":
                    _, x, y, width, height = op
                    c.setFillColorRGB(*(v / 255.0 for v in STYLE_WHITEOUT_COLOR_RGB))
                    c.rect(x, y, width, height, stroke=0, fill=1)
                else:
                    _, x, y, text, size, bold = op
                    c.setFillColorRGB(*(v / 255.0 for v in STYLE_TEXT_COLOR_RGB))
                    c.setFont(self._font_name(bold), size)
                    c.drawString(x, y, text)
            c.showPage()
        c.save()
        return buf.getvalue()

    def to_bytes(self) -> bytes:
        try:
            overlay_reader = PdfReader(io.BytesIO(self.build_overlay()))
            base_reader = PdfReader(io.BytesIO(self._base_bytes))

            writer = PdfWriter()
            for i, overlay_page in enumerate(overlay_reader.pages):
                if i < self._source_page_count:
                    base_page = base_reader.pages[i]
                    base_page.merge_page(overlay_page)  # PyPDF2 3.x API
                    writer.add_page(base_page)
                else:
                    writer.add_page(overlay_page)

            out = io.BytesIO()
            writer.write(out)
        except Exception as exc:  # noqa: BLE001
            raise DocumentWriteError(f"图层合并失败：{exc}", err_code=ERR_PDF_MERGE_FAILED) from exc
        data = out.getvalue()
        logger.info("ReportLab 合成输出完成：%s 页 (%.1f KB)", self.page_count, len(data) / 1024.0)
        return data


__all__ = ["ReportLabSurface"]
