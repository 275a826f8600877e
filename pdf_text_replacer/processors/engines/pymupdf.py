"""
文件路径：pdf_text_replacer/processors/engines/pymupdf.py

说明：PyMuPDF 直接在渲染上下文持有的文档上遮盖与绘制，续页通过 new_page 追加。

注意：PyMuPDF 页面坐标以左上为原点，写入前统一翻转 y。
"""

from __future__ import annotations

import fitz  # PyMuPDF

from ...components import flip_y, get_logger
from ...exceptions import DocumentWriteError, TextMeasurementError
from ...variables import (
    STYLE_PYMUPDF_FONT_BOLD,
    STYLE_PYMUPDF_FONT_REGULAR,
    STYLE_TEXT_COLOR_RGB,
    STYLE_WHITEOUT_COLOR_RGB,
)
from ..context import RenderContext
from .base import DocumentSurface


logger = get_logger(__name__)


class PyMuPDFSurface(DocumentSurface):
    """基于 fitz.Document 的可写文档。"""

    def __init__(self, ctx: RenderContext) -> None:
        self._ctx = ctx
        self._text_color = tuple(v / 255.0 for v in STYLE_TEXT_COLOR_RGB)
        self._fill_color = tuple(v / 255.0 for v in STYLE_WHITEOUT_COLOR_RGB)

    @property
    def page_count(self) -> int:
        return self._ctx.document.page_count

    @staticmethod
    def _fontname(bold: bool) -> str:
        return STYLE_PYMUPDF_FONT_BOLD if bold else STYLE_PYMUPDF_FONT_REGULAR

    def width_of_string_at_size(self, text: str, font_size: float, bold: bool = False) -> float:
        try:
            return float(fitz.get_text_length(text, fontname=self._fontname(bold), fontsize=font_size))
        except Exception as exc:  # noqa: BLE001
            raise TextMeasurementError(f"字宽度量失败：{text!r} @ {font_size}pt：{exc}") from exc

    def draw_opaque_rect(self, page_index: int, x: float, y: float, width: float, height: float) -> None:
        page = self._ctx.document[page_index]
        page_height = float(page.rect.height)
        rect = fitz.Rect(x, flip_y(y + height, page_height), x + width, flip_y(y, page_height))
        page.draw_rect(rect, color=None, fill=self._fill_color, overlay=True)

    def draw_text(self, page_index: int, x: float, y: float, text: str, font_size: float, bold: bool = False) -> None:
        page = self._ctx.document[page_index]
        page.insert_text(
            (x, flip_y(y, float(page.rect.height))),
            text,
            fontsize=font_size,
            fontname=self._fontname(bold),
            color=self._text_color,
        )

    def insert_page(self, width: float, height: float) -> int:
        doc = self._ctx.document
        doc.new_page(-1, width=width, height=height)
        return doc.page_count - 1

    def to_bytes(self) -> bytes:
        try:
            data = self._ctx.document.tobytes(deflate=True, garbage=4, clean=True)
        except Exception as exc:  # noqa: BLE001
            raise DocumentWriteError(f"使用 PyMuPDF 写入失败: {exc}") from exc
        logger.info("PyMuPDF 输出完成：%s 页 (%.1f KB)", self.page_count, len(data) / 1024.0)
        return data


__all__ = ["PyMuPDFSurface"]
