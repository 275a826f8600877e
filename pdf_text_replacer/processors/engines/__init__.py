"""
文件路径：pdf_text_replacer/processors/engines/__init__.py

说明：合成引擎：`pymupdf.py`（直接写入源文档）、`reportlab.py`（图层 + PyPDF2 合并）。
"""

from __future__ import annotations

from ...variables import CONST_ENGINE_PYMUPDF, CONST_ENGINE_REPORTLAB, ERR_DATA_INVALID
from ..context import RenderContext
from .base import DocumentSurface
from .pymupdf import PyMuPDFSurface
from .reportlab import ReportLabSurface


def create_surface(ctx: RenderContext, engine: str) -> DocumentSurface:
    """按引擎名创建可写文档。"""
    if engine == CONST_ENGINE_PYMUPDF:
        return PyMuPDFSurface(ctx)
    if engine == CONST_ENGINE_REPORTLAB:
        return ReportLabSurface(ctx)
    raise ValueError(f"[{ERR_DATA_INVALID}] 未知的合成引擎：{engine}")


__all__ = [
    "DocumentSurface",
    "PyMuPDFSurface",
    "ReportLabSurface",
    "create_surface",
]
