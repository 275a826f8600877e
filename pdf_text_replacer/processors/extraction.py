"""
文件路径：pdf_text_replacer/processors/extraction.py

说明：逐页解析源文档，得到带位置的原始文本片段，并聚类为逻辑行。

提供两种提取引擎：
- pymupdf（默认）：片段 = PyMuPDF `get_text("dict")` 的 span；
- pdfplumber：片段 = 字体、字号、基线一致且水平连续的字符序列。

两者输出统一为左下角原点坐标，与合成阶段写入的坐标系一致，下游无需翻转。
"""

from __future__ import annotations

import io
from typing import Dict, List

import fitz  # PyMuPDF
import pdfplumber

from ..components import get_logger, flip_y
from ..exceptions import DocumentParseError
from ..models import PageText, TextItem
from ..variables import (
    CONST_ENGINE_PDFPLUMBER,
    CONST_ENGINE_PYMUPDF,
    CONST_EXTRACT_ENGINE_DEFAULT,
    ERR_DATA_INVALID,
    ERR_EMPTY_CONTENT,
    STYLE_FONT_SIZE_DEFAULT,
)
from .context import RenderContext
from .grouping import group_into_lines


logger = get_logger(__name__)


def _resolve_font_size(size: float) -> float:
    size = abs(float(size or 0.0))
    return size if size > 0 else STYLE_FONT_SIZE_DEFAULT


# -----------------------------
# PyMuPDF：span 即片段
# -----------------------------
def items_from_pymupdf_page(page: fitz.Page) -> List[TextItem]:
    """读取单页的 span 作为文本片段。

    span 的 origin 为基线起点（左上原点），此处翻转为左下原点；
    字号取 span size（由文本矩阵缩放得到），高度取字号；
    下伸深度取 bbox 底边与基线之差；文本去除首尾空白，与 pdfplumber 路径一致。
    """
    page_height = float(page.rect.height)
    items: List[TextItem] = []
    raw = page.get_text("dict")
    for block in raw.get("blocks", []):
        if block.get("type", 0) != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "").strip()
                if not text:
                    continue
                x0, _, x1, y1 = span["bbox"]
                ox, oy = span["origin"]
                font_size = _resolve_font_size(span.get("size", 0.0))
                items.append(
                    TextItem(
                        text=text,
                        x=float(ox),
                        y=flip_y(float(oy), page_height),
                        font_size=font_size,
                        width=float(x1 - x0),
                        height=font_size,
                        descent=max(0.0, float(y1 - oy)),
                    )
                )
    return items


# -----------------------------
# pdfplumber：字符序列即片段
# -----------------------------
def _continues_run(prev: dict, ch: dict) -> bool:
    size = float(prev.get("size") or STYLE_FONT_SIZE_DEFAULT)
    gap = float(ch["x0"]) - float(prev["x1"])
    return (
        ch.get("fontname") == prev.get("fontname")
        and abs(float(ch.get("size", 0.0)) - float(prev.get("size", 0.0))) < 0.01
        and abs(float(ch["matrix"][5]) - float(prev["matrix"][5])) < 0.01
        and -0.5 * size <= gap <= size
    )


def _item_from_chars(chars: List[dict], page_height: float) -> TextItem | None:
    visible = [c for c in chars if c.get("text", "").strip()]
    if not visible:
        return None
    first, last = visible[0], visible[-1]
    font_size = _resolve_font_size(first.get("size", 0.0))
    baseline = float(first["matrix"][5])
    # bottom 为左上原点下的字形底边
    glyph_bottom = flip_y(max(float(c["bottom"]) for c in visible), page_height)
    return TextItem(
        text="".join(c.get("text", "") for c in chars).strip(),
        x=float(first["matrix"][4]),
        y=baseline,
        font_size=font_size,
        width=float(last["x1"]) - float(first["x0"]),
        height=font_size,
        descent=max(0.0, baseline - glyph_bottom),
    )


def items_from_pdfplumber_page(page: "pdfplumber.page.Page") -> List[TextItem]:
    """将字符流切分为片段：字体、字号、基线一致且水平连续的字符归为一段。"""
    page_height = float(page.height)
    items: List[TextItem] = []
    run: List[dict] = []
    for ch in page.chars:
        if run and _continues_run(run[-1], ch):
            run.append(ch)
            continue
        if run:
            item = _item_from_chars(run, page_height)
            if item is not None:
                items.append(item)
        run = [ch]
    if run:
        item = _item_from_chars(run, page_height)
        if item is not None:
            items.append(item)
    return items


def _extract_with_pymupdf(ctx: RenderContext) -> Dict[int, List[TextItem]]:
    doc = ctx.document
    return {i: items_from_pymupdf_page(doc[i]) for i in range(ctx.source_page_count)}


def _extract_with_pdfplumber(ctx: RenderContext) -> Dict[int, List[TextItem]]:
    try:
        with pdfplumber.open(io.BytesIO(ctx.source_bytes)) as pdf:
            return {i: items_from_pdfplumber_page(p) for i, p in enumerate(pdf.pages)}
    except Exception as exc:  # noqa: BLE001
        raise DocumentParseError(f"pdfplumber 解析失败：{exc}") from exc


def extract_pages(ctx: RenderContext, engine: str = CONST_EXTRACT_ENGINE_DEFAULT) -> List[PageText]:
    """提取每页的尺寸与逻辑行。

    参数：
        ctx: 渲染上下文（已打开的源文档）。
        engine: "pymupdf" 或 "pdfplumber"。

    返回：
        PageText 列表（与源文档页序一致）；无文本的页面其 lines 为空。
    """
    if engine == CONST_ENGINE_PYMUPDF:
        items_by_page = _extract_with_pymupdf(ctx)
    elif engine == CONST_ENGINE_PDFPLUMBER:
        items_by_page = _extract_with_pdfplumber(ctx)
    else:
        raise ValueError(f"[{ERR_DATA_INVALID}] 未知的提取引擎：{engine}")

    pages: List[PageText] = []
    for index, (width, height) in enumerate(ctx.page_sizes()):
        lines = group_into_lines(items_by_page.get(index, []))
        page = PageText(page_index=index, width=width, height=height, lines=tuple(lines))
        if page.is_empty:
            logger.info("[%s] 第 %s 页无可提取文本，按空页处理", ERR_EMPTY_CONTENT, index + 1)
        pages.append(page)

    total = sum(len(p.lines) for p in pages)
    if total == 0:
        logger.info("[%s] 文档无可提取文本", ERR_EMPTY_CONTENT)
    logger.info("文本提取完成（%s）：%s 页，%s 行", engine, len(pages), total)
    return pages


__all__ = [
    "items_from_pymupdf_page",
    "items_from_pdfplumber_page",
    "extract_pages",
]
