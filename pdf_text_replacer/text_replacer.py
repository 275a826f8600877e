"""
文件路径：pdf_text_replacer/text_replacer.py

模块职责：
- 门面：字节进、字节出的文本替换 `(源 PDF 字节, 替换文本) -> 结果 PDF 字节`；
- 串联各阶段：打开上下文 -> 提取与分行 -> 按比例分配 -> 版式适配与合成 -> 序列化；
- 提供纯文本提取（替换文本应按同样的行结构返回）与文件便捷入口。

注意：
- 整个流程在内存中完成，任何致命错误都会整体中止，不返回部分结果；
- 渲染上下文在成功或失败时都会释放；
- 可选参数为 None 时回退到 variables.py 中的默认值。
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .components import FileHandler, count_words, get_logger, split_replacement_lines
from .exceptions import DocumentWriteError
from .models import PageComposition
from .processors.compositor import compose_document
from .processors.context import RenderContext
from .processors.engines import create_surface
from .processors.extraction import extract_pages
from .processors.redistribution import distribute_lines
from .variables import (
    CONST_COMPOSE_ENGINE_DEFAULT,
    CONST_EXTRACT_ENGINE_DEFAULT,
    CONST_PAGE_MARGIN,
    STYLE_HEADING_FONT_SIZE,
)


logger = get_logger(__name__)


def _collect_stats(
    source_pages: int,
    output_pages: int,
    replacement_lines: Sequence[str],
    compositions: Sequence[PageComposition],
) -> Dict[str, int]:
    plans = [plan for comp in compositions for plan in comp.plans]
    return {
        "source_pages": source_pages,
        "output_pages": output_pages,
        "continuation_pages": sum(len(comp.continuation_pages) for comp in compositions),
        "replacement_lines": len(replacement_lines),
        "overflow_lines": sum(comp.overflow_line_count for comp in compositions),
        "drawn_sub_lines": sum(len(plan.placements) for plan in plans),
        "shrunk_lines": sum(1 for plan in plans if plan.fit.shrunk),
        "wrapped_lines": sum(1 for plan in plans if plan.fit.wrapped),
    }


class PDFTextReplacer:
    """PDF 文本替换器：在保留页面几何的前提下，用新文本覆盖原文。

    用法示例：
        replacer = PDFTextReplacer()
        text = extract_document_text(pdf_bytes)
        result = replacer.replace_text(pdf_bytes, translate(text))
        print(replacer.last_replace_stats)
    """

    def __init__(
        self,
        engine: str = CONST_COMPOSE_ENGINE_DEFAULT,
        extract_engine: str = CONST_EXTRACT_ENGINE_DEFAULT,
    ) -> None:
        self.engine = engine
        self.extract_engine = extract_engine
        # 最近一次替换统计：页数、续页数、行数、缩小/换行行数等
        self.last_replace_stats: Optional[Dict[str, int]] = None

    def replace_text(
        self,
        source_bytes: bytes,
        replacement_text: str,
        engine: Optional[str] = None,
        extract_engine: Optional[str] = None,
        page_margin: Optional[float] = None,
        heading_font_size: Optional[float] = None,
    ) -> bytes:
        """用替换文本重建文档。

        参数：
            source_bytes: 源 PDF 字节。
            replacement_text: 替换文本，按换行拆分，空行忽略。
            engine: 合成引擎（"pymupdf" / "reportlab"）。
            extract_engine: 提取引擎（"pymupdf" / "pdfplumber"）。
            page_margin: 页边距（pt）。
            heading_font_size: 标题字号阈值（达到即用粗体）。

        返回：
            结果 PDF 字节；页数 >= 源页数。

        异常：
            DocumentParseError / TextMeasurementError / DocumentWriteError。
        """
        engine = engine or self.engine
        extract_engine = extract_engine or self.extract_engine
        margin = CONST_PAGE_MARGIN if page_margin is None else float(page_margin)
        heading = STYLE_HEADING_FONT_SIZE if heading_font_size is None else float(heading_font_size)

        lines = split_replacement_lines(replacement_text)
        self.last_replace_stats = None

        with RenderContext.open(source_bytes) as ctx:
            pages = extract_pages(ctx, engine=extract_engine)
            distribution = distribute_lines(pages, lines)
            surface = create_surface(ctx, engine)
            compositions = compose_document(
                surface,
                pages,
                distribution,
                page_margin=margin,
                heading_font_size=heading,
            )
            output_pages = surface.page_count
            data = surface.to_bytes()

        if not data:
            raise DocumentWriteError("序列化结果为空")

        stats = _collect_stats(len(pages), output_pages, lines, compositions)
        drawn_words = sum(count_words([p.text for p in comp.placements]) for comp in compositions)
        if drawn_words != count_words(lines):
            logger.warning("绘制词数 %s 与替换文本词数 %s 不一致", drawn_words, count_words(lines))
        self.last_replace_stats = stats
        logger.info(
            "文本替换完成（%s）：%s -> %s 页，%s 行，续页 %s，缩小 %s，换行 %s",
            engine,
            stats["source_pages"],
            stats["output_pages"],
            stats["replacement_lines"],
            stats["continuation_pages"],
            stats["shrunk_lines"],
            stats["wrapped_lines"],
        )
        return data

    def replace_text_in_file(
        self,
        input_path: Path | str,
        replacement_text: str,
        output_path: Optional[Path | str] = None,
        **options,
    ) -> Path:
        """文件便捷入口：读取源 PDF，写出替换结果。

        参数：
            input_path: 源 PDF 路径。
            replacement_text: 替换文本。
            output_path: 输出路径；None 时在默认输出目录生成带时间戳的文件名。
            **options: 透传给 replace_text 的可选参数。

        返回：
            实际写出的输出路径。
        """
        src = Path(input_path)
        FileHandler.validate_readable_file(src)
        target = Path(output_path) if output_path is not None else FileHandler.timestamped_output_path(src)
        FileHandler.ensure_parent_writable(target)

        data = self.replace_text(src.read_bytes(), replacement_text, **options)
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise DocumentWriteError(f"写出文件失败: {target}: {exc}") from exc
        logger.info("输出已写入：%s", target)
        return target


def replace_text_in_pdf(source_bytes: bytes, replacement_text: str, **options) -> bytes:
    """函数式入口：`(源 PDF 字节, 替换文本) -> 结果 PDF 字节`。"""
    return PDFTextReplacer().replace_text(source_bytes, replacement_text, **options)


def extract_document_text(
    source_bytes: bytes,
    layout: bool = True,
    engine: str = CONST_EXTRACT_ENGINE_DEFAULT,
) -> str:
    """提取文档纯文本，供外部翻译等服务使用。

    参数：
        source_bytes: 源 PDF 字节。
        layout: True 时每个逻辑行一行（与替换文本期望的结构一致）；
            False 时每页片段以空格连接，页与页之间空一行。
        engine: 提取引擎。

    返回：
        纯文本字符串。
    """
    with RenderContext.open(source_bytes) as ctx:
        pages = extract_pages(ctx, engine=engine)

    if layout:
        return "\n".join(line.text for page in pages for line in page.lines)

    page_texts: List[str] = []
    for page in pages:
        page_texts.append(" ".join(item.text for line in page.lines for item in line.items))
    return "\n\n".join(page_texts)


__all__ = [
    "PDFTextReplacer",
    "replace_text_in_pdf",
    "extract_document_text",
]
