"""
文件路径：pdf_text_replacer/__init__.py

说明：PDF 文本替换引擎。对外入口见 `text_replacer.py`。
"""

from .exceptions import (
    DocumentParseError,
    DocumentWriteError,
    TextMeasurementError,
    TextReplacerError,
)
from .text_replacer import PDFTextReplacer, extract_document_text, replace_text_in_pdf

__version__ = "0.1.0"

__all__ = [
    "PDFTextReplacer",
    "replace_text_in_pdf",
    "extract_document_text",
    "TextReplacerError",
    "DocumentParseError",
    "TextMeasurementError",
    "DocumentWriteError",
]
