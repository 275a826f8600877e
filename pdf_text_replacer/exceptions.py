"""
文件路径：pdf_text_replacer/exceptions.py

说明：文本替换引擎的异常类型。所有致命错误均整体中止，不产生任何输出。

- DocumentParseError：源字节不是可打开的 PDF，或加密且无访问权限。
- TextMeasurementError：字宽度量原语自身失败。
- DocumentWriteError：结果序列化（合并/保存）失败。

页面无文本、溢出续页均不是异常，分别以日志与统计形式体现。
"""

from __future__ import annotations

from .components import ErrorHandler
from .variables import (
    ERR_INVALID_PDF,
    ERR_PDF_WRITE_FAILED,
    ERR_TEXT_MEASURE_FAILED,
)


class TextReplacerError(Exception):
    """文本替换引擎的基础异常，携带错误码。"""

    err_code: int = 0

    def __init__(self, message: str, err_code: int | None = None) -> None:
        if err_code is not None:
            self.err_code = err_code
        super().__init__(ErrorHandler.format_error(self.err_code, message))


class DocumentParseError(TextReplacerError):
    err_code = ERR_INVALID_PDF


class TextMeasurementError(TextReplacerError):
    err_code = ERR_TEXT_MEASURE_FAILED


class DocumentWriteError(TextReplacerError):
    err_code = ERR_PDF_WRITE_FAILED


__all__ = [
    "TextReplacerError",
    "DocumentParseError",
    "TextMeasurementError",
    "DocumentWriteError",
]
