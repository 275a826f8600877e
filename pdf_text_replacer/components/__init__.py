"""
文件路径：pdf_text_replacer/components/__init__.py

说明：
- 通用组件包入口：日志、文件路径、错误信息格式化；
- 坐标与文本工具拆分在 `components/{coords.py, text.py}`，此处聚合导出；
- 业务模块统一使用 `from ..components import ...` 导入。
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from ..variables import (
    PATH_LOGS_DIR,
    PATH_OUTPUT_DIR,
    PATH_LOG_FILE,
    CONST_DEFAULT_OUTPUT_SUFFIX,
    CONST_ENCODING,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
)

# 聚合导出：拆分后的子模块
from .coords import padded_rect, flip_y, round_half_up
from .text import count_words, split_replacement_lines, split_words


# =============================
# 日志工具
# =============================
_LOGGER_CONFIGURED: bool = False


def get_logger(name: str) -> logging.Logger:
    """获取 logger，首次调用时配置文件与控制台双输出。

    参数：
        name: 日志记录器名称（一般使用 __name__）。

    返回：
        logging.Logger 对象。
    """
    global _LOGGER_CONFIGURED
    if not _LOGGER_CONFIGURED:
        PATH_LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(PATH_LOG_FILE, encoding=CONST_ENCODING)
        console_handler = logging.StreamHandler()
        logging.basicConfig(
            level=logging.INFO,
            format=CONST_LOG_FORMAT,
            datefmt=CONST_LOG_DATEFMT,
            handlers=[file_handler, console_handler],
        )
        _LOGGER_CONFIGURED = True
    return logging.getLogger(name)


# =============================
# 文件操作（仅供算法之外的文件便捷入口使用）
# =============================
class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(ErrorHandler.format_error(ERR_FILE_NOT_FOUND, f"文件不存在或不可读: {path}"))

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding=CONST_ENCODING) as f:  # noqa: P103
                f.write("probe")
        except OSError as exc:
            raise PermissionError(ErrorHandler.format_error(ERR_PATH_NOT_WRITABLE, f"目录不可写: {parent}")) from exc
        probe.unlink(missing_ok=True)

    @staticmethod
    def timestamped_output_path(
        input_pdf: Optional[Path],
        suffix: str = CONST_DEFAULT_OUTPUT_SUFFIX,
        output_dir: Optional[Path] = None,
    ) -> Path:
        """生成带时间戳的输出路径。

        参数：
            input_pdf: 源 PDF 路径；若为 None，则使用 "output" 作为前缀。
            suffix: 输出文件名后缀（默认 "_translated.pdf"）。
            output_dir: 输出目录；None 则使用默认 PATH_OUTPUT_DIR。

        返回：
            输出路径，例如 output/resume_20240101_120000_translated.pdf
        """
        target_dir = output_dir if output_dir is not None else PATH_OUTPUT_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y%m%d_%H%M%S")
        stem = input_pdf.stem if input_pdf is not None else "output"
        return target_dir / f"{stem}_{ts}{suffix}"


class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志工具
    "get_logger",
    # 文件操作
    "FileHandler",
    "ErrorHandler",
    # 坐标处理
    "padded_rect",
    "flip_y",
    "round_half_up",
    # 文本工具
    "split_replacement_lines",
    "split_words",
    "count_words",
]
