"""
文件路径：pdf_text_replacer/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关（字体、颜色、字号）
  - CONST_：通用常量（版式参数、容差、日志格式）
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 所有长度单位均为 PDF 点（pt，1/72 英寸），坐标系为左下角原点、y 向上递增。
"""

from pathlib import Path
from typing import Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志


# =============================
# 样式（STYLE_）
# =============================
# 标准 14 字体：无需嵌入，ReportLab 与 PyMuPDF 的字宽度量一致
STYLE_FONT_NAME_REGULAR: str = "Helvetica"
STYLE_FONT_NAME_BOLD: str = "Helvetica-Bold"
# PyMuPDF 内置 Base14 字体的短名（与上面两种字体一一对应）
STYLE_PYMUPDF_FONT_REGULAR: str = "helv"
STYLE_PYMUPDF_FONT_BOLD: str = "hebo"

STYLE_FONT_SIZE_DEFAULT: float = 12.0  # 文本片段未给出字号时的回退值
STYLE_FONT_SIZE_OVERFLOW: float = 10.0  # 无原始行对应的溢出行所用字号
STYLE_HEADING_FONT_SIZE: float = 14.0  # 字号 >= 该值时使用粗体，还原标题层级
STYLE_TEXT_COLOR_RGB: Tuple[int, int, int] = (0, 0, 0)  # 新文本颜色，黑色
STYLE_WHITEOUT_COLOR_RGB: Tuple[int, int, int] = (255, 255, 255)  # 遮盖色，白色


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"

# 行聚类：y 差值不超过该容差的片段视为同一行
CONST_LINE_Y_TOLERANCE: float = 3.0

# 混合字号策略
CONST_MIN_FONT_SCALE: float = 0.8  # 最多缩小到原字号的 80%
CONST_FONT_SHRINK_STEP: float = 0.5  # 每次缩小 0.5pt
CONST_MIN_FONT_SIZE_ABS: float = 6.0  # 绝对最小字号
CONST_LINE_HEIGHT_FACTOR: float = 1.2  # 行高 = 字号 * 1.2

# 页面版式
CONST_PAGE_MARGIN: float = 36.0  # 0.5 英寸：续页上下左右边距、溢出判定底线
CONST_WHITEOUT_PADDING: float = 2.0  # 遮盖矩形四周外扩

# 引擎名称
CONST_ENGINE_PYMUPDF: str = "pymupdf"
CONST_ENGINE_REPORTLAB: str = "reportlab"
CONST_ENGINE_PDFPLUMBER: str = "pdfplumber"
CONST_COMPOSE_ENGINE_DEFAULT: str = CONST_ENGINE_PYMUPDF
CONST_EXTRACT_ENGINE_DEFAULT: str = CONST_ENGINE_PYMUPDF

# 输出命名：默认输出后缀
CONST_DEFAULT_OUTPUT_SUFFIX: str = "_translated.pdf"

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_INVALID_PDF: int = 1002  # 非法或损坏的 PDF 文件
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写
ERR_PDF_ENCRYPTED: int = 1004  # 加密且无访问权限

# 2xxx：文本识别/版式相关
ERR_TEXT_MEASURE_FAILED: int = 2001  # 字宽度量失败
ERR_EMPTY_CONTENT: int = 2004  # 页面或文档无可提取文本（非致命）

# 3xxx：合成/写入相关
ERR_PDF_MERGE_FAILED: int = 3001  # 图层合并失败
ERR_PDF_WRITE_FAILED: int = 3002  # PDF 写入失败

# 4xxx：参数相关
ERR_DATA_INVALID: int = 4002  # 参数非法（如未知引擎）


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_LOG_FILE",
    # STYLE_
    "STYLE_FONT_NAME_REGULAR",
    "STYLE_FONT_NAME_BOLD",
    "STYLE_PYMUPDF_FONT_REGULAR",
    "STYLE_PYMUPDF_FONT_BOLD",
    "STYLE_FONT_SIZE_DEFAULT",
    "STYLE_FONT_SIZE_OVERFLOW",
    "STYLE_HEADING_FONT_SIZE",
    "STYLE_TEXT_COLOR_RGB",
    "STYLE_WHITEOUT_COLOR_RGB",
    # CONST_
    "CONST_ENCODING",
    "CONST_LINE_Y_TOLERANCE",
    "CONST_MIN_FONT_SCALE",
    "CONST_FONT_SHRINK_STEP",
    "CONST_MIN_FONT_SIZE_ABS",
    "CONST_LINE_HEIGHT_FACTOR",
    "CONST_PAGE_MARGIN",
    "CONST_WHITEOUT_PADDING",
    "CONST_ENGINE_PYMUPDF",
    "CONST_ENGINE_REPORTLAB",
    "CONST_ENGINE_PDFPLUMBER",
    "CONST_COMPOSE_ENGINE_DEFAULT",
    "CONST_EXTRACT_ENGINE_DEFAULT",
    "CONST_DEFAULT_OUTPUT_SUFFIX",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_INVALID_PDF",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_PDF_ENCRYPTED",
    "ERR_TEXT_MEASURE_FAILED",
    "ERR_EMPTY_CONTENT",
    "ERR_PDF_MERGE_FAILED",
    "ERR_PDF_WRITE_FAILED",
    "ERR_DATA_INVALID",
]
