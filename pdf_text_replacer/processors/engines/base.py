"""
文件路径：pdf_text_replacer/processors/engines/base.py

说明：合成阶段依赖的宿主文档原语（抽象接口）。

坐标均为左下角原点；draw_text 的 (x, y) 为文本基线起点。
实现需保证：页数与字宽度量只读，绘制与插页只追加，不会修改源文本。
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentSurface(ABC):
    """可被合成器写入的文档。"""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """当前页数（含已追加的续页）。"""

    @abstractmethod
    def width_of_string_at_size(self, text: str, font_size: float, bold: bool = False) -> float:
        """度量文本宽度（pt）；失败时抛出 TextMeasurementError。"""

    @abstractmethod
    def draw_opaque_rect(self, page_index: int, x: float, y: float, width: float, height: float) -> None:
        """绘制不透明遮盖矩形（左下角 + 宽高）。"""

    @abstractmethod
    def draw_text(self, page_index: int, x: float, y: float, text: str, font_size: float, bold: bool = False) -> None:
        """在基线 (x, y) 处绘制单行文本。"""

    @abstractmethod
    def insert_page(self, width: float, height: float) -> int:
        """在文档末尾追加空白页，返回新页索引。"""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """序列化为完整的 PDF 字节；失败时抛出 DocumentWriteError。"""


__all__ = ["DocumentSurface"]
