"""
文件路径：pdf_text_replacer/processors/context.py

说明：渲染上下文（句柄对象）。

- 每次调用显式创建：从内存字节打开一次源文档，供提取与合成复用；
- 通过 close() 或 with 语句显式释放，无任何模块级全局文档状态；
- 打不开或加密无权限的文档一律抛出 DocumentParseError（整体致命）。
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import fitz  # PyMuPDF

from ..components import get_logger
from ..exceptions import DocumentParseError
from ..variables import ERR_PDF_ENCRYPTED


logger = get_logger(__name__)


class RenderContext:
    """持有已解析源文档的句柄。

    用法示例：
        with RenderContext.open(pdf_bytes) as ctx:
            pages = extract_pages(ctx)
    """

    def __init__(self, source_bytes: bytes, document: fitz.Document, encrypted: bool = False) -> None:
        self.source_bytes = source_bytes
        self._document: Optional[fitz.Document] = document
        # 源文档是否加密（含仅设置所有者口令、空口令即可打开的文档）
        self.encrypted = encrypted
        # 源文档页数：续页追加后 document.page_count 会增大，此值保持不变
        self.source_page_count: int = document.page_count

    @classmethod
    def open(cls, source_bytes: bytes) -> "RenderContext":
        """从字节打开源文档；必要时尝试空口令解密。

        异常：
            DocumentParseError: 非法/损坏的 PDF，或加密且无访问权限。
        """
        if not source_bytes:
            raise DocumentParseError("源文档为空")
        try:
            doc = fitz.open(stream=bytes(source_bytes), filetype="pdf")
        except Exception as exc:  # noqa: BLE001
            raise DocumentParseError(f"无法打开 PDF：{exc}") from exc

        encrypted = bool(doc.needs_pass or (doc.metadata or {}).get("encryption"))
        if doc.needs_pass and not doc.authenticate(""):
            doc.close()
            raise DocumentParseError("PDF 已加密且需要口令", err_code=ERR_PDF_ENCRYPTED)
        if doc.page_count == 0:
            doc.close()
            raise DocumentParseError("PDF 不含任何页面")

        logger.info("源文档已打开：%s 页，%.1f KB", doc.page_count, len(source_bytes) / 1024.0)
        return cls(bytes(source_bytes), doc, encrypted=encrypted)

    @property
    def document(self) -> fitz.Document:
        if self.closed:
            raise RuntimeError("渲染上下文已释放")
        return self._document

    @property
    def closed(self) -> bool:
        return self._document is None

    def plain_source_bytes(self) -> bytes:
        """返回未加密的源文档字节；加密文档由已解密的句柄重新序列化。"""
        if not self.encrypted:
            return self.source_bytes
        return self.document.tobytes(encryption=fitz.PDF_ENCRYPT_NONE)

    def page_sizes(self) -> List[Tuple[float, float]]:
        """源文档各页尺寸 (width, height)。"""
        doc = self.document
        return [(float(doc[i].rect.width), float(doc[i].rect.height)) for i in range(self.source_page_count)]

    def close(self) -> None:
        if self._document is not None:
            self._document.close()
            self._document = None

    def __enter__(self) -> "RenderContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["RenderContext"]
