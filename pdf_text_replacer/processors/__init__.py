"""
文件路径：pdf_text_replacer/processors/__init__.py

说明：文本替换流水线各阶段（数据严格自左向右流动）：
  - context.py（渲染上下文：源文档句柄的获取/复用/释放）
  - extraction.py（逐页提取带位置的文本片段）
  - grouping.py（片段聚类为逻辑行）
  - redistribution.py（替换行按比例分配到各页）
  - layout.py（单行版式适配：原样/缩小/换行）
  - compositor.py（遮盖原文、绘制新文、溢出续页）
  - engines/{pymupdf.py, reportlab.py}（宿主文档原语实现）
"""

from typing import List

__all__: List[str] = []
