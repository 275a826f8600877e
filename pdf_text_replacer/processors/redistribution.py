"""
文件路径：pdf_text_replacer/processors/redistribution.py

说明：按各页原始行数占比，把扁平的替换行序列分配到各页。

替换文本（如整体翻译结果）不保留字段级对应关系，因此采用比例近似：
- 第 i 页分得 round(页行数 / 原始总行数 * 替换总行数) 行，原始有行的页至少 1 行；
- 以游标顺序消费替换行，不重排；
- 取整余量全部追加到最后一个有内容的页，绝不丢弃；
- 原始无行的页不分配任何替换行（全文无行时例外：全部放到首页）。
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..components import get_logger, round_half_up
from ..models import PageText


logger = get_logger(__name__)


def distribute_lines(pages: Sequence[PageText], replacement_lines: Sequence[str]) -> Dict[int, List[str]]:
    """将替换行按比例分配到各页。

    参数：
        pages: 提取得到的页面（含原始行）。
        replacement_lines: 全局有序的替换行序列。

    返回：
        {page_index: [替换行, ...]}，包含所有页面（无分配的页为空列表）；
        各页切片按页序拼接后恰为完整输入序列。
    """
    result: Dict[int, List[str]] = {p.page_index: [] for p in pages}
    counted = [(p.page_index, len(p.lines)) for p in pages if p.lines]
    total_original = sum(count for _, count in counted)
    total_replacement = len(replacement_lines)
    if total_original == 0:
        # 全文无文本时不丢弃内容：全部作为溢出行放到首页
        if total_replacement and pages:
            first_index = pages[0].page_index
            result[first_index] = list(replacement_lines)
            logger.warning("源文档无文本行，%s 行替换文本作为溢出行放到第 %s 页", total_replacement, first_index + 1)
        return result

    cursor = 0
    for page_index, count in counted:
        share = max(round_half_up(count / total_original * total_replacement), 1)
        end = min(cursor + share, total_replacement)
        result[page_index] = list(replacement_lines[cursor:end])
        cursor = end

    if cursor < total_replacement:
        last_index = counted[-1][0]
        result[last_index].extend(replacement_lines[cursor:])
        logger.info("取整余量 %s 行追加到第 %s 页", total_replacement - cursor, last_index + 1)

    return result


__all__ = ["distribute_lines"]
