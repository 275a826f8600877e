"""
文件路径：pdf_text_replacer/components/text.py

说明：替换文本的切分与计数工具。
"""

from __future__ import annotations

from typing import List


def split_replacement_lines(text: str) -> List[str]:
    """将替换文本按换行拆分为替换行序列。

    - 每行先去除行尾空白（兼容 "\\r\\n" 换行与仅含空白的行）；
    - 去除后为空的行被丢弃；行首缩进保留。
    """
    if not text:
        return []
    result: List[str] = []
    for raw in text.split("\n"):
        line = raw.rstrip()
        if line:
            result.append(line)
    return result


def split_words(text: str) -> List[str]:
    """按任意空白切分单词（连续空白视为一个分隔）。"""
    if not text:
        return []
    return text.split()


def count_words(lines: List[str]) -> int:
    """统计多行文本的单词总数。"""
    return sum(len(split_words(line)) for line in lines)


__all__ = [
    "split_replacement_lines",
    "split_words",
    "count_words",
]
