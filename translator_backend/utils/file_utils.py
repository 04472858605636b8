"""
/**
 * @file translator_backend/utils/file_utils.py
 * @description 文件名处理工具：按最后一个点拆分主名与扩展名、重新拼接。
 */
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FilenameParts:
    stem: str
    extension: Optional[str] = None

    def join(self, stem: Optional[str] = None) -> str:
        value = self.stem if stem is None else stem
        if self.extension is None:
            return value
        return f"{value}.{self.extension}"


def split_filename(filename: str) -> FilenameParts:
    """
    Split on the last '.'.

    'a.b.pdf' -> ('a.b', 'pdf'); 'notes' -> ('notes', None); '.gitignore' -> ('', 'gitignore').
    """
    stem, sep, extension = filename.rpartition(".")
    if not sep:
        return FilenameParts(stem=filename, extension=None)
    return FilenameParts(stem=stem, extension=extension)

