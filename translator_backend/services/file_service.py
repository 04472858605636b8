"""
/**
 * @file translator_backend/services/file_service.py
 * @description 文件服务：打包 zip（不压缩）、写入临时文件、查询系统临时目录。
 */
"""

from __future__ import annotations

import os
import tempfile
import zipfile
from typing import Iterable, Tuple

from translator_backend.exceptions import FileIoError


def get_temp_dir() -> str:
    return tempfile.gettempdir()


def create_zip_file(files: Iterable[Tuple[str, str]], zip_path: str) -> None:
    """
    Write each (source_path, entry_name) pair into a new stored archive, in order.

    Stops at the first unreadable source; entries already written stay in the archive.
    """
    try:
        zf = zipfile.ZipFile(zip_path, "w", zipfile.ZIP_STORED)
    except OSError as e:
        raise FileIoError(str(e), path=zip_path) from e

    with zf:
        for src_path, entry_name in files:
            try:
                with open(src_path, "rb") as f:
                    buffer = f.read()
            except OSError as e:
                raise FileIoError(str(e), path=src_path) from e
            try:
                zf.writestr(entry_name, buffer)
            except OSError as e:
                raise FileIoError(str(e), path=zip_path) from e


def create_temp_file(name: str, content: bytes) -> str:
    """Write content to a file named name directly inside the temp directory."""
    temp_dir = get_temp_dir()
    if not name or name in (".", "..") or os.path.basename(name) != name or os.path.isabs(name):
        raise FileIoError(f"Invalid temp file name: {name!r}", path=name)
    temp_path = os.path.join(temp_dir, name)
    if os.path.dirname(os.path.realpath(temp_path)) != os.path.realpath(temp_dir):
        raise FileIoError(f"Temp file must stay inside {temp_dir}", path=temp_path)
    try:
        with open(temp_path, "wb") as f:
            f.write(content)
    except OSError as e:
        raise FileIoError(str(e), path=temp_path) from e
    return os.path.abspath(temp_path)
