"""
/**
 * @file translator_backend/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .file_utils import FilenameParts, split_filename
from .log_utils import diagnostic_log_path, get_diagnostic_logger, log_to_file, mask_secret

__all__ = [
    "FilenameParts",
    "split_filename",
    "diagnostic_log_path",
    "get_diagnostic_logger",
    "log_to_file",
    "mask_secret",
]
