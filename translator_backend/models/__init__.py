"""
/**
 * @file translator_backend/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .file_request_model import CreateTempFileRequest, CreateZipRequest, ZipEntry
from .qwen_response_model import QwenErrorResponse, QwenOutput, QwenResponse
from .translate_request_model import TranslateFilenameRequest

__all__ = [
    "CreateTempFileRequest",
    "CreateZipRequest",
    "ZipEntry",
    "QwenErrorResponse",
    "QwenOutput",
    "QwenResponse",
    "TranslateFilenameRequest",
]
