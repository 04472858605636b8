"""
/**
 * @file translator_backend/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .file_service import create_temp_file, create_zip_file, get_temp_dir
from .language_detection_service import DetectedLanguage, DetectionKind, DetectionOutcome, LanguageDetector
from .qwen_client_service import QwenClient
from .translation_service import translate_filename, translate_filename_async, translate_text

__all__ = [
    "create_temp_file",
    "create_zip_file",
    "get_temp_dir",
    "DetectedLanguage",
    "DetectionKind",
    "DetectionOutcome",
    "LanguageDetector",
    "QwenClient",
    "translate_filename",
    "translate_filename_async",
    "translate_text",
]
