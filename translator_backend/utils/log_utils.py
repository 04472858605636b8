"""
/**
 * @file translator_backend/utils/log_utils.py
 * @description 诊断日志：临时目录下追加写入的时间戳日志文件。
 */
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from typing import Optional

from translator_backend.config.settings import DEFAULT_LOG_FILENAME


DIAGNOSTIC_LOGGER_NAME = "translator_app"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_HANDLER_LOCK = threading.Lock()


def diagnostic_log_path(filename: str = DEFAULT_LOG_FILENAME) -> str:
    return os.path.join(tempfile.gettempdir(), filename)


def get_diagnostic_logger(log_path: Optional[str] = None) -> logging.Logger:
    """
    Return the process-wide diagnostic logger, attaching its file handler on first use.

    Each record is written as one line through a FileHandler opened in append mode.
    """
    logger = logging.getLogger(DIAGNOSTIC_LOGGER_NAME)
    path = os.path.abspath(log_path or diagnostic_log_path())
    with _HANDLER_LOCK:
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
                return logger
        handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    return logger


def log_to_file(message: str) -> None:
    get_diagnostic_logger().info(message)


def mask_secret(value: Optional[str]) -> str:
    if not value:
        return "<missing>"
    if len(value) > 4:
        return f"{value[:4]}..."
    return "***"
