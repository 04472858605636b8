"""
/**
 * @file translator_backend/exceptions.py
 * @description 错误类型：语言检测、凭据、网络、远端 API、响应解析、文件读写。
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TranslatorError(Exception):
    """Base error with optional code and details."""

    kind = "translator_error"

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def add_context(self, context: str) -> None:
        self.message = f"{context}: {self.message}"
        self.args = (self.message,)

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "error", "kind": self.kind, "message": self.message}


class LanguageDetectionFailed(TranslatorError):
    kind = "language_detection_failed"

    def __init__(self, text: str):
        super().__init__("Could not detect language", details={"text": text})
        self.text = text


class MissingCredential(TranslatorError):
    kind = "missing_credential"

    def __init__(self, message: str = "QWEN_API_KEY environment variable not set"):
        super().__init__(message)


class NetworkError(TranslatorError):
    kind = "network_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code


class RemoteApiError(TranslatorError):
    kind = "remote_api_error"

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"API Error: {message}", code=code, details={"status_code": status_code})
        self.status_code = status_code
        self.remote_message = message


class ResponseParseError(TranslatorError):
    """The response body matched neither the success nor the error shape."""

    kind = "response_parse_error"

    def __init__(self, reason: str, raw_body: str):
        super().__init__(f"Failed to parse API response: {reason}", details={"raw_body": raw_body})
        self.raw_body = raw_body


class FileIoError(TranslatorError):
    kind = "file_io_error"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, details={"path": path})
        self.path = path
