"""
/**
 * @file translator_backend/controllers/error_mapping.py
 * @description 业务错误到 HTTP 状态码的映射。
 */
"""

from fastapi import HTTPException

from translator_backend.exceptions import (
    FileIoError,
    LanguageDetectionFailed,
    MissingCredential,
    NetworkError,
    RemoteApiError,
    ResponseParseError,
    TranslatorError,
)


_STATUS_CODES = {
    LanguageDetectionFailed: 422,
    MissingCredential: 503,
    NetworkError: 502,
    RemoteApiError: 502,
    ResponseParseError: 502,
    FileIoError: 500,
}


def to_http_exception(error: TranslatorError) -> HTTPException:
    status_code = _STATUS_CODES.get(type(error), 500)
    return HTTPException(status_code=status_code, detail=error.to_dict())
