"""
/**
 * @file translator_backend/models/translate_request_model.py
 * @description 文件名翻译请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from pydantic import BaseModel


class TranslateFilenameRequest(BaseModel):
    filename: str
