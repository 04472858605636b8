"""
/**
 * @file translator_backend/models/qwen_response_model.py
 * @description DashScope 文本生成响应模型（成功 / 错误两种形态）。
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


class QwenOutput(BaseModel):
    text: str
    finish_reason: Optional[str] = None


class QwenResponse(BaseModel):
    output: QwenOutput
    code: Optional[str] = None
    message: Optional[str] = None
    request_id: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None

    @property
    def is_success(self) -> bool:
        return self.code is None or self.code in ("", "200")


class QwenErrorResponse(BaseModel):
    code: str
    message: str = ""
    request_id: Optional[str] = None
