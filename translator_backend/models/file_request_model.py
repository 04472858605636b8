"""
/**
 * @file translator_backend/models/file_request_model.py
 * @description 压缩包与临时文件请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from typing import Annotated, List

from pydantic import BaseModel, Field


class ZipEntry(BaseModel):
    source_path: str = Field(..., min_length=1)
    entry_name: str = Field(..., min_length=1)


class CreateZipRequest(BaseModel):
    files: List[ZipEntry]
    zip_path: str = Field(..., min_length=1)


class CreateTempFileRequest(BaseModel):
    name: str = Field(..., min_length=1)
    # The UI sends a Uint8Array serialized as a list of byte values
    content: List[Annotated[int, Field(ge=0, le=255)]] = Field(default_factory=list)

    def content_bytes(self) -> bytes:
        return bytes(self.content)
