"""
/**
 * @file translator_backend/controllers/translate_controller.py
 * @description 文件名翻译控制器。
 */
"""

from fastapi import APIRouter

from translator_backend.controllers.error_mapping import to_http_exception
from translator_backend.exceptions import TranslatorError
from translator_backend.models import TranslateFilenameRequest
from translator_backend.services import translate_filename_async


router = APIRouter()


@router.post("/api/translate-filename")
async def translate(req: TranslateFilenameRequest):
    try:
        output = await translate_filename_async(req.filename)
    except TranslatorError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "output": output}
