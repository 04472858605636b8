"""
/**
 * @file translator_backend/controllers/files_controller.py
 * @description 文件控制器：打包 zip、写入临时文件、查询临时目录。
 */
"""

from fastapi import APIRouter

from translator_backend.controllers.error_mapping import to_http_exception
from translator_backend.exceptions import FileIoError
from translator_backend.models import CreateTempFileRequest, CreateZipRequest
from translator_backend.services import create_temp_file, create_zip_file, get_temp_dir


router = APIRouter()


@router.post("/api/zip")
def create_zip(req: CreateZipRequest):
    try:
        create_zip_file([(f.source_path, f.entry_name) for f in req.files], req.zip_path)
    except FileIoError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "zip_path": req.zip_path}


@router.post("/api/temp-file")
def create_temp(req: CreateTempFileRequest):
    try:
        path = create_temp_file(req.name, req.content_bytes())
    except FileIoError as e:
        raise to_http_exception(e) from e
    return {"status": "success", "path": path}


@router.get("/api/temp-dir")
def temp_dir():
    return {"path": get_temp_dir()}
