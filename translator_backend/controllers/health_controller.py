"""
/**
 * @file translator_backend/controllers/health_controller.py
 * @description 健康检查控制器。
 */
"""

import os

from fastapi import APIRouter

from translator_backend.config import load_settings
from translator_backend.services import get_temp_dir


router = APIRouter()


@router.get("/health")
def health():
    settings = load_settings()

    api_keys_status = {
        "qwen": bool(settings.resolve_qwen_key()),
    }

    temp_dir = get_temp_dir()
    fs_status = {
        "temp_dir_exists": os.path.isdir(temp_dir),
        "temp_dir_writable": os.access(temp_dir, os.W_OK) if os.path.isdir(temp_dir) else False,
    }

    is_healthy = all(api_keys_status.values()) and all(fs_status.values())

    return {
        "status": "ok" if is_healthy else "degraded",
        "checks": {
            "api_keys": api_keys_status,
            "filesystem": fs_status,
        },
    }
