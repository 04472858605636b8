"""
/**
 * @file translator_backend/main.py
 * @description FastAPI 应用入口（仅装配路由与中间件，启动时记录配置状态）。
 */
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from translator_backend.config import CONFIG_LOCAL_PATH, CONFIG_PATH, ENV_PATH, load_settings, reload_settings
from translator_backend.controllers import files_router, health_router, translate_router
from translator_backend.utils import log_to_file, mask_secret

app = FastAPI()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ConfigEventHandler(FileSystemEventHandler):
    """Handler for config file changes"""

    def on_modified(self, event):
        if event.is_directory:
            return
        if event.src_path in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            reload_settings()


_observer = None


def log_startup_state() -> None:
    if load_dotenv(dotenv_path=ENV_PATH):
        log_to_file("Successfully loaded .env file")
    else:
        log_to_file(f"Failed to load .env file: {ENV_PATH} not found or empty")

    key = load_settings().resolve_qwen_key()
    if key:
        log_to_file(f"QWEN_API_KEY found: {mask_secret(key)}")
    else:
        log_to_file("Failed to read QWEN_API_KEY: not set")

    log_to_file("Application starting...")


@app.on_event("startup")
async def startup_event():
    global _observer
    log_startup_state()
    try:
        event_handler = ConfigEventHandler()
        _observer = Observer()
        config_dir = os.path.dirname(CONFIG_PATH)
        _observer.schedule(event_handler, config_dir, recursive=False)
        _observer.start()
        logger.info(f"Config watcher started on {config_dir}")
    except OSError as e:
        logger.error(f"Failed to start config watcher: {e}")
        _observer = None


@app.on_event("shutdown")
async def shutdown_event():
    global _observer
    if _observer:
        _observer.stop()
        _observer.join()
        _observer = None


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(translate_router)
app.include_router(files_router)
