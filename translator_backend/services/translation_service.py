"""
/**
 * @file translator_backend/services/translation_service.py
 * @description 文件名翻译服务：拆分文件名、检测语言、按需调用 Qwen 翻译并重新拼接。
 */
"""

from __future__ import annotations

from typing import Optional

from fastapi.concurrency import run_in_threadpool

from translator_backend.exceptions import LanguageDetectionFailed, TranslatorError
from translator_backend.services.language_detection_service import DetectionKind, LanguageDetector
from translator_backend.services.qwen_client_service import QwenClient
from translator_backend.utils import log_to_file, split_filename


def translate_text(
    text: str,
    detector: Optional[LanguageDetector] = None,
    client: Optional[QwenClient] = None,
) -> Optional[str]:
    """Return the English translation of text, or None when it is already English."""
    d = detector or LanguageDetector()
    log_to_file(f"Translating text: {text}")

    outcome = d.classify(text)
    if outcome.kind is DetectionKind.UNDETECTED:
        raise LanguageDetectionFailed(text)

    log_to_file(f"Detected language: {outcome.language.value}")
    if outcome.kind is DetectionKind.ALREADY_ENGLISH:
        return None

    c = client or QwenClient()
    return c.translate(text)


def translate_filename(
    filename: str,
    detector: Optional[LanguageDetector] = None,
    client: Optional[QwenClient] = None,
) -> str:
    log_to_file(f"Attempting to translate filename: {filename}")

    parts = split_filename(filename)
    if parts.extension is None:
        log_to_file(f"No extension found, name='{parts.stem}'")
    else:
        log_to_file(f"Split filename: name='{parts.stem}', ext='{parts.extension}'")

    # Nothing to translate in names like ".gitignore"
    if not parts.stem:
        log_to_file(f"Empty name, keeping: {filename}")
        return filename

    try:
        translated = translate_text(parts.stem, detector=detector, client=client)
    except TranslatorError as e:
        e.add_context(f"Translation error for '{parts.stem}'")
        log_to_file(e.message)
        raise

    if translated is None:
        log_to_file(f"Already English, keeping: {filename}")
        return filename

    result = parts.join(translated.replace(" ", "_"))
    log_to_file(f"Successfully translated to: {result}")
    return result


async def translate_filename_async(
    filename: str,
    detector: Optional[LanguageDetector] = None,
    client: Optional[QwenClient] = None,
) -> str:
    return await run_in_threadpool(translate_filename, filename, detector=detector, client=client)
