"""
/**
 * @file translator_backend/services/qwen_client_service.py
 * @description DashScope Qwen 调用封装：单次翻译请求与响应解析。
 */
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from translator_backend.config import Settings, load_settings
from translator_backend.exceptions import MissingCredential, NetworkError, RemoteApiError, ResponseParseError
from translator_backend.models import QwenErrorResponse, QwenResponse
from translator_backend.utils import log_to_file


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a translator. Translate the following text to English. "
    "Only respond with the translation, no explanations or additional text."
)


class QwenClient:
    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self._initial_settings = settings
        self._session = session

    @property
    def settings(self) -> Settings:
        return self._initial_settings or load_settings()

    @property
    def qwen_api_key(self) -> Optional[str]:
        return self.settings.resolve_qwen_key()

    def _get_headers(self, api_key: Optional[str] = None) -> Dict[str, str]:
        key = api_key or self.qwen_api_key
        if not key:
            log_to_file("Failed to get QWEN_API_KEY in translate_text")
            raise MissingCredential()
        return {"Authorization": f"Bearer {key}", "Content-Type": "application/json"}

    def build_payload(self, text: str, model: Optional[str] = None) -> Dict[str, Any]:
        return {
            "model": model or self.settings.qwen_model,
            "input": {
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ]
            },
        }

    def translate(self, text: str, api_key: Optional[str] = None, model: Optional[str] = None) -> str:
        """
        Translate text to English with a single request.

        Raises MissingCredential before any network attempt when no key is configured,
        NetworkError on transport failures, RemoteApiError when DashScope reports an
        error code and ResponseParseError when the body matches neither shape.
        """
        headers = self._get_headers(api_key)
        payload = self.build_payload(text, model=model)
        poster = self._session.post if self._session is not None else requests.post
        try:
            response = poster(self.settings.qwen_endpoint, headers=headers, json=payload)
        except requests.RequestException as e:
            raise NetworkError(f"Request to Qwen failed: {e}") from e

        raw_body = response.text
        return self.parse_response(raw_body, response.status_code)

    def parse_response(self, raw_body: str, status_code: int = 200) -> str:
        try:
            data = json.loads(raw_body)
        except ValueError as e:
            if not 200 <= status_code < 300:
                raise NetworkError(f"HTTP {status_code} from Qwen", status_code=status_code) from e
            self._report_unparsed(raw_body)
            raise ResponseParseError(str(e), raw_body) from e

        if isinstance(data, dict) and "output" in data:
            try:
                parsed = QwenResponse.model_validate(data)
            except ValidationError as e:
                self._report_unparsed(raw_body)
                raise ResponseParseError(str(e), raw_body) from e
            if not parsed.is_success:
                raise RemoteApiError(parsed.code or "", parsed.message or "", status_code=status_code)
            return parsed.output.text.strip()

        if isinstance(data, dict) and "code" in data:
            try:
                error = QwenErrorResponse.model_validate(data)
            except ValidationError as e:
                self._report_unparsed(raw_body)
                raise ResponseParseError(str(e), raw_body) from e
            # a success code without output is neither shape
            if error.code in ("", "200"):
                self._report_unparsed(raw_body)
                raise ResponseParseError("unexpected response shape", raw_body)
            raise RemoteApiError(error.code, error.message, status_code=status_code)

        if not 200 <= status_code < 300:
            raise NetworkError(f"HTTP {status_code} from Qwen", status_code=status_code)

        self._report_unparsed(raw_body)
        raise ResponseParseError("unexpected response shape", raw_body)

    @staticmethod
    def _report_unparsed(raw_body: str) -> None:
        logger.error(f"Response text: {raw_body}")
        log_to_file(f"Response text: {raw_body}")
