"""
/**
 * @file translator_backend/services/language_detection_service.py
 * @description 语言检测服务（lingua）：仅区分英语、中文、日语、韩语。
 */
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lingua import Language, LanguageDetector as LinguaDetector, LanguageDetectorBuilder


class DetectedLanguage(str, Enum):
    ENGLISH = "English"
    CHINESE = "Chinese"
    JAPANESE = "Japanese"
    KOREAN = "Korean"


class DetectionKind(str, Enum):
    ALREADY_ENGLISH = "already_english"
    NEEDS_TRANSLATION = "needs_translation"
    UNDETECTED = "undetected"


@dataclass(frozen=True)
class DetectionOutcome:
    kind: DetectionKind
    language: Optional[DetectedLanguage] = None

    @classmethod
    def from_language(cls, language: Optional[DetectedLanguage]) -> "DetectionOutcome":
        if language is None:
            return cls(kind=DetectionKind.UNDETECTED)
        if language is DetectedLanguage.ENGLISH:
            return cls(kind=DetectionKind.ALREADY_ENGLISH, language=language)
        return cls(kind=DetectionKind.NEEDS_TRANSLATION, language=language)


_LINGUA_TO_DETECTED = {
    Language.ENGLISH: DetectedLanguage.ENGLISH,
    Language.CHINESE: DetectedLanguage.CHINESE,
    Language.JAPANESE: DetectedLanguage.JAPANESE,
    Language.KOREAN: DetectedLanguage.KOREAN,
}


class LanguageDetector:
    """
    Classifies text into one of the four candidate languages.

    Building the lingua detector loads its language models, so it is built once
    on first use and shared by every caller.
    """

    _shared: Optional[LinguaDetector] = None
    _build_lock = threading.Lock()

    @classmethod
    def _lingua(cls) -> LinguaDetector:
        if cls._shared is None:
            with cls._build_lock:
                if cls._shared is None:
                    cls._shared = LanguageDetectorBuilder.from_languages(*_LINGUA_TO_DETECTED.keys()).build()
        return cls._shared

    def detect_language(self, text: str) -> Optional[DetectedLanguage]:
        language = self._lingua().detect_language_of(text)
        if language is None:
            return None
        return _LINGUA_TO_DETECTED.get(language)

    def classify(self, text: str) -> DetectionOutcome:
        return DetectionOutcome.from_language(self.detect_language(text))
