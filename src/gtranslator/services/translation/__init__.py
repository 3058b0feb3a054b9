"""Translation services - abstract interface and Gemini implementation."""

from gtranslator.services.translation.translation_service import (
    ErrorKind,
    TranslationResult,
    TranslationService,
)
from gtranslator.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "ErrorKind",
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
]
