"""Domain layer - Pure entities describing translation requests and languages."""

from .languages import CUSTOM_LANGUAGE_CODE, LANGUAGES, get_language_name, resolve_target_language
from .translation_request import ExtractionRequest, TranslationRequest

__all__ = [
    "CUSTOM_LANGUAGE_CODE",
    "LANGUAGES",
    "get_language_name",
    "resolve_target_language",
    "TranslationRequest",
    "ExtractionRequest",
]
