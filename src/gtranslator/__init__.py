"""
GTranslator - A panel translation companion backed by Google Gemini.

This package provides:
- Text translation into a selectable target language, with optional context
- Text extraction from clipboard images
- A Qt coordinator that runs one request at a time off the UI thread
"""

__version__ = "0.1.0"

# Make key components available at package level
from gtranslator.core import ExtractionRequest, TranslationRequest
from gtranslator.services.translation import ErrorKind, GeminiTranslationService, TranslationResult

__all__ = [
    "TranslationRequest",
    "ExtractionRequest",
    "ErrorKind",
    "TranslationResult",
    "GeminiTranslationService",
]
