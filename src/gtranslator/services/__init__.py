"""Services layer - business logic and external integrations."""

from gtranslator.services.settings_manager import SettingsManager
from gtranslator.services.clipboard_image_service import ClipboardImageError, ClipboardImageService

# Translation services
from gtranslator.services.translation import (
	ErrorKind,
	GeminiTranslationService,
	TranslationResult,
	TranslationService,
)

from gtranslator.services.api_workers import ExtractionWorker, TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"ClipboardImageError",
	"ClipboardImageService",
	"ErrorKind",
	"TranslationService",
	"TranslationResult",
	"GeminiTranslationService",
	"TranslationWorker",
	"ExtractionWorker",
	"WorkerSignals",
]
