"""Translation Coordinator - Manages the translate / translate-from-clipboard workflow and panel state."""

import logging

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from gtranslator.core import (
    CUSTOM_LANGUAGE_CODE,
    LANGUAGES,
    TranslationRequest,
    resolve_target_language,
)
from gtranslator.services import (
    ClipboardImageService,
    ExtractionWorker,
    SettingsManager,
    TranslationResult,
    TranslationService,
    TranslationWorker,
)

logger = logging.getLogger(__name__)


class TranslationCoordinator(QObject):
    """
    Orchestrates the panel's translation workflow.

    Responsibilities:
    - Gate re-entrancy with a single busy flag (one outstanding request).
    - Validate input and API key before any network call.
    - Run extraction then translation for clipboard images.
    - Report results, loading state and errors through signals.
    """

    TRANSLATING_MESSAGE = "Translation in progress..."
    EXTRACTING_MESSAGE = "Extracting text from image..."
    EMPTY_INPUT_MESSAGE = "Enter text to translate"
    MISSING_KEY_MESSAGE = "API key not configured. Add GEMINI_API_KEY to .env file."

    loading_changed = Signal(bool, str)
    source_text_changed = Signal(str)
    translation_completed = Signal(str)
    copy_requested = Signal(str)
    error_shown = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        settings_manager: SettingsManager,
        clipboard_image_service: ClipboardImageService,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.settings_manager = settings_manager
        self.clipboard_image_service = clipboard_image_service

        self.thread_pool = QThreadPool.globalInstance()

        self._busy = False
        self._pending_context = ""

        # Keep a reference to the running worker until it reports back
        self._active_worker = None

    @property
    def is_busy(self) -> bool:
        return self._busy

    def actions_enabled(self) -> bool:
        """Return True if the translate buttons should accept clicks."""
        return not self._busy

    def request_translation(self, text: str, context: str = "") -> bool:
        """
        Translate text typed or pasted into the panel.

        Returns:
            True if a request was started.
        """
        if self._busy:
            logger.debug("Ignoring translation request while busy")
            return False

        if not text or not text.strip():
            self._show_error(self.EMPTY_INPUT_MESSAGE)
            return False

        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            self._show_error(self.MISSING_KEY_MESSAGE)
            return False

        self._set_loading(True, self.TRANSLATING_MESSAGE)
        self._start_translation(text, context, api_key)
        return True

    def request_clipboard_translation(self, clipboard_text: str = "", context: str = "") -> bool:
        """
        Translate the clipboard content: its text if any, otherwise its image.

        Args:
            clipboard_text: Text currently on the clipboard (may be empty).
            context: Optional context hint entered by the user.

        Returns:
            True if a request was started.
        """
        if self._busy:
            logger.debug("Ignoring clipboard request while busy")
            return False

        if clipboard_text:
            self.source_text_changed.emit(clipboard_text)
            return self.request_translation(clipboard_text, context)

        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            self._show_error(self.MISSING_KEY_MESSAGE)
            return False

        self._pending_context = context or ""
        self._set_loading(True, self.EXTRACTING_MESSAGE)

        # The helper script runs inside the worker, never on the GUI thread
        worker = ExtractionWorker(
            translation_service=self.translation_service,
            clipboard_image_service=self.clipboard_image_service,
            api_key=api_key,
        )
        worker.signals.result.connect(self._handle_extraction_result)
        worker.signals.error.connect(self._handle_worker_error)
        self._active_worker = worker
        self.thread_pool.start(worker)
        return True

    def set_target_language(self, code: str) -> None:
        """Persist the target language chosen in the selector."""
        if code not in LANGUAGES and code != CUSTOM_LANGUAGE_CODE:
            raise ValueError(f"Unknown language code: {code}")
        self.settings_manager.set_target_language(code)

    def target_language_name(self) -> str:
        """Label of the current target language."""
        name, _ = resolve_target_language(
            self.settings_manager.get_target_language(),
            self.settings_manager.get_custom_language(),
        )
        return name

    def _start_translation(self, text: str, context: str, api_key: str) -> None:
        name, code = resolve_target_language(
            self.settings_manager.get_target_language(),
            self.settings_manager.get_custom_language(),
        )
        request = TranslationRequest(
            source_text=text,
            context=context,
            target_language_name=name,
            target_language_code=code,
            api_key=api_key,
        )

        worker = TranslationWorker(translation_service=self.translation_service, request=request)
        worker.signals.result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_worker_error)
        self._active_worker = worker
        self.thread_pool.start(worker)

    @Slot(object)
    def _handle_extraction_result(self, result: TranslationResult) -> None:
        """Continue with translation of the extracted text (runs in main thread)."""
        if result.is_error:
            self._finish_with_error(result.display_message)
            return

        self.source_text_changed.emit(result.text)

        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            self._finish_with_error(self.MISSING_KEY_MESSAGE)
            return

        self.loading_changed.emit(True, self.TRANSLATING_MESSAGE)
        self._start_translation(result.text, self._pending_context, api_key)

    @Slot(object)
    def _handle_translation_result(self, result: TranslationResult) -> None:
        """Handle translation result from worker thread (runs in main thread)."""
        if result.is_error:
            self._finish_with_error(result.display_message)
            return

        self._finish()
        self.translation_completed.emit(result.text)

        if self.settings_manager.is_auto_copy_enabled():
            self.copy_requested.emit(result.text)

    @Slot(str)
    def _handle_worker_error(self, error: str) -> None:
        logger.warning("Worker failed: %s", error)
        self._finish_with_error(error)

    def _finish_with_error(self, message: str) -> None:
        self._finish()
        self._show_error(message)

    def _finish(self) -> None:
        self._active_worker = None
        self._pending_context = ""
        self._set_loading(False, "")

    def _set_loading(self, loading: bool, message: str) -> None:
        self._busy = loading
        self.loading_changed.emit(loading, message)

    def _show_error(self, message: str) -> None:
        self.error_shown.emit(f"Error: {message}")
