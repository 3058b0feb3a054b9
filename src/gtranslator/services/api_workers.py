"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from gtranslator.core import ExtractionRequest, TranslationRequest
from gtranslator.services.clipboard_image_service import ClipboardImageError, ClipboardImageService
from gtranslator.services.translation import TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Runs one TranslationService.translate call on the Qt thread pool.

    The TranslationRequest is built on the GUI thread and handed over as is;
    the resulting TranslationResult comes back on `signals.result`.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            result = self.translation_service.translate(self.request)
            self.signals.result.emit(result)
        except Exception as e:
            # Services return failures as results; anything raised here is a bug
            self.signals.error.emit(f"Unexpected translation error: {e}")
        finally:
            self.signals.finished.emit()


class ExtractionWorker(QRunnable):
    """
    Reads the clipboard image and extracts its text, both off the GUI thread.

    The clipboard helper is an external process, so it runs here rather than
    in the coordinator. A helper failure is reported on `signals.error` with
    the helper's message; otherwise the extraction TranslationResult is
    emitted on `signals.result`.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        clipboard_image_service: ClipboardImageService,
        api_key: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.clipboard_image_service = clipboard_image_service
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            image_bytes = self.clipboard_image_service.read_image()
            request = ExtractionRequest(image_bytes=image_bytes, api_key=self.api_key)
            result = self.translation_service.extract_text(request)
            self.signals.result.emit(result)
        except ClipboardImageError as e:
            self.signals.error.emit(str(e))
        except Exception as e:
            self.signals.error.emit(f"Unexpected extraction error: {e}")
        finally:
            self.signals.finished.emit()
