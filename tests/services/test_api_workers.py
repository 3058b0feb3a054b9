"""Unit tests for the background API workers."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QCoreApplication

from gtranslator.core import ExtractionRequest, TranslationRequest
from gtranslator.services import ClipboardImageError, ExtractionWorker, TranslationResult, TranslationWorker


@pytest.fixture(scope="module", autouse=True)
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def translation_request():
    return TranslationRequest(
        source_text="Hello",
        target_language_name="Italiano",
        target_language_code="it",
        api_key="test-key",
    )


class TestTranslationWorker:

    def test_emits_result_then_finished(self, translation_request):
        service = MagicMock()
        service.translate.return_value = TranslationResult.success("Ciao", "gemini-test")
        worker = TranslationWorker(translation_service=service, request=translation_request)

        events = []
        worker.signals.result.connect(lambda result: events.append(("result", result.text)))
        worker.signals.finished.connect(lambda: events.append(("finished", None)))

        worker.run()

        service.translate.assert_called_once_with(translation_request)
        assert events == [("result", "Ciao"), ("finished", None)]

    def test_unexpected_exception_emits_error(self, translation_request):
        service = MagicMock()
        service.translate.side_effect = RuntimeError("boom")
        worker = TranslationWorker(translation_service=service, request=translation_request)

        error_spy = MagicMock()
        finished_spy = MagicMock()
        worker.signals.error.connect(error_spy)
        worker.signals.finished.connect(finished_spy)

        worker.run()

        error_spy.assert_called_once_with("Unexpected translation error: boom")
        finished_spy.assert_called_once()


@pytest.fixture
def clipboard_service():
    service = MagicMock()
    service.read_image.return_value = b"png"
    return service


class TestExtractionWorker:

    def test_reads_clipboard_then_emits_result(self, clipboard_service):
        service = MagicMock()
        service.extract_text.return_value = TranslationResult.success("STOP", "gemini-test")
        worker = ExtractionWorker(
            translation_service=service, clipboard_image_service=clipboard_service, api_key="test-key"
        )

        result_spy = MagicMock()
        worker.signals.result.connect(result_spy)

        worker.run()

        clipboard_service.read_image.assert_called_once()
        service.extract_text.assert_called_once_with(ExtractionRequest(image_bytes=b"png", api_key="test-key"))
        assert result_spy.call_args.args[0].text == "STOP"

    def test_clipboard_error_emits_helper_message(self, clipboard_service):
        service = MagicMock()
        clipboard_service.read_image.side_effect = ClipboardImageError("No image found in clipboard")
        worker = ExtractionWorker(
            translation_service=service, clipboard_image_service=clipboard_service, api_key="k"
        )

        error_spy = MagicMock()
        finished_spy = MagicMock()
        worker.signals.error.connect(error_spy)
        worker.signals.finished.connect(finished_spy)

        worker.run()

        error_spy.assert_called_once_with("No image found in clipboard")
        finished_spy.assert_called_once()
        service.extract_text.assert_not_called()

    def test_unexpected_exception_emits_error(self, clipboard_service):
        service = MagicMock()
        service.extract_text.side_effect = OSError("disk")
        worker = ExtractionWorker(
            translation_service=service, clipboard_image_service=clipboard_service, api_key="k"
        )

        error_spy = MagicMock()
        worker.signals.error.connect(error_spy)

        worker.run()

        error_spy.assert_called_once_with("Unexpected extraction error: disk")
