"""Main entry point: wires settings, services and the translation coordinator."""

import logging
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication

from gtranslator.coordinators import TranslationCoordinator
from gtranslator.services import ClipboardImageService, GeminiTranslationService, SettingsManager


def create_coordinator(settings_manager: Optional[SettingsManager] = None) -> TranslationCoordinator:
    """
    Build the coordinator following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    if settings_manager is None:
        settings_manager = SettingsManager()

    translation_service = GeminiTranslationService(model_name=settings_manager.get_model_name())

    return TranslationCoordinator(
        translation_service=translation_service,
        settings_manager=settings_manager,
        clipboard_image_service=ClipboardImageService(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Translate the text given on the command line, or the clipboard image
    when no text is given, and print the result.
    """
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    coordinator = create_coordinator()

    def on_completed(text: str) -> None:
        print(text)
        app.exit(0)

    def on_error(message: str) -> None:
        print(message, file=sys.stderr)
        app.exit(1)

    coordinator.translation_completed.connect(on_completed)
    coordinator.error_shown.connect(on_error)

    text = " ".join(argv)
    started = (
        coordinator.request_translation(text)
        if text
        else coordinator.request_clipboard_translation("")
    )
    if not started:
        return 1

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
