"""Translation Service - Abstract interface and result type for provider calls."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gtranslator.core import ExtractionRequest, TranslationRequest


class ErrorKind(Enum):
    """Why a translation or extraction request failed."""

    EMPTY_INPUT = "empty_input"
    MISSING_CREDENTIAL = "missing_credential"
    PROVIDER_ERROR = "provider_error"
    MALFORMED_RESPONSE = "malformed_response"
    NO_TEXT_FOUND = "no_text_found"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass
class TranslationResult:
    """Result of a translation or extraction request."""

    text: str
    model: str
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @property
    def is_error(self) -> bool:
        """True if the request failed."""
        return self.error_kind is not None

    @property
    def display_message(self) -> str:
        """Message shown inline by the panel for a failed request."""
        if not self.is_error:
            return ""
        if self.error_kind is ErrorKind.PROVIDER_ERROR:
            if self.error:
                return f"API Error: {self.error} ({self.status_code})"
            return f"API call error ({self.status_code})"
        return self.error or "Unknown error"

    @classmethod
    def success(cls, text: str, model: str) -> "TranslationResult":
        return cls(text=text, model=model)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: Optional[str],
        model: str = "",
        status_code: Optional[int] = None,
    ) -> "TranslationResult":
        return cls(text="", model=model, error=message, error_kind=kind, status_code=status_code)


class TranslationService(ABC):
    """
    Abstract service for translating text and extracting text from images.

    Implementations (e.g., GeminiTranslationService) handle API calls and
    never raise for expected failures; they return a failed TranslationResult.
    """

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text into the requested target language.

        Args:
            request: Source text, optional context, target language and API key.

        Returns:
            TranslationResult with translated text or error details.
        """
        pass

    @abstractmethod
    def extract_text(self, request: ExtractionRequest) -> TranslationResult:
        """
        Extract the text contained in an image.

        Args:
            request: Image bytes and API key.

        Returns:
            TranslationResult with extracted text or error details.
        """
        pass
