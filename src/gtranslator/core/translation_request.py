"""Request entities handed to a TranslationService."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TranslationRequest:
    """A single text translation request."""

    source_text: str
    target_language_name: str
    target_language_code: str
    api_key: Optional[str]
    context: Optional[str] = None

    @property
    def has_context(self) -> bool:
        """True if a non-blank context hint was supplied."""
        return bool(self.context and self.context.strip())


@dataclass(frozen=True)
class ExtractionRequest:
    """Request to pull the text out of an image."""

    image_bytes: bytes
    api_key: Optional[str]
    mime_type: str = "image/png"
