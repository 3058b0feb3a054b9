"""Gemini Translation Service - Implements translation and image text extraction via Google Gemini API."""

import logging
from typing import List, Optional

import google.genai as genai
import httpx
from google.genai import errors, types

from gtranslator.core import ExtractionRequest, TranslationRequest
from gtranslator.services.translation.translation_service import (
    ErrorKind,
    TranslationResult,
    TranslationService,
)

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Each call is a single best-effort generate_content request: no retries,
    no backoff and no cache. Expected failures come back as a failed
    TranslationResult instead of an exception.
    """

    MODEL_NAME = "gemini-2.0-flash"

    NO_TEXT_MARKER = "[NO_TEXT_FOUND]"

    TRANSLATION_PROMPT = (
        "Translate the following text into {language_name} (language code: {language_code}). "
        "Return only the translated text, without comments or explanations. "
        "Text to translate: '{text}'"
    )

    TRANSLATION_WITH_CONTEXT_PROMPT = (
        "Translate the following text into {language_name} (language code: {language_code}), "
        "considering the following context: '{context}'. "
        "Return only the translated text, without comments or explanations. "
        "Text to translate: '{text}'"
    )

    EXTRACTION_PROMPT = (
        "Extract all text content from this image. If no text is found, respond with an "
        "empty string or a specific marker like '[NO_TEXT_FOUND]'. Please return ONLY the "
        "text found in the image, without any additional comments or explanations."
    )

    TRANSLATION_CONFIG = dict(temperature=0.2, top_k=40, top_p=0.95, max_output_tokens=2048)
    EXTRACTION_CONFIG = dict(temperature=0.1, top_k=32, top_p=0.95, max_output_tokens=2048)

    def __init__(self, model_name: Optional[str] = None):
        self.model_name = model_name or self.MODEL_NAME

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text into the requested language using Gemini API.

        Args:
            request: Source text, optional context, target language and API key.

        Returns:
            TranslationResult with translated text or error details.
        """
        if not request.source_text or not request.source_text.strip():
            return self._failure(ErrorKind.EMPTY_INPUT, "Enter text to translate")

        if not request.api_key or not request.api_key.strip():
            return self._missing_credential()

        prompt = self.build_translation_prompt(request)
        logger.debug(
            "Translation request: model=%s target=%s chars=%d",
            self.model_name,
            request.target_language_code,
            len(request.source_text),
        )

        result = self._generate(
            api_key=request.api_key,
            parts=[types.Part(text=prompt)],
            config=types.GenerateContentConfig(**self.TRANSLATION_CONFIG),
        )
        if result.is_error:
            return result

        return TranslationResult.success(result.text.strip(), self.model_name)

    def extract_text(self, request: ExtractionRequest) -> TranslationResult:
        """
        Extract the text contained in an image using Gemini API.

        Args:
            request: Image bytes and API key.

        Returns:
            TranslationResult with extracted text, or NO_TEXT_FOUND when the
            model reports an image without text.
        """
        if not request.image_bytes:
            return self._failure(ErrorKind.EMPTY_INPUT, "No image to extract text from")

        if not request.api_key or not request.api_key.strip():
            return self._missing_credential()

        logger.debug(
            "Extraction request: model=%s mime=%s bytes=%d",
            self.model_name,
            request.mime_type,
            len(request.image_bytes),
        )

        result = self._generate(
            api_key=request.api_key,
            parts=[
                types.Part.from_bytes(data=request.image_bytes, mime_type=request.mime_type),
                types.Part(text=self.EXTRACTION_PROMPT),
            ],
            config=types.GenerateContentConfig(**self.EXTRACTION_CONFIG),
            malformed_message="Invalid API response during text extraction.",
        )
        if result.is_error:
            return result

        extracted = result.text.strip()
        if not extracted or extracted == self.NO_TEXT_MARKER:
            return self._failure(ErrorKind.NO_TEXT_FOUND, "No text found in image")

        return TranslationResult.success(extracted, self.model_name)

    def build_translation_prompt(self, request: TranslationRequest) -> str:
        """Build the natural-language instruction for a translation request."""
        if request.has_context:
            return self.TRANSLATION_WITH_CONTEXT_PROMPT.format(
                language_name=request.target_language_name,
                language_code=request.target_language_code,
                context=request.context.strip(),
                text=request.source_text.strip(),
            )
        return self.TRANSLATION_PROMPT.format(
            language_name=request.target_language_name,
            language_code=request.target_language_code,
            text=request.source_text.strip(),
        )

    def _generate(
        self,
        api_key: str,
        parts: List[types.Part],
        config: types.GenerateContentConfig,
        malformed_message: str = "Invalid API response.",
    ) -> TranslationResult:
        """Issue one generate_content call and pull out the first candidate's text."""
        try:
            client = genai.Client(api_key=api_key)
            response = client.models.generate_content(
                model=self.model_name,
                contents=[types.Content(role="user", parts=parts)],
                config=config,
            )
        except errors.APIError as e:
            message = self._provider_message(e)
            logger.warning("Gemini API error %s: %s", e.code, message or "<no message>")
            return self._failure(ErrorKind.PROVIDER_ERROR, message, status_code=e.code)
        except httpx.HTTPError as e:
            logger.warning("Gemini request failed: %s", e)
            return self._failure(
                ErrorKind.TRANSPORT_FAILURE, f"Request failed. Please check your connection. ({e})"
            )
        except ValueError as e:
            logger.warning("Unparseable Gemini response: %s", e)
            return self._failure(ErrorKind.MALFORMED_RESPONSE, f"Error parsing response: {e}")

        text = self._first_candidate_text(response)
        if text is None:
            return self._failure(ErrorKind.MALFORMED_RESPONSE, malformed_message)

        return TranslationResult.success(text, self.model_name)

    @staticmethod
    def _first_candidate_text(response) -> Optional[str]:
        """Return candidates[0].content.parts[0].text, or None if any step is missing."""
        candidates = getattr(response, "candidates", None)
        if not candidates:
            return None
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None)
        if not parts:
            return None
        text = getattr(parts[0], "text", None)
        return text if isinstance(text, str) else None

    @staticmethod
    def _provider_message(error: errors.APIError) -> Optional[str]:
        """Return error.message from a parseable {error: {message}} body."""
        details = getattr(error, "details", None)
        if isinstance(details, dict):
            body = details.get("error")
            if isinstance(body, dict) and body.get("message"):
                return body["message"]
        return None

    def _missing_credential(self) -> TranslationResult:
        return self._failure(
            ErrorKind.MISSING_CREDENTIAL,
            "API key not configured. Add GEMINI_API_KEY to .env file.",
        )

    def _failure(
        self, kind: ErrorKind, message: Optional[str], status_code: Optional[int] = None
    ) -> TranslationResult:
        return TranslationResult.failure(
            kind, message, model=self.model_name, status_code=status_code
        )
