"""Tests for TranslationResult rendering."""

from gtranslator.services import ErrorKind, TranslationResult


class TestTranslationResult:

    def test_success_is_not_error(self):
        result = TranslationResult.success("Ciao", "gemini-test")
        assert not result.is_error
        assert result.display_message == ""

    def test_provider_error_with_message(self):
        result = TranslationResult.failure(ErrorKind.PROVIDER_ERROR, "Bad key", status_code=403)
        assert result.is_error
        assert result.display_message == "API Error: Bad key (403)"

    def test_provider_error_without_message_shows_status(self):
        result = TranslationResult.failure(ErrorKind.PROVIDER_ERROR, None, status_code=500)
        assert result.display_message == "API call error (500)"

    def test_other_failures_use_message(self):
        result = TranslationResult.failure(ErrorKind.MALFORMED_RESPONSE, "Invalid API response.")
        assert result.display_message == "Invalid API response."
