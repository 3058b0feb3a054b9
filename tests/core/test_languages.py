"""Tests for the target language table."""

from gtranslator.core import LANGUAGES, get_language_name, resolve_target_language


def test_language_table_contains_selector_entries():
    assert list(LANGUAGES) == ["it", "en", "es", "fr", "de", "pt", "zh", "ja", "ru", "ar"]
    assert LANGUAGES["it"] == "Italiano"


def test_get_language_name_unknown_returns_none():
    assert get_language_name("xx") is None


def test_resolve_known_language():
    assert resolve_target_language("ja") == ("日本語 (Japanese)", "ja")


def test_resolve_unknown_language_falls_back_to_english():
    assert resolve_target_language("klingon") == ("English", "en")


def test_resolve_custom_language():
    assert resolve_target_language("custom", "  Finnish ") == ("Finnish", "finnish")


def test_resolve_custom_language_without_name():
    assert resolve_target_language("custom", "   ") == ("hungarian", "hungarian")
    assert resolve_target_language("custom") == ("hungarian", "hungarian")
