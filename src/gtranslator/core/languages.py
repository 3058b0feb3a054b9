"""Target languages offered by the panel selector."""

from typing import Dict, Optional, Tuple

LANGUAGES: Dict[str, str] = {
    "it": "Italiano",
    "en": "English",
    "es": "Español",
    "fr": "Français",
    "de": "Deutsch",
    "pt": "Português",
    "zh": "中文 (Chinese)",
    "ja": "日本語 (Japanese)",
    "ru": "Русский (Russian)",
    "ar": "العربية (Arabic)",
}

CUSTOM_LANGUAGE_CODE = "custom"
DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_CUSTOM_LANGUAGE = "hungarian"


def get_language_name(code: str) -> Optional[str]:
    """Return the display name for a language code, or None if unknown."""
    return LANGUAGES.get(code)


def resolve_target_language(code: str, custom_name: Optional[str] = None) -> Tuple[str, str]:
    """
    Resolve a selector code into the (name, code) pair embedded in the prompt.

    Args:
        code: Language code from settings (a LANGUAGES key or "custom").
        custom_name: Free-form language name used when code is "custom".

    Returns:
        Tuple of display name and language code. Unknown codes fall back to English.
    """
    if code == CUSTOM_LANGUAGE_CODE:
        name = (custom_name or "").strip() or DEFAULT_CUSTOM_LANGUAGE
        return name, name.lower()

    name = get_language_name(code)
    if name is None:
        return LANGUAGES[DEFAULT_LANGUAGE_CODE], DEFAULT_LANGUAGE_CODE
    return name, code
