"""Settings Manager - Handles API key, target language and panel preferences."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, set_key

from gtranslator.core.languages import DEFAULT_CUSTOM_LANGUAGE, DEFAULT_LANGUAGE_CODE

_TRUE_VALUES = {"1", "true", "yes", "on"}


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads everything from a .env file in the project root. Blank values are
    treated as unset.
    """

    API_KEY_VAR = "GEMINI_API_KEY"
    MODEL_VAR = "GEMINI_MODEL"
    TARGET_LANGUAGE_VAR = "GTRANSLATOR_TARGET_LANGUAGE"
    CUSTOM_LANGUAGE_VAR = "GTRANSLATOR_CUSTOM_LANGUAGE"
    AUTO_COPY_VAR = "GTRANSLATOR_AUTO_COPY"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=self.env_path)

    @property
    def env_path(self) -> Path:
        return self._project_root / ".env"

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get(self.API_KEY_VAR)

    def set_gemini_api_key(self, api_key: str) -> None:
        """Persist a new API key to the .env file."""
        self._set(self.API_KEY_VAR, api_key.strip())

    def get_model_name(self) -> Optional[str]:
        """Get the Gemini model override, or None to use the service default."""
        return self._get(self.MODEL_VAR)

    def get_target_language(self) -> str:
        """Get the selected target language code."""
        return self._get(self.TARGET_LANGUAGE_VAR) or DEFAULT_LANGUAGE_CODE

    def set_target_language(self, code: str) -> None:
        """Persist the selected target language code."""
        self._set(self.TARGET_LANGUAGE_VAR, code)

    def get_custom_language(self) -> str:
        """Get the language name used when the "custom" target is selected."""
        return self._get(self.CUSTOM_LANGUAGE_VAR) or DEFAULT_CUSTOM_LANGUAGE

    def is_auto_copy_enabled(self) -> bool:
        """True if translations should be copied to the clipboard automatically."""
        value = self._get(self.AUTO_COPY_VAR)
        return value is not None and value.lower() in _TRUE_VALUES

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self.env_path, override=True)

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _set(self, name: str, value: str) -> None:
        self.env_path.touch(exist_ok=True)
        set_key(str(self.env_path), name, value)
        os.environ[name] = value
