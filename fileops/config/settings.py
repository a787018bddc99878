"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from fileops.exceptions import ConfigurationError

SUPPORTED_LANGUAGES = ("en", "ru")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_choice(
            "FILEOPS_LOG_LEVEL", "WARNING", _LOG_LEVELS, upper=True
        )
        self.language: str = self._get_choice(
            "FILEOPS_LANGUAGE", "en", SUPPORTED_LANGUAGES
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_choice(
        self, key: str, default: str, choices: tuple[str, ...], upper: bool = False
    ) -> str:
        """Get an environment variable restricted to a set of values."""
        value = self._get_env(key, default).strip()
        value = value.upper() if upper else value.lower()
        if value not in choices:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected one of {', '.join(choices)})"
            )
        return value

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return getattr(logging, self.log_level)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Load settings once, reading a .env file if present."""
    global _settings
    if _settings is None:
        _ = load_dotenv()
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings (useful for testing)."""
    global _settings
    _settings = None
