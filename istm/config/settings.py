# istm/config/settings.py
"""
Settings for the localized error dictionary (pydantic-settings).

Environment variables with ISTM_ prefix.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DICT_PATH = str(Path(__file__).resolve().parent / "config.yaml")


class Settings(BaseSettings):
    """istm settings."""

    model_config = SettingsConfigDict(
        env_prefix="ISTM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Dictionary
    DICT_PATH: str = Field(default=DEFAULT_DICT_PATH, description="YAML dictionary file")
    LOCALE: str = Field(default="jp", description="Locale key selected at every leaf")

    def dict_path(self) -> Path:
        return Path(self.DICT_PATH)


# Singleton instance
settings = Settings()


__all__ = ["Settings", "settings", "DEFAULT_DICT_PATH"]
