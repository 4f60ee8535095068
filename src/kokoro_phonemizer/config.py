"""kokoro-phonemizer configuration.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kokoro_phonemizer.phonemizer.languages import Voice


class AudioSessionSettings(BaseSettings):
    """Audio session lifecycle settings."""

    model_config = SettingsConfigDict(env_prefix="AUDIO_SESSION_")

    # Disabled unless a playback backend is wired in
    enabled: bool = False
    category: str = "playback"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="KOKORO_PHONEMIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # API Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Phonemizer
    default_voice: str = Voice.AF_HEART.value
    max_text_length: int = Field(default=5000, ge=1)

    # Nested settings
    audio_session: AudioSessionSettings = Field(default_factory=AudioSessionSettings)

    @field_validator("default_voice")
    @classmethod
    def check_voice(cls, v: str) -> str:
        """Reject voice tags with no language."""
        try:
            Voice(v)
        except ValueError:
            raise ValueError(f"Unknown voice: {v}") from None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload from the environment.
    """
    return Settings()
