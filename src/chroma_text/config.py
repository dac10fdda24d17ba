"""Configuration management for Chroma Text."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Markup settings
    escape_lead: str = Field(
        default="§",
        min_length=1,
        max_length=1,
        alias="CHROMA_TEXT_ESCAPE_LEAD",
    )
    gradients_enabled: bool = Field(
        default=True,
        alias="CHROMA_TEXT_GRADIENTS",
    )

    # Rendering settings
    approximate_colors: bool = Field(
        default=False,
        alias="CHROMA_TEXT_APPROXIMATE",
    )

    log_level: str = Field(
        default="WARNING",
        alias="CHROMA_TEXT_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
