"""smartcrop configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Output encoding
    JPEG_QUALITY: int = Field(default=90, ge=1, le=100)

    # Region search
    SCORING_WORKERS: int = Field(default=1, ge=1)  # 1 = sequential scoring


# Singleton instance for import convenience
settings = Settings()
