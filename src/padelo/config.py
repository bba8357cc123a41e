"""
Configuration management for Padelo.

Uses Pydantic Settings to load configuration from environment variables
with sensible defaults for development. Values can also be set in a .env
file in the working directory.

Rating parameters themselves live in padelo.elo.params.RatingParams; the
settings only point at an optional overrides file.

Usage:
    from padelo.config import settings
    print(settings.data_path)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file
    in the project root directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Input Configuration
    # ==========================================================================

    data_path: str = Field(
        default="data.json",
        description="Path to the JSON tournament dataset",
    )
    params_path: Optional[str] = Field(
        default=None,
        description="Optional JSON file with rating parameter overrides",
    )

    # ==========================================================================
    # Output Configuration
    # ==========================================================================

    leaderboard_top: int = Field(
        default=20,
        ge=1,
        description="Rows shown by default when printing the leaderboard",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once per process.
    """
    return Settings()


# Convenience alias for importing
settings = get_settings()
