"""Configuration management for hookdispatch."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Registry settings, read from HOOKDISPATCH_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HOOKDISPATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_priority: int = Field(
        default=10, description="Priority used when add() is called without one"
    )
    log_level: str = "INFO"
    debug: bool = Field(
        default=False, description="Log at DEBUG regardless of log_level"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get application settings singleton (cached)."""
    return Settings()
