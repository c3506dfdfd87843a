"""
Application settings module.

This module provides configuration settings for the order processing
application. Values are read from the environment using the
``ORDER_PROCESSING_`` prefix, e.g. ``ORDER_PROCESSING_LOG_LEVEL=DEBUG``.
"""

# Standard Library Imports
import logging
from functools import lru_cache

# Third-Party Imports
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    model_config = SettingsConfigDict(
        env_prefix="ORDER_PROCESSING_",
        env_file=".env",
        extra="ignore",
    )

    # Project Information
    PROJECT_NAME: str = "Order Processing"

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Console behaviour
    PAUSE_ON_EXIT: bool = Field(
        default=True,
        description="Wait for Enter before the demo entry point exits",
    )
    CURRENCY: str = "UAH"  # display only

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    Cached so every caller shares one instance; call ``get_settings.cache_clear()``
    to pick up environment changes.

    Returns:
        The application settings instance
    """
    return Settings()


settings = get_settings()
