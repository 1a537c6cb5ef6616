"""
Inquiry Interview - Configuration Management.

Uses pydantic-settings for environment variable loading with validation.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Text Generation Collaborator
    # -------------------------------------------------------------------------
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.3
    GEMINI_MAX_OUTPUT_TOKENS: int = 150
    RENDER_TIMEOUT_SECONDS: float = 5.0

    # -------------------------------------------------------------------------
    # Phase Transition Thresholds (empirically tuned)
    # -------------------------------------------------------------------------
    EXPLORATION_MIN_TURNS: int = 7
    EXPLORATION_SATISFACTION_RATIO: float = 0.9
    DEFAULT_SATISFACTION_RATIO: float = 0.8
    EXPLORATION_CORE_ELEMENTS_REQUIRED: int = 3

    # -------------------------------------------------------------------------
    # Question Catalog
    # -------------------------------------------------------------------------
    CATALOG_PATH: str = ""  # JSON override; empty means the bundled catalog

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    DEBUG_MODE: bool = False
    TURN_RATE_LIMIT: str = "60/hour"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging() -> None:
    """Configure application logging based on settings."""
    settings = get_settings()

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG_MODE else getattr(logging, settings.LOG_LEVEL),
        format=log_format,
        datefmt=date_format,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)
