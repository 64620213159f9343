"""Centralized settings for the ESG tracker.

Uses pydantic-settings to load from environment variables (prefixed
ESGTRACK_) with defaults suitable for local development.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """ESG tracker settings loaded from environment variables."""

    # --- Storage ---
    use_database: bool = False  # False selects the in-memory backend
    database_url: str = "sqlite:///esg_tracker.db"
    database_echo: bool = False
    seed_sample_data: bool = True

    # --- Gallery ---
    gallery_page_size: int = 6
    max_page_size: int = 100

    # --- Logging ---
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = {
        "env_prefix": "ESGTRACK_",
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
