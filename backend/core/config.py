"""
Centralized configuration for the Menu Match backend.

All environment variables and settings should be defined here
to avoid duplication across modules.
"""
import os
from functools import lru_cache
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]


def _split_paths(value: str) -> list:
    return [p.strip() for p in value.split(",") if p.strip()]


class Settings:
    """Application settings loaded from environment variables."""

    # CORS - comma-separated list of allowed origins
    ALLOWED_ORIGINS: list = os.environ.get(
        "ALLOWED_ORIGINS",
        "http://localhost:8090,http://localhost:5173,http://127.0.0.1:8090"
    ).split(",")

    # Catalog files, comma-separated, loaded in order
    DATA_PATHS: list = _split_paths(
        os.environ.get("MENU_MATCH_DATA_PATHS", str(ROOT_DIR / "data" / "restaurant_data.csv"))
    )

    # Ingestion config (JSON); empty means the package default
    CONFIG_PATH: str = os.environ.get("MENU_MATCH_CONFIG_PATH", "")

    # API key for protecting the reload endpoint (optional)
    API_KEY: str = os.environ.get("MENU_MATCH_API_KEY", "")

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for easy import
settings = get_settings()
