"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from the project .env before reading them below
project_dir = Path(__file__).parent.parent
load_dotenv(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Database =====
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./ratings.db")
    DATABASE_ECHO: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"
    USE_DB_REPOS: bool = os.getenv("USE_DB_REPOS", "true").lower() == "true"

    # ===== Validation Limits =====
    COMMENT_MAX_LENGTH: int = int(os.getenv("COMMENT_MAX_LENGTH", "512"))
    EXTRA_MAX_LENGTH: int = int(os.getenv("EXTRA_MAX_LENGTH", "512"))
    DEFAULT_EXTRA: str = "{}"

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache so settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
