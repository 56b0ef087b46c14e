"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Heuristic pattern tables (experience extraction, skill classifiers)
    rules_path: Path = Field(
        default=Path("config/rules.yaml"),
        description="YAML file overriding the built-in rule tables",
    )

    # Recommender settings
    recommendation_limit: int = Field(default=10, description="Jobs returned per request")
    recommendation_min_score: int = Field(
        default=30, description="Jobs scoring at or below this are dropped"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
