"""
Configuration management for talentmatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchingSettings(BaseSettings):
    """Scoring weights, thresholds and limits of the matching engine."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    # Skill scoring
    fuzzy_threshold: float = 0.7
    exact_weight: float = 1.0
    partial_weight: float = 0.6

    # Ranking
    min_skill_score: int = 20  # results at or below this are dropped
    max_recommendations: int = 15

    # Secondary scores
    available_score: int = 10
    other_availability_score: int = 5
    rate_within_budget_score: int = 10
    rate_below_floor_score: int = 5
    experience_bonus_per_entry: int = 2

    # Dashboard badges
    badge_high_threshold: int = 75
    badge_medium_threshold: int = 40

    @field_validator("fuzzy_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Similarity thresholds live in [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("fuzzy_threshold must be between 0 and 1")
        return v

    @field_validator("max_recommendations")
    @classmethod
    def validate_max_recommendations(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_recommendations must be non-negative")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path | None = None
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "talentmatch"
    version: str = "0.1.0"
    description: str = "Talent/posting matching engine"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
