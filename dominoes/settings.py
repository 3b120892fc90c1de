"""
Central engine configuration using pydantic-settings.

Environment variables (prefix: DOMINO_):
    DOMINO_TARGET_SCORE        - Score that ends the game (default: 50)
    DOMINO_HAND_SIZE           - Tiles dealt to each player (default: 7)
    DOMINO_SEED                - Optional RNG seed for reproducible games
    DOMINO_MAX_INVALID_CHOICES - Illegal proposals tolerated per turn (default: 10)
    DOMINO_LOG_LEVEL           - Level for the `dominoes` logger (default: INFO)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Defaults for new games, loaded from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="DOMINO_",
    )

    target_score: int = Field(default=50, ge=1, description="Cumulative score that ends the game.")
    hand_size: int = Field(default=7, ge=1, le=28, description="Tiles dealt to each player per round.")
    seed: Optional[int] = Field(default=None, description="Seed for shuffling and leader selection.")
    max_invalid_choices: int = Field(default=10, ge=1)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> EngineSettings:
    """Return cached engine settings."""
    return EngineSettings()


def configure_logging(settings: Optional[EngineSettings] = None) -> None:
    """Apply the configured level to the engine's loggers."""
    settings = settings or get_settings()
    logging.getLogger("dominoes").setLevel(settings.log_level)
