"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from dominoes.settings import EngineSettings


@dataclass
class GameConfig:
    """Configuration for a dominoes game."""

    target_score: int = 50
    hand_size: int = 7

    # Retries allowed to an agent that keeps proposing illegal moves
    max_invalid_choices: int = 10

    seed: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: "EngineSettings") -> "GameConfig":
        """Build a config from environment-backed settings."""
        return cls(
            target_score=settings.target_score,
            hand_size=settings.hand_size,
            max_invalid_choices=settings.max_invalid_choices,
            seed=settings.seed,
        )
