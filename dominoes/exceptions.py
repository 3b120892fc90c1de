"""
Custom exception hierarchy for the dominoes engine.

Provides typed errors that callers (UI layers, agents, tests) can
handle consistently.
"""


class DominoError(Exception):
    """Base exception for all game-related errors."""


class EmptyPileError(DominoError):
    """A tile was drawn from an empty boneyard."""


class IllegalPlacementError(DominoError):
    """Tile does not match the open end it was placed against."""


class EmptyBoardEndError(DominoError):
    """An open end was queried on an empty board."""


class InvalidActionError(DominoError):
    """Action is not legal in the current state."""


class ConfigurationError(DominoError):
    """Game was set up with an unusable roster or configuration."""
