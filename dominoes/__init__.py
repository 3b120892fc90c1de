"""
Dominoes Rules Engine

A deterministic, UI-agnostic implementation of block dominoes: tiles,
boneyard, a two-ended board, turn flow and scoring to a target.
"""

from .board import Board, BoardSide
from .boneyard import Boneyard, generate_full_set
from .config import GameConfig
from .game import ActionType, GameState, create_game
from .player import Player, PlayerState
from .tiles import Orientation, Pip, Tile

__all__ = [
    "Board",
    "BoardSide",
    "Boneyard",
    "generate_full_set",
    "GameConfig",
    "ActionType",
    "GameState",
    "create_game",
    "Player",
    "PlayerState",
    "Orientation",
    "Pip",
    "Tile",
]
