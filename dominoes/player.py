"""
Player state and management.
"""

from typing import List

from dominoes.tiles import Tile


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, player_id: int, name: str):
        self.player_id = player_id
        self.name = name
        self.score = 0
        self.hand: List[Tile] = []

    def hand_pips(self) -> int:
        """Sum of pips over every tile still in hand."""
        return sum(tile.pips for tile in self.hand)

    def has_empty_hand(self) -> bool:
        return not self.hand

    def __repr__(self) -> str:
        return (
            f"PlayerState(id={self.player_id}, name='{self.name}', "
            f"score={self.score}, hand_size={len(self.hand)})"
        )


class Player:
    """
    Convenience wrapper for player information.
    This is primarily for the external API.
    """

    def __init__(self, player_id: int, name: str):
        self.player_id = player_id
        self.name = name

    def __repr__(self) -> str:
        return f"Player(id={self.player_id}, name='{self.name}')"
