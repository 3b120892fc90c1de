"""
Full-set generation and the draw pile (boneyard).
"""

import random
from typing import Iterable, List

from dominoes.exceptions import EmptyPileError
from dominoes.tiles import MAX_PIP, Tile


def generate_full_set(max_pip: int = MAX_PIP) -> List[Tile]:
    """
    Create every unordered pip pair exactly once.

    Tiles come out in a fixed order: (0,0), (0,1) ... (0,6), (1,1) ... (6,6).
    A double-six set has 28 tiles.
    """
    return [Tile(i, j) for i in range(max_pip + 1) for j in range(i, max_pip + 1)]


class Boneyard:
    """A shuffled pile of undealt tiles that can be drawn from the front."""

    def __init__(self, tiles: Iterable[Tile], rng: random.Random):
        self._tiles: List[Tile] = list(tiles)
        self.rng = rng
        self.shuffle()

    @property
    def tiles(self) -> List[Tile]:
        """Copy of the remaining tiles, front first."""
        return self._tiles.copy()

    def shuffle(self) -> None:
        """Shuffle the remaining tiles."""
        self.rng.shuffle(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def draw(self) -> Tile:
        """
        Remove and return the tile at the front of the pile.

        Raises:
            EmptyPileError: if no tiles remain. The pile is left untouched.
        """
        if not self._tiles:
            raise EmptyPileError("Boneyard is empty")
        return self._tiles.pop(0)

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self) -> str:
        return f"Boneyard(remaining={len(self._tiles)})"
