"""
Domino tiles and pip values.
"""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum


class Pip(IntEnum):
    """Pip count on one half of a tile."""

    BLANK = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6


MAX_PIP = Pip.SIX


class Orientation(Enum):
    """How a tile is drawn. Has no effect on legality."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Tile:
    """
    An immutable domino.

    `low` is the half facing left on the board and `high` the half facing
    right; the pair is kept in the order given, not sorted.
    """

    low: Pip
    high: Pip
    orientation: Orientation = Orientation.HORIZONTAL

    def __post_init__(self) -> None:
        # Accept plain ints and normalise them to Pip
        object.__setattr__(self, "low", Pip(self.low))
        object.__setattr__(self, "high", Pip(self.high))

    @property
    def pips(self) -> int:
        """Total pip count of the tile."""
        return int(self.low) + int(self.high)

    def is_double(self) -> bool:
        return self.low == self.high

    def can_connect(self, other: "Tile") -> bool:
        """Check if any half of this tile matches any half of `other`."""
        return (
            self.low == other.low
            or self.low == other.high
            or self.high == other.low
            or self.high == other.high
        )

    def flip(self) -> "Tile":
        """Return a new tile with its halves swapped."""
        return replace(self, low=self.high, high=self.low)

    def __str__(self) -> str:
        return f"[{int(self.low)}|{int(self.high)}]"
