"""
The line of play.
"""

from collections import deque
from enum import Enum
from typing import Deque, Optional, Tuple

from dominoes.exceptions import EmptyBoardEndError, IllegalPlacementError
from dominoes.tiles import Pip, Tile


class BoardSide(Enum):
    """End of the line a tile is played against."""

    LEFT = "left"
    RIGHT = "right"


class Board:
    """
    A single non-branching line of tiles with two open ends.

    Every tile on the board is stored oriented so that its `high` half
    touches the `low` half of the tile to its right. The left open end is
    therefore the first tile's `low` and the right open end the last tile's
    `high`.
    """

    def __init__(self):
        self._tiles: Deque[Tile] = deque()

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        """Placed tiles from left to right."""
        return tuple(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    @property
    def left_end(self) -> Pip:
        if not self._tiles:
            raise EmptyBoardEndError("Board is empty, it has no left end")
        return self._tiles[0].low

    @property
    def right_end(self) -> Pip:
        if not self._tiles:
            raise EmptyBoardEndError("Board is empty, it has no right end")
        return self._tiles[-1].high

    def can_place(self, tile: Tile, side: Optional[BoardSide] = None) -> bool:
        """
        Check if a tile can be played.

        Without `side` the tile may match either end. Any tile can be placed
        on an empty board. A side that is not a BoardSide never fits.
        """
        if side is not None and not isinstance(side, BoardSide):
            return False

        if self.is_empty():
            return True

        if side is None:
            return self.can_place(tile, BoardSide.LEFT) or self.can_place(tile, BoardSide.RIGHT)

        end = self.left_end if side == BoardSide.LEFT else self.right_end
        return tile.low == end or tile.high == end

    def place(self, tile: Tile, side: BoardSide) -> Tile:
        """
        Place a tile on the given side, flipping it if needed so the
        matching half faces inward.

        Returns:
            The tile as it now lies on the board.

        Raises:
            IllegalPlacementError: if the tile does not match that end.
        """
        if not self.can_place(tile, side):
            label = side.value if isinstance(side, BoardSide) else repr(side)
            raise IllegalPlacementError(f"{tile} cannot be placed on the {label} side")

        if self.is_empty():
            self._tiles.append(tile)
            return tile

        if side == BoardSide.LEFT:
            placed = tile if tile.high == self.left_end else tile.flip()
            self._tiles.appendleft(placed)
        else:
            placed = tile if tile.low == self.right_end else tile.flip()
            self._tiles.append(placed)

        return placed

    def reset(self) -> None:
        """Remove every tile from the board."""
        self._tiles.clear()

    def __len__(self) -> int:
        return len(self._tiles)

    def __str__(self) -> str:
        if not self._tiles:
            return "(empty)"
        return " ".join(str(t) for t in self._tiles)
