"""
Round and game scoring.

Pure functions over player states; the controller decides when to call
them and logs the outcome.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from dominoes.player import PlayerState
from dominoes.tiles import Tile


@dataclass
class RoundResult:
    """Outcome of a finished round."""

    winner_id: Optional[int]
    blocked: bool
    points: int = 0
    pip_totals: Dict[int, int] = field(default_factory=dict)
    hands: Dict[int, Tuple[Tile, ...]] = field(default_factory=dict)

    @property
    def is_tie(self) -> bool:
        return self.winner_id is None


def pip_total(tiles: Iterable[Tile]) -> int:
    """Sum of pips over a collection of tiles."""
    return sum(tile.pips for tile in tiles)


def _round_record(players: Sequence[PlayerState]) -> Tuple[Dict[int, int], Dict[int, Tuple[Tile, ...]]]:
    totals = {p.player_id: pip_total(p.hand) for p in players}
    hands = {p.player_id: tuple(p.hand) for p in players}
    return totals, hands


def score_normal_win(winner: PlayerState, players: Sequence[PlayerState]) -> RoundResult:
    """
    Award the player who emptied their hand every opponent's remaining pips.
    """
    totals, hands = _round_record(players)
    points = sum(total for pid, total in totals.items() if pid != winner.player_id)
    winner.score += points
    return RoundResult(winner.player_id, blocked=False, points=points, pip_totals=totals, hands=hands)


def score_blocked(players: Sequence[PlayerState]) -> RoundResult:
    """
    Settle a round in which nobody could play.

    The player with the lowest pip total wins the opponents' pips minus their
    own. A tie for the lowest total leaves every score unchanged.
    """
    totals, hands = _round_record(players)
    lowest = min(totals.values())
    lowest_ids: List[int] = [pid for pid, total in totals.items() if total == lowest]

    if len(lowest_ids) > 1:
        return RoundResult(None, blocked=True, pip_totals=totals, hands=hands)

    winner_id = lowest_ids[0]
    others = sum(total for pid, total in totals.items() if pid != winner_id)
    points = others - totals[winner_id]

    for player in players:
        if player.player_id == winner_id:
            player.score += points
            break

    return RoundResult(winner_id, blocked=True, points=points, pip_totals=totals, hands=hands)


def find_game_winner(players: Sequence[PlayerState], target_score: int) -> Optional[PlayerState]:
    """Return the first player, in seating order, whose score reached the target."""
    for player in players:
        if player.score >= target_score:
            return player
    return None
