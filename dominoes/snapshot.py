"""
Public snapshot serialization of GameState.

Produces a sanitized, UI-friendly view of the current game without
exposing hidden information (boneyard order, and by default other
players' hands).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from dominoes.game import GameState
from dominoes.schemas import BoardView, GameSnapshot, PlayerView, RoundSummary


def serialize_snapshot(game: GameState, reveal_hands: bool = False) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict.

    The snapshot includes:
    - round and turn counters, current player and round leader
    - board tiles left to right with both open ends
    - boneyard size only
    - players with score and hand size (tiles only when `reveal_hands`)
    - the summary of the round that just ended, if any
    """
    players: List[PlayerView] = []
    for pstate in game.players_in_order():
        players.append(
            PlayerView(
                player_id=pstate.player_id,
                name=pstate.name,
                score=pstate.score,
                hand_size=len(pstate.hand),
                hand=[str(t) for t in pstate.hand] if reveal_hands else None,
            )
        )

    board = BoardView(tiles=[str(t) for t in game.board.tiles])
    if not game.board.is_empty():
        board.left_end = int(game.board.left_end)
        board.right_end = int(game.board.right_end)

    last_round: Optional[RoundSummary] = None
    if game.last_round is not None:
        r = game.last_round
        last_round = RoundSummary(
            winner_id=r.winner_id,
            blocked=r.blocked,
            points=r.points,
            pip_totals=dict(r.pip_totals),
            hands={pid: [str(t) for t in tiles] for pid, tiles in r.hands.items()},
        )

    leader_id = None
    if game.round_leader_index >= 0:
        leader_id = game.player_order[game.round_leader_index]

    snapshot = GameSnapshot(
        round_number=game.round_number,
        turn_number=game.turn_number,
        current_player_id=game.get_current_player().player_id,
        round_leader_id=leader_id,
        consecutive_passes=game.consecutive_passes,
        round_over=game.round_over,
        game_over=game.game_over,
        winner_id=game.winner,
        target_score=game.config.target_score,
        board=board,
        boneyard_count=len(game.boneyard),
        players=players,
        last_round=last_round,
    )

    return snapshot.model_dump()
