"""Pydantic models for the public game snapshot."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class PlayerView(BaseModel):
    player_id: int
    name: str
    score: int
    hand_size: int
    hand: Optional[List[str]] = None


class BoardView(BaseModel):
    tiles: List[str] = Field(default_factory=list)
    left_end: Optional[int] = None
    right_end: Optional[int] = None


class RoundSummary(BaseModel):
    winner_id: Optional[int] = None
    blocked: bool
    points: int
    pip_totals: Dict[int, int] = Field(default_factory=dict)
    hands: Dict[int, List[str]] = Field(default_factory=dict)


class GameSnapshot(BaseModel):
    round_number: int
    turn_number: int
    current_player_id: int
    round_leader_id: Optional[int] = None
    consecutive_passes: int
    round_over: bool
    game_over: bool
    winner_id: Optional[int] = None
    target_score: int
    board: BoardView
    boneyard_count: int
    players: List[PlayerView]
    last_round: Optional[RoundSummary] = None
