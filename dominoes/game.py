"""
Main game engine and state management.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Tuple

from dominoes.board import Board, BoardSide
from dominoes.boneyard import Boneyard, generate_full_set
from dominoes.config import GameConfig
from dominoes.events import EventLog, EventType
from dominoes.exceptions import ConfigurationError, InvalidActionError
from dominoes.player import Player, PlayerState
from dominoes.scoring import RoundResult, find_game_winner, score_blocked, score_normal_win
from dominoes.tiles import Tile

logger = logging.getLogger(__name__)


class ActionType(Enum):
    """Types of actions a player can take."""

    PLAY_TILE = "play_tile"
    PASS = "pass"


class GameState:
    """
    Represents the complete state of a dominoes game.
    This is the main interface for the game engine.

    A game is a sequence of rounds. Each round starts with a fresh shuffled
    boneyard and a fresh deal; it ends when a player empties their hand or
    when every player has passed in a row. The game ends as soon as a
    player's cumulative score reaches `config.target_score`.
    """

    def __init__(self, config: GameConfig, players: List[Player], rng: Optional[random.Random] = None):
        _validate_setup(config, players)

        self.config = config
        self.board = Board()
        self.event_log = EventLog()

        # Injected RNG wins over the configured seed
        self.rng = rng if rng is not None else random.Random(config.seed)

        # Seating order is the roster order
        self.player_order: List[int] = [p.player_id for p in players]
        self.players: Dict[int, PlayerState] = {
            p.player_id: PlayerState(p.player_id, p.name) for p in players
        }

        # Filled at the start of each round
        self.boneyard = Boneyard([], self.rng)

        # Turn and round state
        self.current_player_index = 0
        self.round_leader_index = -1
        self.consecutive_passes = 0
        self.round_number = 0
        self.turn_number = 0
        self.round_over = False
        self.last_round: Optional[RoundResult] = None

        self.game_over = False
        self.winner: Optional[int] = None

        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in players],
            target_score=config.target_score,
            seed=config.seed,
        )

    # === QUERIES ===

    def get_current_player(self) -> PlayerState:
        """Get the player who must act."""
        return self.players[self.player_order[self.current_player_index]]

    def players_in_order(self) -> List[PlayerState]:
        """Get all players in seating order."""
        return [self.players[pid] for pid in self.player_order]

    def hand(self, player_id: int) -> Tuple[Tile, ...]:
        """Read-only view of a player's hand."""
        return tuple(self.players[player_id].hand)

    def playable_indexes(self, player_id: int) -> List[int]:
        """Indexes of the tiles in a player's hand that fit the board."""
        hand = self.players[player_id].hand
        return [i for i, tile in enumerate(hand) if self.board.can_place(tile)]

    def can_play(self, player_id: int) -> bool:
        """Check if a player holds at least one tile that can be placed."""
        return any(self.board.can_place(tile) for tile in self.players[player_id].hand)

    def legal_sides(self, player_id: int, index: int) -> List[BoardSide]:
        """
        Sides on which the tile at `index` may be played.

        On an empty board only LEFT is offered, since both sides are the
        same position.
        """
        hand = self.players[player_id].hand
        if not 0 <= index < len(hand):
            return []
        if self.board.is_empty():
            return [BoardSide.LEFT]
        return [side for side in BoardSide if self.board.can_place(hand[index], side)]

    # === ROUND SETUP ===

    def start_round(self) -> None:
        """
        Reset the table and deal a new round.

        Raises:
            InvalidActionError: if the game is already over.
            EmptyPileError: if the roster needs more tiles than the set has.
                Nothing about the game changes in that case.
        """
        if self.game_over:
            raise InvalidActionError("Cannot start a round, the game is over")

        boneyard = Boneyard(generate_full_set(), self.rng)
        hands = self._deal(boneyard)

        self.board.reset()
        self.boneyard = boneyard
        self.consecutive_passes = 0
        self.round_over = False
        self.last_round = None

        for pid, hand in hands.items():
            self.players[pid].hand = hand

        self._decide_leader()
        self.current_player_index = self.round_leader_index
        self.round_number += 1

        leader = self.get_current_player()
        logger.info(f"Round {self.round_number} started, {leader.name} leads")
        self.event_log.log(
            EventType.ROUND_START,
            player_id=leader.player_id,
            round=self.round_number,
        )
        self.event_log.log(
            EventType.DEAL,
            hand_size=self.config.hand_size,
            boneyard_remaining=len(self.boneyard),
        )

        self.event_log.log(
            EventType.TURN_START,
            player_id=leader.player_id,
            turn=self.turn_number,
        )

    def _decide_leader(self) -> None:
        """Random leader for the first round, then rotate."""
        if self.round_leader_index == -1:
            self.round_leader_index = self.rng.randrange(len(self.player_order))
        else:
            self.round_leader_index = (self.round_leader_index + 1) % len(self.player_order)

    def _deal(self, boneyard: Boneyard) -> Dict[int, List[Tile]]:
        """Deal one tile at a time, in seating order, until hands are full."""
        hands: Dict[int, List[Tile]] = {pid: [] for pid in self.player_order}
        for _ in range(self.config.hand_size):
            for pid in self.player_order:
                hands[pid].append(boneyard.draw())
        return hands

    # === TURN ACTIONS ===

    def play_tile(self, player_id: int, index: int, side: Optional[BoardSide] = None) -> bool:
        """
        Play the tile at `index` of the player's hand.

        When `side` is omitted it is inferred if only one side fits. The side
        may also be given as its string value ("left" / "right").

        Returns:
            True if the tile was placed, False if the move was not legal.
            A rejected move leaves the game untouched.
        """
        if not self._is_turn_of(player_id):
            return False

        if side is not None and not isinstance(side, BoardSide):
            if side not in [s.value for s in BoardSide]:
                return False
            side = BoardSide(side)

        player = self.players[player_id]
        if not isinstance(index, int) or not 0 <= index < len(player.hand):
            return False

        tile = player.hand[index]
        if side is None:
            sides = self.legal_sides(player_id, index)
            if len(sides) != 1:
                return False
            side = sides[0]
        elif not self.board.can_place(tile, side):
            return False

        placed = self.board.place(tile, side)
        del player.hand[index]
        self.consecutive_passes = 0

        logger.debug(f"{player.name} played {tile} on the {side.value} as {placed}")
        self.event_log.log(
            EventType.TILE_PLAYED,
            player_id=player_id,
            tile=str(tile),
            placed=str(placed),
            side=side.value,
            left_end=int(self.board.left_end),
            right_end=int(self.board.right_end),
        )

        self._finish_action()
        return True

    def pass_turn(self, player_id: int) -> bool:
        """
        Pass the turn. Only allowed when the player has no legal play.

        Passing never draws from the boneyard.
        """
        if not self._is_turn_of(player_id):
            return False
        if self.can_play(player_id):
            return False

        self.consecutive_passes += 1
        player = self.players[player_id]

        logger.debug(f"{player.name} cannot play and passes ({self.consecutive_passes} in a row)")
        self.event_log.log(
            EventType.PLAYER_PASSED,
            player_id=player_id,
            consecutive_passes=self.consecutive_passes,
        )

        self._finish_action()
        return True

    def _is_turn_of(self, player_id: int) -> bool:
        if self.round_over or self.game_over or self.round_number == 0:
            return False
        return self.get_current_player().player_id == player_id

    def _finish_action(self) -> None:
        self._check_round_end()
        if not self.round_over:
            self._advance_turn()

    def _advance_turn(self) -> None:
        """Hand the turn to the next player in seating order."""
        self.current_player_index = (self.current_player_index + 1) % len(self.player_order)
        self.turn_number += 1

        self.event_log.log(
            EventType.TURN_START,
            player_id=self.get_current_player().player_id,
            turn=self.turn_number,
        )

    # === ROUND AND GAME END ===

    def _check_round_end(self) -> None:
        ordered = self.players_in_order()

        for player in ordered:
            if player.has_empty_hand():
                self._end_round(score_normal_win(player, ordered))
                return

        if self.consecutive_passes >= len(ordered):
            self._end_round(score_blocked(ordered))

    def _end_round(self, result: RoundResult) -> None:
        self.round_over = True
        self.last_round = result

        if result.winner_id is None:
            logger.info(f"Round {self.round_number} blocked with a tie, no points awarded")
        else:
            winner = self.players[result.winner_id]
            kind = "blocked" if result.blocked else "domino"
            logger.info(f"Round {self.round_number} won by {winner.name} ({kind}) for {result.points} points")

        self.event_log.log(
            EventType.ROUND_END,
            player_id=result.winner_id,
            round=self.round_number,
            blocked=result.blocked,
            points=result.points,
            pip_totals=dict(result.pip_totals),
            hands={pid: [str(t) for t in tiles] for pid, tiles in result.hands.items()},
            scores={p.player_id: p.score for p in self.players_in_order()},
        )

        if result.winner_id is not None:
            self._check_game_end()

    def _check_game_end(self) -> None:
        winner = find_game_winner(self.players_in_order(), self.config.target_score)
        if winner is None:
            return

        self.game_over = True
        self.winner = winner.player_id

        logger.info(f"Game over after {self.round_number} rounds, {winner.name} wins with {winner.score}")
        self.event_log.log(
            EventType.GAME_END,
            player_id=winner.player_id,
            winner=winner.name,
            score=winner.score,
            rounds=self.round_number,
        )


def _validate_setup(config: GameConfig, players: List[Player]) -> None:
    if len(players) < 2:
        raise ConfigurationError("Game requires at least 2 players")
    ids = [p.player_id for p in players]
    if len(set(ids)) != len(ids):
        raise ConfigurationError(f"Duplicate player ids: {ids}")
    if config.target_score < 1:
        raise ConfigurationError("Target score must be positive")
    if config.hand_size < 1:
        raise ConfigurationError("Hand size must be positive")


def create_game(config: GameConfig, players: List[Player], rng: Optional[random.Random] = None) -> GameState:
    """
    Create a new game with the specified configuration and players.

    The first round is not dealt; call `start_round()` to begin.

    Args:
        config: Game configuration
        players: Players in seating order (2 or more)
        rng: Optional random source, overrides `config.seed`

    Returns:
        Initialized GameState
    """
    return GameState(config, players, rng)
