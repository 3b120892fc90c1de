"""Shared test fixtures for dominoes engine tests."""

import random
from typing import Dict, List, Sequence, Tuple

import pytest

from dominoes import BoardSide, GameConfig, Player, Tile, create_game
from dominoes.agent import Agent


class FirstLegalAgent(Agent):
    """Always plays the first legal action offered."""

    def choose_action(self, game, legal_actions):
        return legal_actions[0]


class ScriptedAgent(Agent):
    """Replays a fixed list of actions, then falls back to the first legal one."""

    def __init__(self, player_id, name, script):
        super().__init__(player_id, name)
        self.script = list(script)
        self.calls = 0

    def choose_action(self, game, legal_actions):
        self.calls += 1
        if self.script:
            return self.script.pop(0)
        return legal_actions[0]


class UnshuffledRandom(random.Random):
    """Random source that leaves piles in generation order and always picks 0."""

    def shuffle(self, x):
        pass

    def randrange(self, *args, **kwargs):
        return 0


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def two_players():
    """Two test players."""
    return [Player(0, "Alice"), Player(1, "Bob")]


@pytest.fixture
def three_players():
    """Three test players."""
    return [Player(0, "Alice"), Player(1, "Bob"), Player(2, "Charlie")]


@pytest.fixture
def four_players():
    """Four test players."""
    return [
        Player(0, "Alice"),
        Player(1, "Bob"),
        Player(2, "Charlie"),
        Player(3, "Diana"),
    ]


@pytest.fixture
def basic_game(game_config, two_players):
    """Two-player game with the first round dealt."""
    game = create_game(game_config, two_players)
    game.start_round()
    return game


@pytest.fixture
def three_player_game(game_config, three_players):
    """Three-player game with the first round dealt."""
    game = create_game(game_config, three_players)
    game.start_round()
    return game


@pytest.fixture
def rig():
    """
    Put a dealt game into a hand-crafted position.

    Usage: rig(game, hands={0: [(5, 0)], 1: [(1, 2)]}, board=[((5, 6), "left")], current=0)
    """

    def _rig(
        game,
        hands: Dict[int, Sequence[Tuple[int, int]]],
        board: Sequence[Tuple[Tuple[int, int], str]] = (),
        current: int = 0,
    ):
        game.board.reset()
        for tile, side in board:
            game.board.place(Tile(*tile), BoardSide(side))
        for pid, tiles in hands.items():
            game.players[pid].hand = [Tile(*t) for t in tiles]
        game.current_player_index = game.player_order.index(current)
        game.consecutive_passes = 0
        return game

    return _rig


def tile_count(game) -> int:
    """Tiles across every hand, the board and the boneyard."""
    in_hands = sum(len(p.hand) for p in game.players.values())
    return in_hands + len(game.board) + len(game.boneyard)


def make_agents(players: List[Player]) -> List[Agent]:
    return [FirstLegalAgent(p.player_id, p.name) for p in players]
