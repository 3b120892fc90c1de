"""
High-level rules API for controlling game flow.
This module provides the public interface for game actions and legal move detection.
"""

import logging
from typing import Any, List, Optional

from dominoes.agent import Agent
from dominoes.exceptions import InvalidActionError
from dominoes.game import ActionType, GameState

logger = logging.getLogger(__name__)


class Action:
    """Represents a game action that can be taken."""

    def __init__(self, action_type: ActionType, **params: Any):
        self.action_type = action_type
        self.params = params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self.action_type == other.action_type and self.params == other.params

    def __repr__(self) -> str:
        return f"Action({self.action_type.value}, {self.params})"


def get_legal_actions(game_state: GameState, player_id: int) -> List[Action]:
    """
    Get all legal actions available to a player.

    This is the main interface for agents/UIs to determine valid moves.

    Args:
        game_state: Current game state
        player_id: Player to get actions for

    Returns:
        One PLAY_TILE action per playable (index, side) pair, a single PASS
        if nothing fits, or an empty list if it is not the player's turn.
    """
    if game_state.game_over or game_state.round_over or game_state.round_number == 0:
        return []

    if game_state.get_current_player().player_id != player_id:
        return []

    actions: List[Action] = []
    for index in game_state.playable_indexes(player_id):
        for side in game_state.legal_sides(player_id, index):
            actions.append(Action(ActionType.PLAY_TILE, index=index, side=side))

    if not actions:
        actions.append(Action(ActionType.PASS))

    return actions


def apply_action(game_state: GameState, action: Action, player_id: Optional[int] = None) -> bool:
    """
    Apply an action to the game state.

    This is the main interface for executing moves.

    Args:
        game_state: Current game state
        action: Action to apply
        player_id: Player executing the action (optional, defaults to current player)

    Returns:
        True if action was successful, False otherwise
    """
    if player_id is None:
        player_id = game_state.get_current_player().player_id

    if action.action_type == ActionType.PLAY_TILE:
        index = action.params.get("index")
        side = action.params.get("side")
        return game_state.play_tile(player_id, index, side)

    elif action.action_type == ActionType.PASS:
        return game_state.pass_turn(player_id)

    return False


def step_turn(game_state: GameState, agent: Agent) -> Optional[Action]:
    """
    Run one turn for the current player.

    If the player can play, the agent is asked for a move until it proposes
    a legal one. Otherwise the player passes. The round end check and the
    hand-off to the next player happen inside the game state.

    Returns:
        The action that was applied, or None if the round or game is over.

    Raises:
        InvalidActionError: if the agent keeps proposing illegal moves.
    """
    if game_state.round_over or game_state.game_over:
        return None

    player = game_state.get_current_player()
    legal_actions = get_legal_actions(game_state, player.player_id)

    if legal_actions == [Action(ActionType.PASS)]:
        apply_action(game_state, legal_actions[0], player.player_id)
        return legal_actions[0]

    for _ in range(game_state.config.max_invalid_choices):
        action = agent.choose_action(game_state, legal_actions)
        if apply_action(game_state, action, player.player_id):
            return action
        logger.warning(f"Rejected illegal move from {player.name}: {action}")

    raise InvalidActionError(
        f"{player.name} made {game_state.config.max_invalid_choices} illegal choices in a row"
    )


def play_round(game_state: GameState, agents: List[Agent]) -> None:
    """
    Deal a round and play it to the end.

    Args:
        game_state: Game to play; must not be over.
        agents: One agent per player, matched by player_id.
    """
    by_player = {agent.player_id: agent for agent in agents}
    missing = set(game_state.player_order) - set(by_player)
    if missing:
        raise InvalidActionError(f"No agent for players {sorted(missing)}")

    game_state.start_round()
    while not game_state.round_over:
        current = game_state.get_current_player()
        step_turn(game_state, by_player[current.player_id])
