"""Base class for anything that picks moves for a player."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from dominoes.game import GameState
    from dominoes.rules import Action


class Agent(ABC):
    """
    Abstract base class for dominoes agents.

    An agent is the collaborator that chooses which tile to play and on
    which side, typically a UI prompting a human. The engine validates
    every choice; an illegal one is rejected and the agent is asked again.

    Attributes:
        player_id: The player this agent acts for.
        name: The player's display name.
    """

    def __init__(self, player_id: int, name: str):
        """
        Initialize the agent.

        Args:
            player_id: The player this agent acts for.
            name: The player's display name.
        """
        self.player_id = player_id
        self.name = name

    @abstractmethod
    def choose_action(self, game: "GameState", legal_actions: List["Action"]) -> "Action":
        """
        Choose an action for the current turn.

        Args:
            game: The current game state.
            legal_actions: Every legal play for the player, as (index, side)
                actions. Only called when at least one play exists.

        Returns:
            The action to execute. It is validated before being applied.
        """
        pass
