"""
Game event logging and notification.

The engine records every notable step as a GameEvent. UI layers subscribe
callbacks to the EventLog to be told about each event as it happens; the
engine behaves identically with no subscribers at all.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    ROUND_START = "round_start"
    DEAL = "deal"
    TURN_START = "turn_start"
    TILE_PLAYED = "tile_played"
    PLAYER_PASSED = "player_passed"
    ROUND_END = "round_end"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player_id: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flat, JSON-friendly view of the event."""
        data: Dict[str, Any] = {"event_type": self.event_type.value}
        if self.player_id is not None:
            data["player_id"] = self.player_id
        data.update(self.details)
        return data

    def __repr__(self) -> str:
        player_str = f"P{self.player_id}" if self.player_id is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


EventCallback = Callable[[GameEvent], None]


class EventLog:
    """Manages the game event log and its subscribers."""

    def __init__(self):
        self.events: List[GameEvent] = []
        self._subscribers: List[EventCallback] = []

    def subscribe(self, callback: EventCallback) -> None:
        """Register a callback invoked with every new event."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        """Remove a previously registered callback."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def log(self, event_type: EventType, player_id: Optional[int] = None, **details: Any) -> GameEvent:
        """Log a game event and notify subscribers."""
        event = GameEvent(event_type, player_id, details)
        self.events.append(event)
        logger.debug(f"Event {event!r}")

        for callback in list(self._subscribers):
            callback(event)

        return event

    def get_events(self, event_type: Optional[EventType] = None) -> List[GameEvent]:
        """Get all logged events, optionally only those of one type."""
        if event_type is None:
            return self.events.copy()
        return [e for e in self.events if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        return self.events[-count:]

    def clear(self) -> None:
        """Clear the event log."""
        self.events.clear()
