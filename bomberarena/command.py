"""Player commands issued each turn."""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    """An action a player can take during a turn."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    WAIT = "wait"
    PLACE_BOMB = "place_bomb"

    def is_move(self) -> bool:
        """Return True if the command changes the player's position."""
        return self in _MOVES


_MOVES = frozenset({Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT})