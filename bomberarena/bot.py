"""The interface every bot implements to take part in a game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bomberarena.board import GameMap
    from bomberarena.command import Command
    from bomberarena.coord import Coord
    from bomberarena.settings import MapSettings


class Bot(ABC):
    """A player controlled by code; one instance lives for one game."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.id = 0

    def display_name(self) -> str:
        """Return the bot's name followed by its id in the current game."""
        return f"{self.name} ({self.id})"

    def start_game(self, map_settings: MapSettings, bot_id: int) -> bool:
        """Prepare for a new game; return True when the bot is ready."""
        self.id = bot_id
        return True

    @abstractmethod
    def get_move(self, game_map: GameMap, player_location: Coord) -> Command:
        """Return the command for this turn given the board and the bot's position."""