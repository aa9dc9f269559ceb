"""A bot that wanders the board at random and never places bombs."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from bomberarena.bot import Bot
from bomberarena.command import Command

if TYPE_CHECKING:
    from bomberarena.board import GameMap
    from bomberarena.coord import Coord
    from bomberarena.settings import MapSettings

_CHOICES = (Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT, Command.WAIT)


class RandomBot(Bot):
    """Picks a random move or a wait every turn."""

    def __init__(self, name: str, rng: random.Random | None = None) -> None:
        super().__init__(name)
        self._rng = rng if rng is not None else random.Random()

    def start_game(self, map_settings: MapSettings, bot_id: int) -> bool:
        self.id = bot_id
        return True

    def get_move(self, game_map: GameMap, player_location: Coord) -> Command:
        return self._rng.choice(_CHOICES)