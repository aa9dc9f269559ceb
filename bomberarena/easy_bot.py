"""A simple bot that bombs when it can hide and flees (badly) from bombs."""

from __future__ import annotations

import copy
import random
from typing import TYPE_CHECKING

from bomberarena.bot import Bot
from bomberarena.command import Command
from bomberarena.settings import MapSettings

if TYPE_CHECKING:
    from bomberarena.board import GameMap
    from bomberarena.coord import Coord

_RANDOM_CHOICES = (Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT, Command.WAIT)

# Two steps that lead round a corner: first a move, then one at right angles to it.
_ESCAPE_ROUTES = (
    (Command.UP, Command.LEFT),
    (Command.UP, Command.RIGHT),
    (Command.DOWN, Command.LEFT),
    (Command.DOWN, Command.RIGHT),
    (Command.LEFT, Command.UP),
    (Command.LEFT, Command.DOWN),
    (Command.RIGHT, Command.UP),
    (Command.RIGHT, Command.DOWN),
)


class EasyBot(Bot):
    """Places a bomb where it can step round a corner, otherwise moves at random."""

    def __init__(self, name: str, rng: random.Random | None = None) -> None:
        super().__init__(name)
        self.map_settings = MapSettings()
        self._next_moves: list[Command] = []
        self._rng = rng if rng is not None else random.Random()

    def start_game(self, map_settings: MapSettings, bot_id: int) -> bool:
        self.id = bot_id
        self.map_settings = copy.deepcopy(map_settings)
        return True

    def get_move(self, game_map: GameMap, player_location: Coord) -> Command:
        if self._next_moves:
            return self._next_moves.pop()

        runaway = self.danger_location(game_map, player_location)
        if runaway is not None:
            return runaway

        moves = self.safe_to_bomb(game_map, player_location)
        if moves is not None:
            self._next_moves = moves
            return self._next_moves.pop()

        return self._rng.choice(_RANDOM_CHOICES)

    def safe_to_bomb(self, game_map: GameMap, loc: Coord) -> list[Command] | None:
        """Return a move plan (consumed from the end) if a bomb here can be escaped."""
        for first, second in _ESCAPE_ROUTES:
            step1 = loc.move_command(first)
            if step1 is None:
                continue
            step2 = step1.move_command(second)
            if step2 is None:
                continue
            if self.get_cell(game_map, step1) == " " and self.get_cell(game_map, step2) == " ":
                return [Command.WAIT, Command.WAIT, second, first, Command.PLACE_BOMB]
        return None

    def danger_location(self, game_map: GameMap, player_location: Coord) -> Command | None:
        """Return an escape command if a bomb can reach the current location."""
        radius = self.map_settings.bombradius
        if any(player_location.in_bomb_range(bomb.position, radius) for bomb in game_map.bombs):
            return Command.LEFT
        return None

    def get_cell(self, game_map: GameMap, location: Coord) -> str:
        """Return the grid character at ``location``; beyond the grid counts as a wall."""
        index = location.row * game_map.width + location.col
        return game_map.grid[index] if index < len(game_map.grid) else "W"