"""Running a game between bots: turns, bombs, shrinking and the result."""

from __future__ import annotations

import copy
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from bomberarena.board import ConsoleDisplay, GameMap
from bomberarena.bot import Bot
from bomberarena.command import Command
from bomberarena.coord import Coord
from bomberarena.settings import MapSettings
from bomberarena.shrink import calculate_shrink_location

DEFAULT_BOMB_RANGE = 3


class NoShrinkLocationError(RuntimeError):
    """Raised when the endgame needs to shrink the board but no cell is left."""


@dataclass
class GameProgress:
    """A snapshot of how far a game has come."""

    turn: int
    endgame_started: bool


@dataclass
class GameResult:
    """The outcome of a finished game."""

    winner: str
    replay_data: list[Command] = field(default_factory=list)
    game_settings: MapSettings = field(default_factory=MapSettings)
    rounds: int = 0

    @classmethod
    def from_game(cls, game: Game) -> GameResult:
        return cls(
            winner=game.winner_name() or "",
            replay_data=[command for _, command in game.player_actions],
            game_settings=copy.deepcopy(game.map_settings),
            rounds=game.turn,
        )


class Game:
    """A game on one board between two to four bots."""

    def __init__(
        self,
        width: int,
        height: int,
        players: Sequence[Bot],
        *,
        bomb_range: int = DEFAULT_BOMB_RANGE,
    ) -> None:
        self.bots = list(players)
        self.player_count = len(self.bots)
        self.game_map = GameMap(width, height, [bot.display_name() for bot in self.bots])
        self.map_settings = MapSettings(
            width=width,
            height=height,
            playernames=[],
            bombtimer=100,
            bombradius=3,
            endgame=500,
        )
        self.turn = 0
        self.shrink_at_turn = self.map_settings.endgame
        self.player_actions: list[tuple[int, Command]] = []
        self.winner: int | None = None
        self.alive_players: list[int] = []
        self.bomb_range = bomb_range
        self.width = width
        self.height = height
        self.renderer = ConsoleDisplay()

    @classmethod
    def build(cls, width: int, height: int, players: Sequence[Bot]) -> Game:
        """Create a game, shuffle the players and tell every bot the game starts."""
        game = cls(width, height, players)
        game._start()
        return game

    def _start(self) -> None:
        self.alive_players = list(range(len(self.bots)))
        random.shuffle(self.alive_players)
        for index, bot in enumerate(self.bots):
            bot.start_game(self.map_settings, index)

    def run(self) -> GameResult:
        """Play rounds until there is a winner."""
        while self.winner is None:
            self.run_round()
        return GameResult.from_game(self)

    def replay(self, commands: Sequence[Command]) -> GameResult:
        """Play rounds taking each player's move from ``commands`` instead of the bots."""
        while self.winner is None:
            self.run_round(replay_commands=commands)
        return GameResult.from_game(self)

    def winner_name(self) -> str | None:
        if self.winner is None:
            return None
        return self.game_map.get_player_name(self.winner)

    def run_round(
        self,
        progress_callback: Callable[[GameProgress], None] | None = None,
        replay_commands: Sequence[Command] | None = None,
        logging_callback: Callable[[str], None] | None = None,
    ) -> bool:
        """Play one turn; return True once the game has been decided."""
        if self._check_winner():
            return True

        for player_index in range(len(self.alive_players)):
            bot = self.bots[player_index]
            player = self.game_map.get_player(player_index)
            if player is None:
                raise IndexError(f"no player with index {player_index}")
            if replay_commands is not None:
                bot_move = replay_commands[player_index]
            else:
                bot_move = bot.get_move(self.game_map, player.position)

            self.player_actions.append((player_index, bot_move))
            self.game_map.perform_move(player_index, bot_move)

            if self._check_winner():
                return True

        if self._process_bombs():
            return True

        if self.shrink_at_turn < self.turn:
            if self._shrink(logging_callback):
                return True

        if self._check_winner():
            return True

        self.turn += 1

        if progress_callback is not None:
            progress_callback(
                GameProgress(
                    turn=self.turn,
                    endgame_started=self.turn >= self.shrink_at_turn,
                )
            )
        return False

    def _shrink(self, logging_callback: Callable[[str], None] | None) -> bool:
        location = calculate_shrink_location(
            self.turn - self.shrink_at_turn, self.width, self.height
        )
        if location is None:
            raise NoShrinkLocationError(f"No valid shrink location found for turn {self.turn}")

        self.game_map.set_wall(location)
        player_index = self.game_map.get_player_index_at_location(location)
        if player_index is not None:
            player_name = self.game_map.get_player_name(player_index)
            if player_name is not None and logging_callback is not None:
                logging_callback(
                    f"Player {player_name} has been removed from the game due to "
                    f"shrinking at location {location!r}"
                )
            self._eliminate(player_index)
        return self._check_winner()

    def _eliminate(self, player_index: int) -> None:
        self.alive_players = [index for index in self.alive_players if index != player_index]

    def _check_winner(self) -> bool:
        if len(self.alive_players) == 1:
            self.winner = self.alive_players[0]
            return True
        if not self.alive_players:
            self.winner = None
            return True
        return False

    def bomb_explosion_locations(self, location: Coord) -> list[Coord]:
        """Return the cells hit by a bomb, centre first, then ring by ring left, up, right, down."""
        locations = [location]
        left: Coord | None = location
        right: Coord | None = location
        up: Coord | None = location
        down: Coord | None = location
        for _ in range(self.bomb_range):
            left = left.move_left() if left is not None else None
            right = right.move_right() if right is not None else None
            up = up.move_up() if up is not None else None
            down = down.move_down() if down is not None else None
            locations.extend(cell for cell in (left, up, right, down) if cell is not None)
        return locations

    def _process_bombs(self) -> bool:
        """Count bombs down and explode the ripe ones; stop as soon as there is a winner."""
        self.game_map.bomb_timer_decrease()
        while (bomb := self.game_map.next_exploding_bomb_location()) is not None:
            self.game_map.remove_bomb(bomb)
            for location in self.bomb_explosion_locations(bomb):
                self.game_map.clear_destructable(location)
                player_index = self.game_map.get_player_index_at_location(location)
                if player_index is not None:
                    self._eliminate(player_index)
                    if self._check_winner():
                        return True
        return False

    def display(self) -> None:
        self.renderer.display(self.game_map)