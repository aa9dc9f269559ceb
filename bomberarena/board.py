"""The game board: grid cells, players, bombs and move handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bomberarena.command import Command
from bomberarena.coord import Coord

MIN_PLAYERS = 2
MAX_PLAYERS = 4
MIN_SIZE = 5
MAX_SIZE = 20
BOMB_TIMER = 5


class CellType(Enum):
    """The kind of content a grid cell holds, valued by its grid character."""

    EMPTY = " "
    BOMB = "B"
    WALL = "W"
    PLAYER = "P"
    DESTROYABLE = "."


@dataclass
class Bomb:
    """A bomb on the board with a countdown to explosion."""

    position: Coord
    timer: int


@dataclass
class Player:
    """A player's name and current position."""

    name: str
    position: Coord


def prepare_grid(width: int, height: int) -> list[str]:
    """Return a row-major grid with an outer wall, inner pillars and destroyables elsewhere."""
    return [
        "W"
        if row in (0, height - 1)
        or column in (0, width - 1)
        or (column % 2 == 0 and row % 2 == 0)
        else "."
        for row in range(height)
        for column in range(width)
    ]


def can_move_to(cell: CellType) -> bool:
    """Return True if a player may step onto a cell of this type."""
    return cell is CellType.EMPTY


def new_position(current_position: Coord, command: Command) -> Coord | None:
    """Return where a command would take a player, without checking the board."""
    return current_position.move_command(command)


@dataclass
class GameMap:
    """A board of cells plus the players and bombs on it."""

    width: int
    height: int
    playernames: list[str]
    grid: list[str] = field(init=False)
    players: list[Player] = field(init=False)
    bombs: list[Bomb] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if not MIN_PLAYERS <= len(self.playernames) <= MAX_PLAYERS:
            raise ValueError("Invalid number of players: must be between 2 and 4")
        if (
            not MIN_SIZE <= self.width <= MAX_SIZE
            or not MIN_SIZE <= self.height <= MAX_SIZE
            or self.width % 2 == 0
            or self.height % 2 == 0
        ):
            raise ValueError(
                "Invalid map size: must be between 5x5 and 20x20 and both dimensions must be odd"
            )

        start_locations = [
            Coord(1, 1),
            Coord(1, self.width - 2),
            Coord(self.height - 2, 1),
            Coord(self.height - 2, self.width - 2),
        ]
        self.grid = prepare_grid(self.width, self.height)
        self.players = [
            Player(name, position) for name, position in zip(self.playernames, start_locations)
        ]
        for player in self.players:
            for cell in player.position.square_3x3():
                self.clear_destructable(cell)

    def _index(self, position: Coord) -> int:
        return position.row * self.width + position.col

    def clear_destructable(self, location: Coord) -> None:
        """Empty the cell at ``location`` if it holds a destroyable block."""
        if self.cell_type(location) is CellType.DESTROYABLE:
            self.set_cell(location, CellType.EMPTY)

    def cell_type(self, position: Coord) -> CellType:
        """Return the type of a cell; positions outside the board count as walls."""
        if not position.is_valid(self.width, self.height):
            return CellType.WALL
        try:
            return CellType(self.grid[self._index(position)])
        except ValueError:
            return CellType.EMPTY

    def set_cell(self, position: Coord, cell_type: CellType) -> None:
        """Set a cell inside the board; destroyable cells cannot be set directly."""
        if cell_type is CellType.DESTROYABLE:
            raise ValueError(
                "Cannot set this cell type directly, use appropriate methods "
                "for walls or destroyable cells"
            )
        if position.is_valid(self.width, self.height):
            self.grid[self._index(position)] = cell_type.value

    def get_player(self, index: int) -> Player | None:
        return self.players[index] if 0 <= index < len(self.players) else None

    def get_player_index_at_location(self, location: Coord) -> int | None:
        """Return the index of the first player standing at ``location``."""
        return next(
            (index for index, player in enumerate(self.players) if player.position == location),
            None,
        )

    def get_player_name(self, index: int) -> str | None:
        player = self.get_player(index)
        return player.name if player is not None else None

    def add_bomb(self, position: Coord) -> None:
        """Place a bomb at ``position`` unless one is already there."""
        if any(bomb.position == position for bomb in self.bombs):
            return
        self.bombs.append(Bomb(position, BOMB_TIMER))

    def next_exploding_bomb_location(self) -> Coord | None:
        """Return the position of the first bomb whose timer has reached 1."""
        return next((bomb.position for bomb in self.bombs if bomb.timer == 1), None)

    def remove_bomb(self, position: Coord) -> None:
        self.bombs = [bomb for bomb in self.bombs if bomb.position != position]

    def bomb_timer_decrease(self) -> None:
        """Count every bomb down by one, stopping at 1."""
        for bomb in self.bombs:
            if bomb.timer > 1:
                bomb.timer -= 1

    def validate_move(self, player_index: int, command: Command) -> bool:
        """Return True if the player exists and the command is allowed on this board."""
        player = self.get_player(player_index)
        if player is None:
            return False
        target = new_position(player.position, command)
        if target is None or not target.is_valid(self.width, self.height):
            return False
        return not (command.is_move() and not can_move_to(self.cell_type(target)))

    def perform_move(self, player_index: int, command: Command) -> bool:
        """Apply a command; return True if it changed the board."""
        if not self.validate_move(player_index, command):
            return False
        player = self.players[player_index]
        position = player.position

        if command is Command.PLACE_BOMB:
            self.set_cell(position, CellType.BOMB)
            self.add_bomb(position)
        elif command is Command.WAIT:
            return False
        else:
            self.set_cell(position, CellType.EMPTY)
            target = new_position(position, command)
            if target is not None:
                self.set_cell(target, CellType.PLAYER)
                player.position = target
        return True

    def set_wall(self, position: Coord) -> None:
        if position.is_valid(self.width, self.height):
            self.set_cell(position, CellType.WALL)


_SYMBOLS = {
    CellType.EMPTY: "  ",
    CellType.WALL: "\U0001f7e5",
    CellType.DESTROYABLE: "\U0001f7eb",
    CellType.BOMB: "\U0001f4a3",
    CellType.PLAYER: "\U0001f600",
}


class ConsoleDisplay:
    """Draws a board on the terminal with one symbol per cell."""

    def render(self, game_map: GameMap) -> str:
        """Return the board as text, one line per row, each ending in a newline."""
        return "".join(
            "".join(
                _SYMBOLS[game_map.cell_type(Coord(x, y))] for x in range(game_map.width)
            )
            + "\n"
            for y in range(game_map.height)
        )

    def display(self, game_map: GameMap) -> None:
        print(self.render(game_map), end="")