"""Grid coordinates and movement on the board."""

from __future__ import annotations

from dataclasses import dataclass

from bomberarena.command import Command


@dataclass(frozen=True)
class Coord:
    """A non-negative (column, row) position on the board."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if self.col < 0 or self.row < 0:
            raise ValueError(f"coordinates must be non-negative, got ({self.col}, {self.row})")

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"

    def __repr__(self) -> str:
        return str(self)

    def relative(self, col_offset: int, row_offset: int) -> Coord | None:
        """Return the cell at the given offset, or None if it would be negative."""
        new_col = self.col + col_offset
        new_row = self.row + row_offset
        if new_col < 0 or new_row < 0:
            return None
        return Coord(new_col, new_row)

    def move_up(self) -> Coord | None:
        return self.relative(0, -1)

    def move_down(self) -> Coord | None:
        return self.relative(0, 1)

    def move_left(self) -> Coord | None:
        return self.relative(-1, 0)

    def move_right(self) -> Coord | None:
        return self.relative(1, 0)

    def move_command(self, command: Command) -> Coord | None:
        """Return the position reached by applying a command."""
        if command is Command.UP:
            return self.move_up()
        if command is Command.DOWN:
            return self.move_down()
        if command is Command.LEFT:
            return self.move_left()
        if command is Command.RIGHT:
            return self.move_right()
        return self

    def square_3x3(self) -> list[Coord]:
        """Return the cells of the 3x3 square centred here, row by row, skipping negatives."""
        cells = (
            self.relative(col_change, row_change)
            for row_change in (-1, 0, 1)
            for col_change in (-1, 0, 1)
        )
        return [cell for cell in cells if cell is not None]

    def is_valid(self, width: int, height: int) -> bool:
        return self.col < width and self.row < height

    def valid(self, width: int, height: int) -> Coord | None:
        """Return self if inside a width x height board, else None."""
        return self if self.is_valid(width, height) else None

    def distance(self, other: Coord) -> int | None:
        """Return the straight-line distance along a shared row or column, else None."""
        if self == other:
            return 0
        if self.col != other.col and self.row != other.row:
            return None
        return abs(self.col - other.col) + abs(self.row - other.row)

    def in_bomb_range(self, bomb: Coord, radius: int) -> bool:
        """Return True if a bomb at ``bomb`` with ``radius`` reaches this cell."""
        distance = self.distance(bomb)
        return distance is not None and distance <= radius