import pytest

from bomberarena.command import Command
from bomberarena.coord import Coord


def test_str_format():
    assert str(Coord(3, 2)) == "(3, 2)"
    assert repr(Coord(3, 2)) == "(3, 2)"


def test_negative_rejected():
    with pytest.raises(ValueError):
        Coord(-1, 0)
    with pytest.raises(ValueError):
        Coord(0, -1)


def test_equality_and_hash():
    assert Coord(1, 2) == Coord(1, 2)
    assert len({Coord(1, 2), Coord(1, 2), Coord(2, 1)}) == 2


def test_up_down_round_trip():
    start = Coord(4, 4)
    assert start.move_up().move_down() == start
    assert start.move_left().move_right() == start


def test_moves_change_one_axis():
    start = Coord(3, 3)
    assert start.move_up().col == start.col
    assert start.move_up().row < start.row
    assert start.move_down().row > start.row
    assert start.move_left().row == start.row
    assert start.move_left().col < start.col
    assert start.move_right().col > start.col


def test_edges_return_none():
    origin = Coord(0, 0)
    assert origin.move_up() is None
    assert origin.move_left() is None
    assert origin.move_down() == Coord(0, 1)
    assert origin.move_right() == Coord(1, 0)


def test_relative_negative_is_none():
    assert Coord(1, 1).relative(-2, 0) is None
    assert Coord(1, 1).relative(0, -2) is None
    assert Coord(1, 1).relative(-1, -1) == Coord(0, 0)


@pytest.mark.parametrize(
    "command, method",
    [
        (Command.UP, "move_up"),
        (Command.DOWN, "move_down"),
        (Command.LEFT, "move_left"),
        (Command.RIGHT, "move_right"),
    ],
)
def test_move_command_matches_direction(command, method):
    start = Coord(2, 2)
    assert start.move_command(command) == getattr(start, method)()


@pytest.mark.parametrize("command", [Command.WAIT, Command.PLACE_BOMB])
def test_non_move_commands_stay(command):
    start = Coord(2, 3)
    assert start.move_command(command) == start


def test_square_interior_has_all_neighbours():
    centre = Coord(3, 3)
    square = centre.square_3x3()
    assert len(square) == 9
    assert len(set(square)) == 9
    assert centre in square
    assert all(centre.distance(c) in (0, 1, None) for c in square)


def test_square_ordered_row_by_row():
    square = Coord(3, 3).square_3x3()
    assert square[0] == Coord(2, 2)
    assert square[-1] == Coord(4, 4)
    rows = [c.row for c in square]
    assert rows == sorted(rows)


def test_square_at_corner_drops_negative_cells():
    square = Coord(0, 0).square_3x3()
    assert all(c.col >= 0 and c.row >= 0 for c in square)
    assert set(square) == {Coord(0, 0), Coord(1, 0), Coord(0, 1), Coord(1, 1)}


def test_validity():
    assert Coord(4, 4).is_valid(5, 5) is True
    assert Coord(5, 4).is_valid(5, 5) is False
    assert Coord(4, 5).is_valid(5, 5) is False
    assert Coord(4, 4).valid(5, 5) == Coord(4, 4)
    assert Coord(5, 0).valid(5, 5) is None


def test_distance_same_cell_and_diagonal():
    assert Coord(2, 2).distance(Coord(2, 2)) == 0
    assert Coord(1, 1).distance(Coord(2, 2)) is None


def test_distance_along_axis_is_symmetric():
    a, b = Coord(1, 1), Coord(1, 4)
    assert a.distance(b) == b.distance(a) == 3
    c = Coord(5, 1)
    assert a.distance(c) == c.distance(a)


def test_in_bomb_range():
    bomb = Coord(3, 3)
    assert Coord(3, 3).in_bomb_range(bomb, 0) is True
    assert Coord(3, 1).in_bomb_range(bomb, 2) is True
    assert Coord(3, 0).in_bomb_range(bomb, 2) is False
    assert Coord(2, 2).in_bomb_range(bomb, 5) is False