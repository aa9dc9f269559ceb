import pytest

from bomberarena.coord import Coord
from bomberarena.shrink import calculate_layer_tiles, calculate_shrink_location


def test_calculate_layer_tiles():
    assert calculate_layer_tiles(5, 5, 1) == 8
    assert calculate_layer_tiles(5, 5, 2) == 1
    assert calculate_layer_tiles(3, 3, 1) == 1


def test_layer_tiles_beyond_centre_is_zero():
    assert calculate_layer_tiles(5, 5, 3) == 0


def test_layer_tiles_rejects_layer_zero():
    with pytest.raises(ValueError):
        calculate_layer_tiles(5, 5, 0)


def test_layer_tiles_rejects_small_map():
    with pytest.raises(ValueError):
        calculate_layer_tiles(2, 5, 1)


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, Coord(1, 1)),
        (1, Coord(2, 1)),
        (2, Coord(3, 1)),
        (3, Coord(3, 2)),
        (4, Coord(3, 3)),
        (5, Coord(2, 3)),
        (6, Coord(1, 3)),
        (7, Coord(1, 2)),
        (8, Coord(2, 2)),
    ],
)
def test_shrink_location(number, expected):
    assert calculate_shrink_location(number, 5, 5) == expected


def test_shrink_past_interior_is_none():
    assert calculate_shrink_location(9, 5, 5) is None
    assert calculate_shrink_location(16, 5, 5) is None


def test_too_small_map_is_none():
    assert calculate_shrink_location(0, 1, 5) is None
    assert calculate_shrink_location(0, 2, 2) is None


@pytest.mark.parametrize(
    "width, height",
    [(5, 5), (7, 7), (7, 5), (5, 7), (11, 11), (9, 13), (13, 9), (6, 6)],
)
def test_shrink_covers_interior_exactly_once(width, height):
    total = (width - 2) * (height - 2)
    cells = [calculate_shrink_location(n, width, height) for n in range(total)]
    interior = {
        Coord(col, row) for col in range(1, width - 1) for row in range(1, height - 1)
    }
    assert len(set(cells)) == total
    assert set(cells) == interior
    assert calculate_shrink_location(total, width, height) is None


@pytest.mark.parametrize("width, height", [(7, 7), (11, 11), (9, 13)])
def test_consecutive_steps_are_adjacent_within_ring(width, height):
    first_ring = calculate_layer_tiles(width, height, 1)
    cells = [calculate_shrink_location(n, width, height) for n in range(first_ring)]
    for a, b in zip(cells, cells[1:]):
        assert a.distance(b) == 1