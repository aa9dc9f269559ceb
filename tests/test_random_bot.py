import random

from bomberarena.board import GameMap
from bomberarena.command import Command
from bomberarena.coord import Coord
from bomberarena.random_bot import RandomBot
from bomberarena.settings import MapSettings


def test_start_game_sets_id_in_display_name():
    bot = RandomBot("Rnd")
    assert bot.start_game(MapSettings(), 3) is True
    assert bot.display_name() == "Rnd (3)"


def test_display_name_before_start():
    assert RandomBot("Rnd").display_name() == "Rnd (0)"


def test_moves_never_place_bombs():
    bot = RandomBot("Rnd", rng=random.Random(42))
    game_map = GameMap(7, 7, ["A", "B"])
    moves = {bot.get_move(game_map, Coord(1, 1)) for _ in range(300)}
    assert Command.PLACE_BOMB not in moves
    assert moves == {Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT, Command.WAIT}


def test_same_seed_gives_same_moves():
    game_map = GameMap(7, 7, ["A", "B"])
    first = RandomBot("a", rng=random.Random(7))
    second = RandomBot("b", rng=random.Random(7))
    moves_a = [first.get_move(game_map, Coord(1, 1)) for _ in range(20)]
    moves_b = [second.get_move(game_map, Coord(1, 1)) for _ in range(20)]
    assert moves_a == moves_b