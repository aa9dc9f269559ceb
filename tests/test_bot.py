import pytest

from bomberarena.board import GameMap
from bomberarena.bot import Bot
from bomberarena.command import Command
from bomberarena.coord import Coord
from bomberarena.settings import MapSettings


class WaitingBot(Bot):
    def get_move(self, game_map, player_location):
        return Command.WAIT


def test_display_name_includes_default_id():
    bot = WaitingBot("Bot1")
    assert Bot.display_name(bot) == "Bot1 (0)"


def test_start_game_sets_id_and_reports_ready():
    bot = WaitingBot("Bot1")
    assert bot.start_game(MapSettings(), 3) is True
    assert bot.id == 3
    assert bot.display_name() == "Bot1 (3)"


def test_name_is_kept_after_start_game():
    bot = WaitingBot("Alpha")
    bot.start_game(MapSettings(), 1)
    assert bot.name == "Alpha"


def test_bot_without_get_move_cannot_be_created():
    with pytest.raises(TypeError):
        Bot("abstract")


def test_subclass_move_is_returned():
    bot = WaitingBot("Bot1")
    game_map = GameMap(7, 7, ["a", "b"])
    assert bot.get_move(game_map, Coord(1, 1)) is Command.WAIT