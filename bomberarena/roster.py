"""The bots available for tournaments."""

from __future__ import annotations

from collections.abc import Callable

from bomberarena.bot import Bot
from bomberarena.easy_bot import EasyBot
from bomberarena.random_bot import RandomBot

BotConstructor = Callable[[str], Bot]


def available_bots() -> list[BotConstructor]:
    """Return a constructor for each kind of bot, taking the bot's name."""
    return [RandomBot, EasyBot]