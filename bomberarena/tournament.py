"""Tournaments of random pairings between bots, with score keeping."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace

from bomberarena.bot import Bot
from bomberarena.game import Game
from bomberarena.roster import BotConstructor

TOURNAMENT_BOARD_SIZE = 11
DEFAULT_TIME_LIMIT = 10.0


@dataclass
class Score:
    """Wins, losses and games played by one bot."""

    wins: int = 0
    losses: int = 0
    total_games: int = 0

    def __add__(self, other: Score) -> Score:
        return Score(
            self.wins + other.wins,
            self.losses + other.losses,
            self.total_games + other.total_games,
        )


@dataclass
class BotScores:
    """Scores per bot name, in order of first appearance, plus the number of games."""

    scores: list[tuple[str, Score]] = field(default_factory=list)
    total_games: int = 0

    def add_score(self, botname: str, score: Score) -> None:
        """Add ``score`` to the bot's tally, creating it if the bot is new."""
        for position, (name, existing) in enumerate(self.scores):
            if name == botname:
                self.scores[position] = (name, existing + score)
                return
        self.scores.append((botname, replace(score)))

    def merge_with(self, other: BotScores) -> None:
        """Fold another set of scores and its game count into this one."""
        for botname, score in other.scores:
            self.add_score(botname, score)
        self.total_games += other.total_games


def run_tournament(
    bot_constructors: Sequence[BotConstructor],
    bot_configs: Sequence[tuple[int, str]],
    round_counter: Callable[[int], None] | None = None,
    time_limit: float = DEFAULT_TIME_LIMIT,
) -> BotScores:
    """Play random pairings of configured bots until ``time_limit`` seconds have passed.

    Each config is (index into ``bot_constructors``, bot name). ``round_counter`` is
    called with the running game count at the start of every iteration.
    """
    if len(bot_configs) < 2:
        raise ValueError("a tournament needs at least two bot configurations")

    start = time.monotonic()
    bot_scores = BotScores()
    games_played = 0

    while True:
        games_played += 1
        if round_counter is not None:
            round_counter(games_played)
        if time.monotonic() - start >= time_limit:
            break

        pairing = random.sample(range(len(bot_configs)), 2)
        bots = [
            bot_constructors[bot_configs[index][0]](bot_configs[index][1]) for index in pairing
        ]
        names = [bot.display_name() for bot in bots]
        for name, score in zip(names, run_game(bots)):
            bot_scores.add_score(name, score)

    bot_scores.total_games = games_played
    return bot_scores


def run_game(bots: Sequence[Bot]) -> list[Score]:
    """Play one game with fresh bots; the winner gets a win, everyone else a loss."""
    names = [bot.display_name() for bot in bots]
    result = Game.build(TOURNAMENT_BOARD_SIZE, TOURNAMENT_BOARD_SIZE, bots).run()
    return [
        Score(wins=1, losses=0, total_games=1)
        if result.winner == name
        else Score(wins=0, losses=1, total_games=1)
        for name in names
    ]