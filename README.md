# bomberarena

A small grid bomb game in which bots compete against each other. Each bot gets
the current map and its own position every turn and answers with a command:
move up, down, left or right, wait, or place a bomb. Bombs tick down and explode
in a cross, clearing destructible blocks and knocking out any player they hit.
After a fixed number of turns the arena starts to shrink, walling it in tile by
tile in a clockwise spiral, until one bot is left.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running a tournament

```
bomberarena
```

This runs one tournament per thread, each for a fixed time, and adds up the
results. Each game pits two randomly chosen bots from the built-in roster
(two `EasyBot`s and two `RandomBot`s) against each other on an 11x11 map.
While it runs, a status line shows the total number of games played and the
speed in thousands of games per second; at the end the wins, losses and games
of every bot are printed.

Options:

- `--threads N`: number of tournament threads (default: the number of CPUs).
- `--seconds S`: time limit of each thread's tournament in seconds (default: 10).

## Using the library

Play a single game:

```python
from bomberarena.game import Game
from bomberarena.random_bot import RandomBot
from bomberarena.easy_bot import EasyBot

game = Game.build(7, 7, [RandomBot("Alpha"), EasyBot("Beta")])
result = game.run()
print(result.winner, result.rounds)
```

`Game.run` returns a `GameResult` holding the winner's name (an empty string if
nobody survived), the commands played in order (`replay_data`), the
`MapSettings` of the game and the number of rounds played. Map sizes must be
odd and between 5 and 20, with two to four players; otherwise `ValueError` is
raised.

Step through a game one round at a time and look at the board:

```python
game = Game.build(7, 7, [RandomBot("Alpha"), RandomBot("Beta")])
while game.winner is None:
    game.run_round(None, None, print)
    game.display()
```

`run_round` also accepts a `progress_callback`, called with a `GameProgress`
(turn number and whether the endgame has started) after each completed turn,
and `replay_commands`, which makes each player play the command at its index
instead of asking its bot. `Game.replay(commands)` plays a whole game that way.

Run a tournament in code:

```python
from bomberarena.roster import available_bots
from bomberarena.tournament import run_tournament

constructors = available_bots()
configs = [(1, "Easy-1"), (1, "Easy-2"), (0, "Random-1"), (0, "Random-2")]
scores = run_tournament(constructors, configs, None, 2.0)
for name, score in scores.scores:
    print(name, score)
```

Each config is an index into the list of constructors and a bot name; at least
two configs are needed. The third argument, if given, is called with the
running game count. `BotScores.merge_with` combines the scores of several
tournaments.

## Writing a bot

Subclass `bomberarena.bot.Bot` and implement `get_move`, which receives the
`GameMap` and the bot's `Coord` and returns a `Command`. `start_game` receives
the `MapSettings` and the bot's id; the default stores the id and returns
`True`. A new bot is built for every game, so a bot may keep state for the
length of one game. Add a constructor for it to `available_bots` in
`bomberarena.roster` to make it available to tournaments.

## Modules

- `bomberarena.command`: the `Command` enumeration.
- `bomberarena.coord`: grid coordinates and moves.
- `bomberarena.board`: the map (`GameMap`), cells, bombs, players and `ConsoleDisplay`.
- `bomberarena.shrink`: where the arena shrinks on each turn of the endgame.
- `bomberarena.settings`: `MapSettings`.
- `bomberarena.game`: the game loop, `GameResult`, `GameProgress` and `NoShrinkLocationError`.
- `bomberarena.bot`, `bomberarena.random_bot`, `bomberarena.easy_bot`,
  `bomberarena.roster`: bots.
- `bomberarena.tournament`: scores and the timed tournament.
- `bomberarena.cli`: the `bomberarena` command.

## What it does not do

There is no way for a person to play: every player is a bot. Game results and
replay data are kept in memory only; nothing is saved to disk, and the command
prints the final scores but does not store them.