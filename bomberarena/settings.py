"""Settings shared with bots at the start of a game."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_playernames() -> list[str]:
    return ["Player 1", "Player 2"]


@dataclass
class MapSettings:
    """Board size, player names and bomb/endgame timing."""

    width: int = 15
    height: int = 15
    playernames: list[str] = field(default_factory=_default_playernames)
    bombtimer: int = 3
    bombradius: int = 2
    endgame: int = 100