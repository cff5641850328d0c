"""A five-player team that picks shooters by mental strength."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .player import Player
from .utils import bradley_terry, rand_float

TEAM_SIZE = 5
NO_SHOOTER = TEAM_SIZE
_SELECTION_OFFSET = 0.5


@dataclass
class Team:
    """Players on court and the random source used to pick shooters."""

    players: list[Player]
    rand: Callable[[], float] = field(default=rand_float, repr=False)

    def select_shooter(self) -> int:
        """Return the index of the next shooter, or NO_SHOOTER when nobody shoots."""
        total = sum(player.mental for player in self.players)
        draw = self.rand()
        cumulative = 0.0
        for index, player in enumerate(self.players[:TEAM_SIZE]):
            cumulative += bradley_terry(total, player.mental, _SELECTION_OFFSET)
            if draw <= cumulative:
                return index
        return NO_SHOOTER

    def update(self, shooter_index: int, is_made: bool) -> None:
        """Apply a possession's result: the shooter updates, everyone else heals."""
        for index, player in enumerate(self.players):
            if index == shooter_index:
                player.update(is_made)
            else:
                player.heal()
            player.scale()