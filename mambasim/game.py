"""A game of fixed length and the per-possession statistics it records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .player import Player
from .team import NO_SHOOTER, Team
from .utils import rand_float

MAX_POSSESSION = 100
_POINTS_PER_SHOT = 2


@dataclass
class GameConfig:
    """Game-wide parameters."""

    fallback_shot_percentage: float = 0.0


@dataclass(frozen=True)
class PlayerSnapshot:
    """One player's figures at the end of a possession."""

    mental: float
    shot_accuracy: float
    made: int
    missed: int

    @classmethod
    def of(cls, player: Player) -> PlayerSnapshot:
        return cls(player.mental, player.shot_accuracy, player.shots_made, player.shots_missed)


@dataclass(frozen=True)
class StatsRecord:
    """Team and player figures after one possession."""

    poss: int
    score: int
    shooter: int
    players: tuple[PlayerSnapshot, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the flat JSON form of the record."""
        result: dict[str, Any] = {"poss": self.poss, "score": self.score, "shooter": self.shooter}
        for number, snapshot in enumerate(self.players, start=1):
            # The first player's miss count is published under this key.
            missed_key = "maded1" if number == 1 else f"missed{number}"
            result[f"mental{number}"] = snapshot.mental
            result[f"shot_accuracy{number}"] = snapshot.shot_accuracy
            result[f"made{number}"] = snapshot.made
            result[missed_key] = snapshot.missed
        return result


@dataclass
class Game:
    """Plays possessions until the limit and records statistics after each one."""

    players: list[Player]
    config: GameConfig = field(default_factory=GameConfig)
    rand: Callable[[], float] = field(default=rand_float, repr=False)
    team: Team = field(init=False)
    score: int = field(init=False, default=0)
    poss: int = field(init=False, default=0)
    stats_sheet: list[StatsRecord] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.team = Team(self.players, rand=self.rand)

    def play(self) -> None:
        """Play possessions until MAX_POSSESSION is reached."""
        while self.poss < MAX_POSSESSION:
            self._play_possession()

    def _play_possession(self) -> None:
        shooter = self.team.select_shooter()
        is_made = self._shoot(shooter)
        self.team.update(shooter, is_made)
        if is_made:
            self.score += _POINTS_PER_SHOT
        self.poss += 1
        self._record(shooter)

    def _shoot(self, shooter: int) -> bool:
        draw = self.rand()
        if shooter == NO_SHOOTER:
            return draw <= self.config.fallback_shot_percentage
        return draw <= self.team.players[shooter].shot_accuracy

    def _record(self, shooter: int) -> None:
        self.stats_sheet.append(
            StatsRecord(
                poss=self.poss,
                score=self.score,
                shooter=shooter + 1,
                players=tuple(PlayerSnapshot.of(p) for p in self.team.players),
            )
        )