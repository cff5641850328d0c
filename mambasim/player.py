"""A single player whose mental state and accuracy evolve over a game."""

from __future__ import annotations

from dataclasses import dataclass, field

from .utils import logistic


@dataclass
class PlayerConfig:
    """Fixed parameters of a player."""

    shot_base: float = 0.0
    mamba: float = 0.0
    mental_coefficient: float = 0.0
    heal_rate: float = 0.0
    shot_accuracy_rate: float = 0.0
    logistic_k: float = 0.0
    logistic_x0: float = 0.0


@dataclass
class PlayerState:
    """Mutable condition of a player."""

    mental: float = 0.0
    shot_accuracy: float = 0.0


@dataclass
class PlayerStats:
    """Shot counters of a player."""

    shots_made: int = 0
    shots_missed: int = 0
    shots_attempted: int = 0


@dataclass
class Player:
    """A player with configuration, state and statistics."""

    config: PlayerConfig = field(default_factory=PlayerConfig)
    state: PlayerState = field(default_factory=PlayerState)
    stats: PlayerStats = field(default_factory=PlayerStats)

    @property
    def mental(self) -> float:
        return self.state.mental

    @property
    def shot_accuracy(self) -> float:
        return self.state.shot_accuracy

    @property
    def shots_made(self) -> int:
        return self.stats.shots_made

    @property
    def shots_missed(self) -> int:
        return self.stats.shots_missed

    def update(self, is_made: bool) -> None:
        """Record a shot and adjust accuracy and mental state."""
        self._update_stats(is_made)
        self._update_state(is_made)

    def heal(self) -> None:
        """Recover mental state while not shooting."""
        self.state.mental += self.config.heal_rate

    def scale(self) -> None:
        """Clamp mental state at zero."""
        if self.state.mental < 0:
            self.state.mental = 0.0

    def _accuracy(self) -> float:
        return self.stats.shots_made / self.stats.shots_attempted

    def _update_stats(self, is_made: bool) -> None:
        if is_made:
            self.stats.shots_made += 1
        else:
            self.stats.shots_missed += 1
        self.stats.shots_attempted += 1

    def _update_state(self, is_made: bool) -> None:
        self._update_shot_accuracy()
        cfg = self.config
        if is_made:
            self.state.mental += cfg.mental_coefficient * cfg.shot_base
        else:
            self.state.mental -= 2 * cfg.mental_coefficient * (1 - cfg.mamba)

    def _update_shot_accuracy(self) -> None:
        cfg = self.config
        weight = logistic(float(self.stats.shots_attempted), cfg.logistic_k, cfg.logistic_x0, 1)
        self.state.shot_accuracy = cfg.shot_base + cfg.shot_accuracy_rate * weight * (
            self._accuracy() - cfg.shot_base
        )