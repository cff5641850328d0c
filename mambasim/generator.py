"""Build a team of players from model parameters."""

from __future__ import annotations

from dataclasses import dataclass

from .player import Player, PlayerConfig
from .team import TEAM_SIZE

_TEAM_MENTAL = 2.5


@dataclass
class GeneratorConfig:
    """Parameters for generating a lineup of mambas and regular players."""

    mamba_num: int = 0
    mamba_shot_percentage: float = 0.0
    player_shot_percentage: float = 0.0
    mamba_mental: float = 0.0
    mental_coefficient: float = 0.0
    heal_rate: float = 0.0
    shot_accuracy_rate: float = 0.0
    logistic_k: float = 0.0
    logistic_x0: float = 0.0


def _player(config: GeneratorConfig, shot_base: float, mamba: float) -> Player:
    return Player(
        PlayerConfig(
            shot_base=shot_base,
            mamba=mamba,
            mental_coefficient=config.mental_coefficient,
            heal_rate=config.heal_rate,
            shot_accuracy_rate=config.shot_accuracy_rate,
            logistic_k=config.logistic_k,
            logistic_x0=config.logistic_x0,
        )
    )


def generate(config: GeneratorConfig) -> list[Player]:
    """Return five players: the mambas first, then regular players."""
    if not 0 <= config.mamba_num <= TEAM_SIZE:
        raise ValueError(f"mamba_num must be between 0 and {TEAM_SIZE}, got {config.mamba_num}")

    mambas = [
        _player(config, config.mamba_shot_percentage, config.mamba_mental)
        for _ in range(config.mamba_num)
    ]
    regulars_count = TEAM_SIZE - config.mamba_num
    if not regulars_count:
        return mambas

    regular_mental = (_TEAM_MENTAL - config.mamba_num * config.mamba_mental) / regulars_count
    regulars = [
        _player(config, config.player_shot_percentage, regular_mental)
        for _ in range(regulars_count)
    ]
    return mambas + regulars