"""Model parameters loaded from a JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Union

from .generator import GeneratorConfig

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class ModelConfig:
    """All parameters that drive a simulation run."""

    mamba_num: int = 0
    mamba_shot_percentage: float = 0.0
    player_shot_percentage: float = 0.0
    mamba_mental: float = 0.0
    mental_coefficient: float = 0.0
    heal_rate: float = 0.0
    shot_accuracy_rate: float = 0.0
    logistic_k: float = 0.0
    logistic_x0: float = 0.0
    fallback_shot_percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> ModelConfig:
        """Build a config from decoded JSON; unknown keys are ignored, missing ones stay zero."""
        if not isinstance(data, dict):
            raise ValueError("model configuration must be a JSON object")
        values: dict[str, Any] = {}
        for spec in fields(cls):
            raw = data.get(spec.name)
            if raw is None:
                continue
            values[spec.name] = _coerce(spec.name, raw, spec.type)
        return cls(**values)

    def generator_config(self) -> GeneratorConfig:
        """Return the parameters the player generator needs."""
        return GeneratorConfig(
            mamba_num=self.mamba_num,
            mamba_shot_percentage=self.mamba_shot_percentage,
            player_shot_percentage=self.player_shot_percentage,
            mamba_mental=self.mamba_mental,
            mental_coefficient=self.mental_coefficient,
            heal_rate=self.heal_rate,
            shot_accuracy_rate=self.shot_accuracy_rate,
            logistic_k=self.logistic_k,
            logistic_x0=self.logistic_x0,
        )


def _coerce(name: str, raw: Any, declared: Any) -> Any:
    if isinstance(raw, bool):
        raise ValueError(f"{name} must be a number, got a boolean")
    if declared in (int, "int"):
        if not isinstance(raw, int):
            raise ValueError(f"{name} must be an integer, got {raw!r}")
        return raw
    if not isinstance(raw, (int, float)):
        raise ValueError(f"{name} must be a number, got {raw!r}")
    return float(raw)


def load(path: PathLike) -> ModelConfig:
    """Read a model configuration from the JSON file at ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    return ModelConfig.from_dict(json.loads(text))