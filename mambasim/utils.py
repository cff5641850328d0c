"""Numeric helpers shared by the simulation."""

from __future__ import annotations

import math
import secrets

_RAND_RESOLUTION = 1_000_000_000


def logistic(x: float, offset: float, l: float, k: float) -> float:
    """Return the logistic curve ``l / (1 + exp(-k * (x - offset)))``."""
    return l / (1 + math.exp(-k * (x - offset)))


def bradley_terry(total: float, value: float, offset: float) -> float:
    """Return the Bradley-Terry share of ``value`` against ``total`` plus ``offset``."""
    return value / (offset + total)


def rand_float() -> float:
    """Return a cryptographically random float in [0, 1) with 1e-9 resolution."""
    return secrets.randbelow(_RAND_RESOLUTION) / float(_RAND_RESOLUTION)