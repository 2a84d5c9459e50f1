"""Compression parameters."""

import math
from dataclasses import dataclass, field

from models.errors import InvalidRatio
from utils.config import SETTINGS


def validate_ratio(ratio) -> float:
    """Return ratio as float, raising InvalidRatio unless it lies in [0, 1]."""
    try:
        value = float(ratio)
    except (TypeError, ValueError):
        raise InvalidRatio(ratio) from None
    if math.isnan(value) or not (0.0 <= value <= 1.0):
        raise InvalidRatio(ratio)
    return value


@dataclass
class CompressionParams:
    """Haar compression parameters."""

    ratio: float = 0.5
    max_workers: int = field(default_factory=lambda: SETTINGS.max_workers)
    parallel_channels: bool = field(default_factory=lambda: SETTINGS.parallel_channels)
    epsilon: float = field(default_factory=lambda: SETTINGS.coeff_epsilon)

    def __post_init__(self):
        self.ratio = validate_ratio(self.ratio)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be >= 0, got {self.epsilon}")
