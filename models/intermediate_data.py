"""Per-channel intermediate data for analysis."""

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np


@dataclass
class ChannelOutcome:
    """Everything one channel produced on its way through the pipeline."""

    reconstructed: np.ndarray
    coefficients: np.ndarray
    thresholded: np.ndarray
    cutoff: Optional[float] = None
    zeroed: int = 0

    @property
    def size(self) -> int:
        return self.coefficients.shape[0]


@dataclass
class IntermediateData:
    """Intermediate results keyed by channel name."""

    padded_size: int = 0
    coefficients: Dict[str, np.ndarray] = field(default_factory=dict)
    thresholded: Dict[str, np.ndarray] = field(default_factory=dict)
    cutoffs: Dict[str, Optional[float]] = field(default_factory=dict)
    zeroed: Dict[str, int] = field(default_factory=dict)
    error_map_rgb: Optional[np.ndarray] = None
