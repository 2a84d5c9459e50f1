"""Four-plane RGBA image with samples normalized to [0, 1]."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np

from models.errors import InvalidDimensions
from utils.constants import CHANNEL_NAMES


@dataclass(eq=False)
class Image:
    """RGBA image stored as four float64 planes of identical shape."""

    r: np.ndarray
    g: np.ndarray
    b: np.ndarray
    a: np.ndarray
    height: int = field(init=False)
    width: int = field(init=False)

    def __post_init__(self):
        planes = []
        for name in CHANNEL_NAMES:
            plane = np.array(getattr(self, name), dtype=np.float64)
            if plane.ndim != 2:
                raise InvalidDimensions(f"Plane '{name}' must be 2D, got shape {plane.shape}")
            planes.append(plane)
            setattr(self, name, plane)

        shape = planes[0].shape
        if shape[0] <= 0 or shape[1] <= 0:
            raise InvalidDimensions(f"Image dimensions must be positive, got {shape[0]}x{shape[1]}")
        for name, plane in zip(CHANNEL_NAMES, planes):
            if plane.shape != shape:
                raise InvalidDimensions(
                    f"Plane '{name}' has shape {plane.shape}, expected {shape}"
                )
        self.height, self.width = shape

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def planes(self) -> Dict[str, np.ndarray]:
        """Channel name to plane, in r, g, b, a order."""
        return {name: getattr(self, name) for name in CHANNEL_NAMES}

    def to_array(self) -> np.ndarray:
        """Stack planes into an (H, W, 4) float64 array."""
        return np.stack([self.r, self.g, self.b, self.a], axis=-1)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Image":
        """Build from an (H, W), (H, W, 3) or (H, W, 4) array of [0, 1] samples."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim == 2:
            array = np.stack([array, array, array, np.ones_like(array)], axis=-1)
        elif array.ndim == 3 and array.shape[2] == 3:
            alpha = np.ones(array.shape[:2], dtype=np.float64)
            array = np.concatenate([array, alpha[:, :, None]], axis=-1)
        elif array.ndim != 3 or array.shape[2] != 4:
            raise InvalidDimensions(f"Expected (H, W), (H, W, 3) or (H, W, 4), got {array.shape}")
        return cls(array[:, :, 0], array[:, :, 1], array[:, :, 2], array[:, :, 3])


def new_image(height: int, width: int) -> Image:
    """Allocate an all-zero image."""
    if height <= 0 or width <= 0:
        raise InvalidDimensions(f"Image dimensions must be positive, got {height}x{width}")
    zeros = np.zeros((height, width), dtype=np.float64)
    return Image(zeros, zeros, zeros, zeros)
