"""Padding planes to square power-of-two buffers and cropping back."""

import numpy as np
from typing import Tuple


def next_pow2(n: int) -> int:
    """Smallest power of two >= n."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    res = 1
    while res < n:
        res <<= 1
    return res


def padded_size(height: int, width: int) -> int:
    """Side of the square working buffer for an h x w plane."""
    return max(next_pow2(height), next_pow2(width))


def pad_to_square(plane: np.ndarray) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Copy plane into the top-left corner of a zero size x size buffer."""
    h, w = plane.shape
    size = padded_size(h, w)
    buffer = np.zeros((size, size), dtype=np.float64)
    buffer[:h, :w] = plane
    return buffer, (h, w)


def crop(buffer: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """Copy of the top-left h x w region."""
    h, w = shape
    return buffer[:h, :w].copy()
