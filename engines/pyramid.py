"""Multi-level separable 2D Haar pyramid over a square power-of-two buffer.

At working size ``c`` only the first ``c`` entries of each row and column
are touched; entries at index >= c already hold finished detail
coefficients. Within a level, the row pass and the column pass are each
split into bands of rows/columns that run concurrently, and each pass
completes before the next one starts.
"""

import logging

import numpy as np

from engines.haar import haar_partial, inverse_haar_partial
from engines.parallel import chunk_ranges, parallel_for

logger = logging.getLogger(__name__)


def _check_buffer(plane: np.ndarray, size: int) -> None:
    if plane.shape != (size, size):
        raise ValueError(f"Expected a {size}x{size} buffer, got {plane.shape}")
    if size < 1 or size & (size - 1):
        raise ValueError(f"size must be a power of two, got {size}")


def _row_pass(plane: np.ndarray, size: int, length: int, step, max_workers: int) -> None:
    def run(band):
        for i in band:
            step(plane[i], length)

    parallel_for(run, chunk_ranges(size, max_workers), max_workers)


def _column_pass(plane: np.ndarray, size: int, length: int, step, max_workers: int) -> None:
    def run(band):
        for j in band:
            col = plane[:length, j].copy()
            step(col, length)
            plane[:length, j] = col

    parallel_for(run, chunk_ranges(size, max_workers), max_workers)


def forward_level(plane: np.ndarray, size: int, c: int, max_workers: int = 1) -> np.ndarray:
    """One forward level at working size c: rows, then columns."""
    _row_pass(plane, size, c, haar_partial, max_workers)
    _column_pass(plane, size, c, haar_partial, max_workers)
    return plane


def inverse_level(plane: np.ndarray, size: int, c: int, max_workers: int = 1) -> np.ndarray:
    """One inverse level at working size c: columns, then rows."""
    _column_pass(plane, size, c, inverse_haar_partial, max_workers)
    _row_pass(plane, size, c, inverse_haar_partial, max_workers)
    return plane


def haar_transform_2d(plane: np.ndarray, size: int, max_workers: int = 1) -> np.ndarray:
    """Forward pyramid in place: c = size, size/2, ..., 2."""
    _check_buffer(plane, size)
    c = size
    while c > 1:
        forward_level(plane, size, c, max_workers)
        c //= 2
    logger.debug("Forward Haar pyramid done on %dx%d buffer", size, size)
    return plane


def inverse_haar_transform_2d(plane: np.ndarray, size: int, max_workers: int = 1) -> np.ndarray:
    """Inverse pyramid in place: c = 2, 4, ..., size."""
    _check_buffer(plane, size)
    c = 2
    while c <= size:
        inverse_level(plane, size, c, max_workers)
        c *= 2
    logger.debug("Inverse Haar pyramid done on %dx%d buffer", size, size)
    return plane
