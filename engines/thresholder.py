"""Quantile thresholding of Haar coefficients."""

import logging
from typing import Optional

import numpy as np

from engines.parallel import chunk_ranges, parallel_for
from models.errors import EmptyCoefficientSet
from utils.constants import COEFFICIENT_EPSILON

logger = logging.getLogger(__name__)


def compute_cutoff(coeffs: np.ndarray, ratio: float, epsilon: float = COEFFICIENT_EPSILON) -> float:
    """Nearest-rank quantile of the magnitudes >= epsilon.

    Returns ``sorted_magnitudes[floor(ratio * (n - 1))]``.
    """
    magnitudes = np.abs(coeffs).ravel()
    collected = np.sort(magnitudes[magnitudes >= epsilon])
    n = collected.shape[0]
    if n == 0:
        raise EmptyCoefficientSet(epsilon)
    return float(collected[int(ratio * (n - 1))])


def set_values_zero(
    coeffs: np.ndarray,
    ratio: float,
    epsilon: float = COEFFICIENT_EPSILON,
    max_workers: int = 1,
) -> Optional[float]:
    """Zero every coefficient with magnitude <= the ratio cutoff, in place.

    Returns the cutoff, or None when ratio is 0 and nothing is touched.
    Raises EmptyCoefficientSet if no coefficient reaches epsilon.
    """
    if ratio == 0:
        return None

    cutoff = compute_cutoff(coeffs, ratio, epsilon)

    def zero_band(band):
        rows = coeffs[band.start:band.stop]
        rows[np.abs(rows) <= cutoff] = 0.0

    parallel_for(zero_band, chunk_ranges(coeffs.shape[0], max_workers), max_workers)
    logger.debug("Thresholded at cutoff %.6g (ratio=%s)", cutoff, ratio)
    return cutoff
