"""One-dimensional Haar butterfly on the prefix of a segment.

``length`` is the working size of the current pyramid level: only
``segment[:length]`` is read and written.
"""

import numpy as np

SQRT2 = np.sqrt(2.0)


def _check_length(segment: np.ndarray, length: int) -> None:
    if length < 2 or length % 2 != 0:
        raise ValueError(f"length must be even and >= 2, got {length}")
    if length > segment.shape[0]:
        raise ValueError(f"length {length} exceeds segment of {segment.shape[0]}")


def haar_partial(segment: np.ndarray, length: int) -> np.ndarray:
    """One forward Haar step, in place.

    Pair (i, i+1) writes its average at i/2 and its difference at
    (i + length)/2, so averages fill [0, length/2) and details fill
    [length/2, length).
    """
    _check_length(segment, length)
    half = length // 2
    scratch = segment[:length].copy()
    even = scratch[0::2]
    odd = scratch[1::2]
    segment[:half] = (even + odd) / SQRT2
    segment[half:length] = (even - odd) / SQRT2
    return segment


def inverse_haar_partial(segment: np.ndarray, length: int) -> np.ndarray:
    """Exact inverse of ``haar_partial``, in place."""
    _check_length(segment, length)
    half = length // 2
    avg = segment[:half].copy()
    diff = segment[half:length].copy()
    segment[0:length:2] = (avg + diff) / SQRT2
    segment[1:length:2] = (avg - diff) / SQRT2
    return segment
