"""Metrics: PSNR, SSIM, coefficient statistics, timing."""

import time
from typing import Dict

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

from .constants import SAMPLE_MAX, SAMPLE_MIN


def _ssim_window(shape) -> int:
    """Largest odd window <= 7 that fits the smaller spatial side."""
    side = min(shape[0], shape[1], 7)
    return side if side % 2 == 1 else side - 1


def _psnr(original: np.ndarray, reconstructed: np.ndarray) -> float:
    if np.array_equal(original, reconstructed):
        return float('inf')
    return float(peak_signal_noise_ratio(original, reconstructed, data_range=SAMPLE_MAX))


def compute_psnr_ssim(original_rgba: np.ndarray, reconstructed_rgba: np.ndarray) -> Dict[str, float]:
    """Compute PSNR/SSIM on the RGB planes and PSNR on alpha.

    Both inputs are (H, W, 4) arrays; samples are clipped to [0, 1] first.
    SSIM is NaN for images narrower than 3 pixels.
    """
    original = np.clip(original_rgba, SAMPLE_MIN, SAMPLE_MAX)
    reconstructed = np.clip(reconstructed_rgba, SAMPLE_MIN, SAMPLE_MAX)

    psnr_rgb = _psnr(original[:, :, :3], reconstructed[:, :, :3])
    psnr_alpha = _psnr(original[:, :, 3], reconstructed[:, :, 3])

    win_size = _ssim_window(original.shape)
    if win_size < 3:
        ssim_rgb = float('nan')
    else:
        ssim_rgb = float(structural_similarity(
            original[:, :, :3], reconstructed[:, :, :3],
            channel_axis=2, data_range=SAMPLE_MAX, win_size=win_size
        ))

    return {
        'psnr_rgb': psnr_rgb,
        'ssim_rgb': ssim_rgb,
        'psnr_alpha': psnr_alpha,
    }


def coefficient_energy(coeffs: np.ndarray) -> float:
    """Sum of squared coefficients."""
    return float(np.sum(np.square(coeffs)))


def count_zeroed(before: np.ndarray, after: np.ndarray) -> int:
    """Number of coefficients that were non-zero before and are zero after."""
    return int(np.count_nonzero(before) - np.count_nonzero(after))


class Timer:
    """Accumulates wall-clock time for the encode and decode halves."""

    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0

    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms += (time.perf_counter() - start) * 1000.0
        return result

    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms += (time.perf_counter() - start) * 1000.0
        return result
