"""Main Haar compression/reconstruction pipeline."""

import logging
from typing import Dict, Optional, Tuple

import numpy as np

from engines.parallel import parallel_for
from engines.plane_buffer import crop, pad_to_square
from engines.pyramid import haar_transform_2d, inverse_haar_transform_2d
from engines.thresholder import set_values_zero
from models.compression_params import CompressionParams, validate_ratio
from models.compression_result import CompressionResult
from models.errors import EmptyCoefficientSet
from models.image import Image
from models.intermediate_data import ChannelOutcome, IntermediateData
from utils.config import SETTINGS
from utils.constants import CHANNEL_NAMES
from utils.metrics import Timer, coefficient_energy, compute_psnr_ssim, count_zeroed

logger = logging.getLogger(__name__)


def _forward(plane: np.ndarray, ratio: float, epsilon: float, max_workers: int):
    buffer, shape = pad_to_square(plane)
    size = buffer.shape[0]
    haar_transform_2d(buffer, size, max_workers)
    coefficients = buffer.copy()
    try:
        cutoff = set_values_zero(buffer, ratio, epsilon, max_workers)
    except EmptyCoefficientSet:
        logger.debug("No coefficients >= %s, skipping threshold", epsilon)
        cutoff = None
    return buffer, shape, coefficients, cutoff


def _inverse(buffer: np.ndarray, shape: Tuple[int, int], max_workers: int) -> np.ndarray:
    inverse_haar_transform_2d(buffer, buffer.shape[0], max_workers)
    return crop(buffer, shape)


def compress_channel(
    plane: np.ndarray,
    ratio: float,
    epsilon: Optional[float] = None,
    max_workers: Optional[int] = None,
    timer: Optional[Timer] = None,
) -> ChannelOutcome:
    """Pad, transform, threshold, invert and crop one channel plane."""
    ratio = validate_ratio(ratio)
    epsilon = SETTINGS.coeff_epsilon if epsilon is None else epsilon
    max_workers = SETTINGS.max_workers if max_workers is None else max_workers
    timer = Timer() if timer is None else timer

    buffer, shape, coefficients, cutoff = timer.measure_encode(
        _forward, plane, ratio, epsilon, max_workers
    )
    thresholded = buffer.copy()
    reconstructed = timer.measure_decode(_inverse, buffer, shape, max_workers)

    return ChannelOutcome(
        reconstructed=reconstructed,
        coefficients=coefficients,
        thresholded=thresholded,
        cutoff=cutoff,
        zeroed=count_zeroed(coefficients, thresholded),
    )


def _compress_channels(image: Image, params: CompressionParams, timers: Dict[str, Timer]):
    planes = image.planes()
    # Channel pool and per-channel passes share the max_workers budget.
    if params.parallel_channels:
        channel_workers = min(len(CHANNEL_NAMES), params.max_workers)
    else:
        channel_workers = 1
    inner_workers = max(1, params.max_workers // channel_workers)

    def run(name):
        return compress_channel(
            planes[name], params.ratio, params.epsilon, inner_workers, timers[name]
        )

    outcomes = parallel_for(run, CHANNEL_NAMES, channel_workers)
    return dict(zip(CHANNEL_NAMES, outcomes))


def compress(
    image: Image,
    ratio: float,
    max_workers: Optional[int] = None,
    parallel_channels: Optional[bool] = None,
) -> Image:
    """Lossy Haar compression of every channel; returns a new image.

    ratio 0 reconstructs the input up to floating-point rounding. The
    reconstruction is not clipped to [0, 1].
    """
    params = CompressionParams(
        ratio=ratio,
        max_workers=SETTINGS.max_workers if max_workers is None else max_workers,
        parallel_channels=SETTINGS.parallel_channels if parallel_channels is None else parallel_channels,
    )
    timers = {name: Timer() for name in CHANNEL_NAMES}
    outcomes = _compress_channels(image, params, timers)
    return Image(*(outcomes[name].reconstructed for name in CHANNEL_NAMES))


def compress_reconstruct(
    image: Image,
    params: CompressionParams,
) -> Tuple[CompressionResult, IntermediateData]:
    """Run the full pipeline and collect metrics and per-channel data."""
    timers = {name: Timer() for name in CHANNEL_NAMES}
    outcomes = _compress_channels(image, params, timers)
    reconstructed = Image(*(outcomes[name].reconstructed for name in CHANNEL_NAMES))

    intermediate = IntermediateData(padded_size=outcomes['r'].size)
    for name, outcome in outcomes.items():
        intermediate.coefficients[name] = outcome.coefficients
        intermediate.thresholded[name] = outcome.thresholded
        intermediate.cutoffs[name] = outcome.cutoff
        intermediate.zeroed[name] = outcome.zeroed
        logger.debug(
            "Channel %s: cutoff=%s zeroed=%d", name, outcome.cutoff, outcome.zeroed
        )

    original_rgba = image.to_array()
    recon_rgba = reconstructed.to_array()
    intermediate.error_map_rgb = np.mean(np.abs(original_rgba[:, :, :3] - recon_rgba[:, :, :3]), axis=2)

    metrics = compute_psnr_ssim(original_rgba, recon_rgba)

    # Channels may overlap in time; report the slowest channel per phase.
    result = CompressionResult(
        original_image=image,
        reconstructed_image=reconstructed,
        ratio=params.ratio,
        psnr_rgb=metrics['psnr_rgb'],
        ssim_rgb=metrics['ssim_rgb'],
        psnr_alpha=metrics['psnr_alpha'],
        zeroed_coeffs=sum(o.zeroed for o in outcomes.values()),
        total_coeffs=sum(o.coefficients.size for o in outcomes.values()),
        energy_before=sum(coefficient_energy(o.coefficients) for o in outcomes.values()),
        energy_after=sum(coefficient_energy(o.thresholded) for o in outcomes.values()),
        encode_time_ms=max(t.encode_time_ms for t in timers.values()),
        decode_time_ms=max(t.decode_time_ms for t in timers.values()),
    )

    return result, intermediate
