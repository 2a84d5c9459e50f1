"""Shared utilities.

``utils.image_io`` and ``utils.test_images`` build ``models.Image`` objects
and are imported from their modules directly.
"""

from .constants import (
    CHANNEL_NAMES,
    COLOR_CHANNELS,
    COEFFICIENT_EPSILON,
    BLUR_KERNEL,
    SHARPEN_KERNEL,
    EDGE_KERNEL,
)
from .config import SETTINGS, Settings, configure_logging
from .metrics import compute_psnr_ssim, coefficient_energy, count_zeroed, Timer

__all__ = [
    'CHANNEL_NAMES',
    'COLOR_CHANNELS',
    'COEFFICIENT_EPSILON',
    'BLUR_KERNEL',
    'SHARPEN_KERNEL',
    'EDGE_KERNEL',
    'SETTINGS',
    'Settings',
    'configure_logging',
    'compute_psnr_ssim',
    'coefficient_energy',
    'count_zeroed',
    'Timer',
]
