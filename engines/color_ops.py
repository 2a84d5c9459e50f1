"""Per-pixel color operations on [0, 1] RGBA images."""

from typing import Callable

import numpy as np

from models.image import Image, new_image
from utils.constants import COLOR_CHANNELS, SAMPLE_MAX, SAMPLE_MIN


def clamp_pixel_value(value):
    """Clip a sample (or array of samples) to [0, 1]."""
    if np.isscalar(value):
        return float(min(max(value, SAMPLE_MIN), SAMPLE_MAX))
    return np.clip(value, SAMPLE_MIN, SAMPLE_MAX)


def brighten(image: Image, amount: float) -> Image:
    """Add amount to r, g and b; alpha is kept."""
    return Image(
        clamp_pixel_value(image.r + amount),
        clamp_pixel_value(image.g + amount),
        clamp_pixel_value(image.b + amount),
        image.a,
    )


def _isolate(image: Image, keep: str) -> Image:
    zeros = np.zeros(image.shape, dtype=np.float64)
    planes = {name: (getattr(image, name) if name == keep else zeros) for name in COLOR_CHANNELS}
    return Image(planes['r'], planes['g'], planes['b'], image.a)


def get_red(image: Image) -> Image:
    return _isolate(image, 'r')


def get_green(image: Image) -> Image:
    return _isolate(image, 'g')


def get_blue(image: Image) -> Image:
    return _isolate(image, 'b')


def grayscale_by_value(image: Image) -> Image:
    """HSV-style value: every color channel takes max(r, g, b)."""
    value = np.maximum(np.maximum(image.r, image.g), image.b)
    return Image(value, value, value, image.a)


def grayscale_by_intensity(image: Image) -> Image:
    """HSI-style intensity: every color channel takes the mean of r, g, b."""
    intensity = (image.r + image.g + image.b) / 3.0
    return Image(intensity, intensity, intensity, image.a)


def process(fn: Callable[[int, int, Image, Image], None], image: Image) -> Image:
    """Build a new image by calling fn(i, j, src, dst) for every pixel.

    ``dst`` starts all zero; fn writes into its planes.
    """
    dst = new_image(image.height, image.width)
    for i in range(image.height):
        for j in range(image.width):
            fn(i, j, image, dst)
    return dst
