"""Synthetic RGBA test images for compression demos."""

from typing import Optional

import numpy as np

from models.image import Image


def generate_colored_checkerboard(size: int = 256, block_size: int = 32) -> Image:
    """High-contrast checkerboard - sharp edges the Haar basis captures exactly."""
    rgb = np.zeros((size, size, 3), dtype=np.float64)
    for i in range(0, size, block_size):
        for j in range(0, size, block_size):
            if (i // block_size + j // block_size) % 2 == 0:
                rgb[i:i + block_size, j:j + block_size] = [0.12, 0.12, 0.12]
            else:
                rgb[i:i + block_size, j:j + block_size] = [0.86, 0.86, 0.86]
    return Image.from_array(rgb)


def generate_thin_stripes(size: int = 256, stripe_width: int = 3) -> Image:
    """Fine vertical stripes that straddle Haar pair boundaries."""
    rgb = np.zeros((size, size, 3), dtype=np.float64)
    for j in range(size):
        if (j // stripe_width) % 2 == 0:
            rgb[:, j] = [0.78, 0.24, 0.24]
        else:
            rgb[:, j] = [0.24, 0.7, 0.78]
    return Image.from_array(rgb)


def generate_gradient(height: int = 256, width: Optional[int] = None) -> Image:
    """Smooth diagonal gradient with a horizontal alpha ramp."""
    width = height if width is None else width
    ii, jj = np.mgrid[0:height, 0:width]
    t = (ii + jj) / max(height + width - 2, 1)
    rgba = np.stack([
        0.15 + t * 0.7,
        0.25 + t * 0.55,
        0.45 + t * 0.4,
        np.linspace(0.5, 1.0, width)[None, :].repeat(height, axis=0),
    ], axis=-1)
    return Image.from_array(rgba)


def generate_noise(height: int = 64, width: Optional[int] = None, seed: int = 0) -> Image:
    """Uniform random RGBA samples."""
    width = height if width is None else width
    rng = np.random.default_rng(seed)
    return Image.from_array(rng.random((height, width, 4)))


def generate_demo_image(key: str) -> Optional[Image]:
    """Generate demo image by key."""
    generators = {
        "checkerboard": lambda: generate_colored_checkerboard(256),
        "stripes": lambda: generate_thin_stripes(256),
        "gradient": lambda: generate_gradient(256),
        "noise": lambda: generate_noise(256),
    }

    if key in generators:
        return generators[key]()

    return None
