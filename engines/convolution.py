"""Fixed small-kernel 2D convolution of the color planes."""

import numpy as np
from scipy import ndimage

from models.image import Image
from utils.constants import BLUR_KERNEL, EDGE_KERNEL, SAMPLE_MAX, SAMPLE_MIN, SHARPEN_KERNEL


def convolve(image: Image, kernel: np.ndarray) -> Image:
    """Convolve r, g and b with an odd-sized kernel; alpha is kept.

    Borders replicate the nearest sample; results are clipped to [0, 1].
    """
    kernel = np.asarray(kernel, dtype=np.float64)
    if kernel.ndim != 2 or kernel.shape[0] % 2 == 0 or kernel.shape[1] % 2 == 0:
        raise ValueError(f"Kernel must be 2D with odd sides, got shape {kernel.shape}")

    def apply(plane):
        out = ndimage.convolve(plane, kernel, mode='nearest')
        return np.clip(out, SAMPLE_MIN, SAMPLE_MAX)

    return Image(apply(image.r), apply(image.g), apply(image.b), image.a)


def blur(image: Image) -> Image:
    """3x3 box blur."""
    return convolve(image, BLUR_KERNEL)


def sharpen(image: Image) -> Image:
    return convolve(image, SHARPEN_KERNEL)


def detect_edges(image: Image) -> Image:
    """3x3 Laplacian edge response."""
    return convolve(image, EDGE_KERNEL)
