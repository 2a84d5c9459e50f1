"""Horizontal and vertical flips."""

import numpy as np

from models.image import Image


def horizontal_flip(image: Image) -> Image:
    """Mirror left to right."""
    return Image(*(np.fliplr(plane) for plane in image.planes().values()))


def vertical_flip(image: Image) -> Image:
    """Mirror top to bottom."""
    return Image(*(np.flipud(plane) for plane in image.planes().values()))
