"""Image I/O using OpenCV, normalized to [0, 1] RGBA planes."""

import cv2
import numpy as np

from models.image import Image
from .constants import ENCODE_SCALE, SAMPLE_MAX, SAMPLE_MIN


def load_image(path: str) -> Image:
    """Load an image file as an RGBA Image with samples in [0, 1]."""
    raw = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if raw is None:
        raise ValueError(f"Could not load image from {path}")

    if raw.ndim == 3 and raw.shape[2] == 3:
        raw = cv2.cvtColor(raw, cv2.COLOR_BGR2RGB)
    elif raw.ndim == 3 and raw.shape[2] == 4:
        raw = cv2.cvtColor(raw, cv2.COLOR_BGRA2RGBA)

    # 8-bit files divide by 255, 16-bit files by 65535
    if np.issubdtype(raw.dtype, np.integer):
        scale = float(np.iinfo(raw.dtype).max)
    else:
        scale = 1.0
    return Image.from_array(raw.astype(np.float64) / scale)


def to_uint8(image: Image) -> np.ndarray:
    """Clip to [0, 1] and scale to an (H, W, 4) uint8 RGBA array."""
    rgba = np.clip(image.to_array(), SAMPLE_MIN, SAMPLE_MAX)
    return np.round(rgba * ENCODE_SCALE).astype(np.uint8)


def save_image(image: Image, path: str) -> None:
    """Save as 8-bit RGBA; the format follows the file extension."""
    bgra = cv2.cvtColor(to_uint8(image), cv2.COLOR_RGBA2BGRA)
    try:
        written = cv2.imwrite(str(path), bgra)
    except cv2.error as e:
        raise ValueError(f"Could not write image to {path}: {e}") from e
    if not written:
        raise ValueError(f"Could not write image to {path}")
