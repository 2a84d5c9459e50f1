"""Haar compression engines and simple image operations - pure computation."""

from .plane_buffer import next_pow2, padded_size, pad_to_square, crop
from .haar import haar_partial, inverse_haar_partial
from .parallel import parallel_for, chunk_ranges
from .pyramid import haar_transform_2d, inverse_haar_transform_2d, forward_level, inverse_level
from .thresholder import compute_cutoff, set_values_zero
from .pipeline import compress, compress_channel, compress_reconstruct
from .geometry import horizontal_flip, vertical_flip
from .color_ops import (
    clamp_pixel_value,
    brighten,
    get_red,
    get_green,
    get_blue,
    grayscale_by_value,
    grayscale_by_intensity,
    process,
)
from .convolution import convolve, blur, sharpen, detect_edges

__all__ = [
    'next_pow2',
    'padded_size',
    'pad_to_square',
    'crop',
    'haar_partial',
    'inverse_haar_partial',
    'parallel_for',
    'chunk_ranges',
    'haar_transform_2d',
    'inverse_haar_transform_2d',
    'forward_level',
    'inverse_level',
    'compute_cutoff',
    'set_values_zero',
    'compress',
    'compress_channel',
    'compress_reconstruct',
    'horizontal_flip',
    'vertical_flip',
    'clamp_pixel_value',
    'brighten',
    'get_red',
    'get_green',
    'get_blue',
    'grayscale_by_value',
    'grayscale_by_intensity',
    'process',
    'convolve',
    'blur',
    'sharpen',
    'detect_edges',
]
