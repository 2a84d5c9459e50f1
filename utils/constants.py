"""Shared constants."""

import numpy as np

CHANNEL_NAMES = ('r', 'g', 'b', 'a')
COLOR_CHANNELS = ('r', 'g', 'b')

# Coefficients with smaller magnitude are treated as already zero when the
# threshold statistic is collected.
COEFFICIENT_EPSILON = 1e-3

SAMPLE_MIN = 0.0
SAMPLE_MAX = 1.0

# 8-bit encode scale for [0, 1] samples
ENCODE_SCALE = 255.0

BLUR_KERNEL = np.full((3, 3), 1.0 / 9.0)

SHARPEN_KERNEL = np.array([
    [0.0, -1.0, 0.0],
    [-1.0, 5.0, -1.0],
    [0.0, -1.0, 0.0],
])

EDGE_KERNEL = np.array([
    [-1.0, -1.0, -1.0],
    [-1.0, 8.0, -1.0],
    [-1.0, -1.0, -1.0],
])
