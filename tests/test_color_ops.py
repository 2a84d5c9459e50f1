"""Tests for per-pixel color operations."""

import numpy as np
import pytest
from engines.color_ops import (
    brighten,
    clamp_pixel_value,
    get_blue,
    get_green,
    get_red,
    grayscale_by_intensity,
    grayscale_by_value,
    process,
)
from models.image import Image, new_image


def _pixel(r, g, b, a=1.0):
    return Image(*(np.array([[v]]) for v in (r, g, b, a)))


def test_clamp_pixel_value():
    assert clamp_pixel_value(0.5) == 0.5
    assert clamp_pixel_value(-0.1) == 0.0
    assert clamp_pixel_value(1.2) == 1.0
    assert np.array_equal(clamp_pixel_value(np.array([-1.0, 0.3, 2.0])), [0.0, 0.3, 1.0])


def test_brighten():
    out = brighten(_pixel(0.5, 0.5, 0.5, 0.8), 0.1)
    assert out.r[0, 0] == pytest.approx(0.6)
    assert out.g[0, 0] == pytest.approx(0.6)
    assert out.b[0, 0] == pytest.approx(0.6)
    assert out.a[0, 0] == pytest.approx(0.8)


def test_brighten_clamps():
    out = brighten(_pixel(0.95, 0.0, 0.5), 0.1)
    assert out.r[0, 0] == 1.0
    out = brighten(_pixel(0.05, 0.0, 0.5), -0.1)
    assert out.r[0, 0] == 0.0


def test_channel_isolation():
    src = _pixel(0.5, 0.2, 0.3)

    red = get_red(src)
    assert (red.r[0, 0], red.g[0, 0], red.b[0, 0]) == (0.5, 0.0, 0.0)
    green = get_green(src)
    assert (green.r[0, 0], green.g[0, 0], green.b[0, 0]) == (0.0, 0.2, 0.0)
    blue = get_blue(src)
    assert (blue.r[0, 0], blue.g[0, 0], blue.b[0, 0]) == (0.0, 0.0, 0.3)
    assert blue.a[0, 0] == 1.0


def test_grayscale_by_value():
    gray = grayscale_by_value(_pixel(0.5, 0.2, 0.3))
    assert gray.r[0, 0] == gray.g[0, 0] == gray.b[0, 0] == 0.5


def test_grayscale_by_intensity():
    gray = grayscale_by_intensity(_pixel(0.4, 0.2, 0.3))
    for plane in (gray.r, gray.g, gray.b):
        assert plane[0, 0] == pytest.approx(0.3, abs=1e-3)


def test_process_copies_pixels():
    src = new_image(2, 2)
    src.r[0, 0] = 1.0
    src.g[0, 1] = 1.0

    def copy_pixel(i, j, img, dst):
        for name in ('r', 'g', 'b', 'a'):
            getattr(dst, name)[i, j] = getattr(img, name)[i, j]

    out = process(copy_pixel, src)
    assert np.array_equal(out.to_array(), src.to_array())
    assert out.r is not src.r
