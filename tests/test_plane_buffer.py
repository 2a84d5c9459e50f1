"""Tests for padding and cropping."""

import numpy as np
import pytest
from engines.plane_buffer import crop, next_pow2, pad_to_square, padded_size


@pytest.mark.parametrize("n,expected", [(1, 1), (2, 2), (3, 4), (5, 8), (8, 8), (9, 16), (1000, 1024)])
def test_next_pow2(n, expected):
    assert next_pow2(n) == expected


def test_next_pow2_rejects_zero():
    with pytest.raises(ValueError):
        next_pow2(0)


def test_padded_size_uses_larger_side():
    assert padded_size(3, 5) == 8
    assert padded_size(17, 2) == 32
    assert padded_size(1, 1) == 1


def test_pad_and_crop():
    plane = np.arange(15, dtype=np.float64).reshape(3, 5)
    buffer, shape = pad_to_square(plane)
    assert buffer.shape == (8, 8)
    assert shape == (3, 5)
    assert np.array_equal(buffer[:3, :5], plane)
    assert np.count_nonzero(buffer[3:, :]) == 0
    assert np.count_nonzero(buffer[:, 5:]) == 0

    cropped = crop(buffer, shape)
    assert np.array_equal(cropped, plane)
    cropped[0, 0] = 99.0
    assert buffer[0, 0] == 0.0


def test_pad_copies_input():
    plane = np.ones((2, 2))
    buffer, _ = pad_to_square(plane)
    buffer[0, 0] = 5.0
    assert plane[0, 0] == 1.0
