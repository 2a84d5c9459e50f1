"""Exceptions raised by the compression engine and image model."""


class ImagoError(Exception):
    """Base class for library errors."""


class InvalidRatio(ImagoError, ValueError):
    """Compression ratio outside [0, 1]."""

    def __init__(self, ratio):
        super().__init__(f"Compression ratio must be in [0, 1], got {ratio!r}")
        self.ratio = ratio


class EmptyCoefficientSet(ImagoError):
    """No coefficient reached the magnitude epsilon, so no cutoff exists."""

    def __init__(self, epsilon: float):
        super().__init__(f"No coefficients with magnitude >= {epsilon}")
        self.epsilon = epsilon


class InvalidDimensions(ImagoError, ValueError):
    """Channel planes with non-positive or mismatched dimensions."""
