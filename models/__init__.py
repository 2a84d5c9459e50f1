"""Data models for images, compression parameters and results."""

from .errors import ImagoError, InvalidRatio, EmptyCoefficientSet, InvalidDimensions
from .image import Image, new_image
from .compression_params import CompressionParams, validate_ratio
from .compression_result import CompressionResult
from .intermediate_data import ChannelOutcome, IntermediateData

__all__ = [
    'ImagoError',
    'InvalidRatio',
    'EmptyCoefficientSet',
    'InvalidDimensions',
    'Image',
    'new_image',
    'CompressionParams',
    'validate_ratio',
    'CompressionResult',
    'ChannelOutcome',
    'IntermediateData',
]
