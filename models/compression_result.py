"""Compression result with metrics."""

from dataclasses import dataclass

from models.image import Image


@dataclass
class CompressionResult:
    """Results from the Haar compression/reconstruction pipeline."""

    original_image: Image
    reconstructed_image: Image
    ratio: float

    # Quality metrics
    psnr_rgb: float
    ssim_rgb: float
    psnr_alpha: float

    # Coefficient stats (all four channels, padded buffers)
    zeroed_coeffs: int
    total_coeffs: int
    energy_before: float
    energy_after: float

    # Runtime
    encode_time_ms: float
    decode_time_ms: float

    @property
    def zeroed_fraction(self) -> float:
        if self.total_coeffs == 0:
            return 0.0
        return self.zeroed_coeffs / self.total_coeffs
