"""Grayscale raster handed from the quantizer to encoders."""

import hashlib
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Raster:
    """
    Row-major 8-bit grayscale pixel buffer with explicit dimensions.

    Attributes:
        width: Columns
        height: Rows
        data: height * width bytes, row 0 first
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Raster dimensions must be positive, got {self.width}x{self.height}")
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"Raster data length {len(self.data)} != width*height "
                f"({self.width}*{self.height})"
            )

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Raster":
        """Build a raster from a [height, width] uint8 array."""
        if pixels.ndim != 2:
            raise ValueError(f"Expected a 2D pixel array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        height, width = pixels.shape
        return cls(width=width, height=height, data=np.ascontiguousarray(pixels).tobytes())

    def to_array(self) -> np.ndarray:
        """Read-only [height, width] uint8 view of the pixel data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width)

    def digest(self) -> str:
        """SHA-256 hex digest of the pixel data."""
        return hashlib.sha256(self.data).hexdigest()

    def __len__(self) -> int:
        return len(self.data)
