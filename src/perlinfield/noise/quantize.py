"""Quantization of normalized noise to 8-bit intensity."""

import numpy as np

from ..output.raster import Raster


def quantize(field: np.ndarray) -> np.ndarray:
    """
    Map a normalized field to uint8 intensity.

    Values are clamped to [-1, 1] (silent saturation), mapped affinely via
    ``v * 127.5 + 127.5`` and rounded half away from zero, so -1 -> 0,
    0 -> 128 and 1 -> 255.

    Args:
        field: Normalized scalar field (any shape)

    Returns:
        uint8 array of the same shape
    """
    clamped = np.clip(np.asarray(field, dtype=np.float64), -1.0, 1.0)
    # Argument is non-negative, so floor(v + 0.5) rounds half away from zero
    scaled = np.floor(clamped * 127.5 + 127.5 + 0.5)
    return scaled.astype(np.uint8)


def to_raster(field: np.ndarray) -> Raster:
    """Quantize a [height, width] field into a row-major Raster."""
    if field.ndim != 2:
        raise ValueError(f"Expected a 2D field, got shape {field.shape}")
    return Raster.from_array(quantize(field))
