"""Per-octave gradient lattice construction."""

import math
from typing import Tuple

import numpy as np

from .random import SeededRandomSource
from ..utils.intmath import div_ceil


def grid_shape(height: int, width: int, cell_size: int) -> Tuple[int, int]:
    """
    Lattice shape covering a height x width raster at the given cell size.

    One extra row and column hold the far corners of the last cells.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    return div_ceil(height, cell_size) + 1, div_ceil(width, cell_size) + 1


def build_gradient_grid(
    source: SeededRandomSource, height: int, width: int, cell_size: int
) -> np.ndarray:
    """
    Build a grid of random unit gradients for one octave.

    Draws one sample per lattice point, row-major over i then j, and maps
    it to the angle ``theta = u * 2*pi``.

    Args:
        source: Random source (advanced by (h+1)*(w+1) samples)
        height: Raster height in pixels
        width: Raster width in pixels
        cell_size: Octave cell size in pixels

    Returns:
        Array [h+1, w+1, 2] holding (cos theta, sin theta) per lattice point
    """
    shape = grid_shape(height, width, cell_size)
    theta = source.sample_array(shape) * (2.0 * math.pi)

    grid = np.empty(shape + (2,), dtype=np.float64)
    grid[..., 0] = np.cos(theta)
    grid[..., 1] = np.sin(theta)
    return grid
