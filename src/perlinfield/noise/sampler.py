"""
Perlin noise sampling against a single gradient grid.

Coordinates are in grid-cell units (pixel index divided by cell size).
The first grid axis pairs with x, the second with y.

Two forms share the same arithmetic:
- ``perlin``: one point, plain Python floats
- ``perlin_lattice``: every (xs[i], ys[j]) pair at once via broadcasting
"""

import math
from typing import Union

import numpy as np

ArrayOrFloat = Union[float, np.ndarray]


def smoothstep(w: ArrayOrFloat) -> ArrayOrFloat:
    """Ease curve 3w^2 - 2w^3 (C1-continuous at cell boundaries)."""
    return w * w * (3.0 - 2.0 * w)


def interpolate(a0: ArrayOrFloat, a1: ArrayOrFloat, w: ArrayOrFloat) -> ArrayOrFloat:
    """
    Smoothstep interpolation between a0 and a1.

    Equal to ``a0 + smoothstep(w) * (a1 - a0)``; written as a weighted sum
    so that w=0 returns exactly a0 and w=1 returns exactly a1.
    """
    s = smoothstep(w)
    return a0 * (1.0 - s) + a1 * s


def dot_grid_gradient(grid: np.ndarray, ix: int, iy: int, x: float, y: float) -> float:
    """Dot product of the gradient at lattice point (ix, iy) with the offset to (x, y)."""
    gx, gy = grid[ix, iy]
    return (x - ix) * float(gx) + (y - iy) * float(gy)


def _check_bounds(grid: np.ndarray, x0: int, y0: int, x1: int, y1: int) -> None:
    if x0 < 0 or y0 < 0 or x1 >= grid.shape[0] or y1 >= grid.shape[1]:
        raise IndexError(
            f"Cell corners ({x0}, {y0})-({x1}, {y1}) outside gradient grid "
            f"of shape {grid.shape[:2]}"
        )


def perlin(grid: np.ndarray, x: float, y: float) -> float:
    """
    Evaluate Perlin noise at (x, y).

    Args:
        grid: Gradient grid [H, W, 2]
        x: Coordinate along the first grid axis (cell units)
        y: Coordinate along the second grid axis (cell units)

    Returns:
        Noise value, roughly in [-0.71, 0.71] for unit gradients

    Raises:
        IndexError: If the enclosing cell is not fully inside the grid
    """
    x0 = math.floor(x)
    y0 = math.floor(y)
    x1 = x0 + 1
    y1 = y0 + 1
    _check_bounds(grid, x0, y0, x1, y1)

    sx = x - x0
    sy = y - y0

    n0 = dot_grid_gradient(grid, x0, y0, x, y)
    n1 = dot_grid_gradient(grid, x1, y0, x, y)
    ix0 = interpolate(n0, n1, sx)

    n0 = dot_grid_gradient(grid, x0, y1, x, y)
    n1 = dot_grid_gradient(grid, x1, y1, x, y)
    ix1 = interpolate(n0, n1, sx)

    return interpolate(ix0, ix1, sy)


def perlin_lattice(grid: np.ndarray, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Evaluate Perlin noise on the outer product of two coordinate vectors.

    Args:
        grid: Gradient grid [H, W, 2]
        xs: Coordinates along the first grid axis [N]
        ys: Coordinates along the second grid axis [M]

    Returns:
        Array [N, M] with ``out[i, j] == perlin(grid, xs[i], ys[j])``

    Raises:
        IndexError: If any enclosing cell is not fully inside the grid
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if xs.size == 0 or ys.size == 0:
        return np.zeros((xs.size, ys.size), dtype=np.float64)

    x0 = np.floor(xs).astype(np.intp)
    y0 = np.floor(ys).astype(np.intp)
    x1 = x0 + 1
    y1 = y0 + 1
    _check_bounds(grid, int(x0.min()), int(y0.min()), int(x1.max()), int(y1.max()))

    # Broadcast: rows follow x, columns follow y
    sx = (xs - x0)[:, None]
    sy = (ys - y0)[None, :]
    dx0 = (xs - x0)[:, None]
    dx1 = (xs - x1)[:, None]
    dy0 = (ys - y0)[None, :]
    dy1 = (ys - y1)[None, :]

    g00 = grid[x0[:, None], y0[None, :]]
    g10 = grid[x1[:, None], y0[None, :]]
    g01 = grid[x0[:, None], y1[None, :]]
    g11 = grid[x1[:, None], y1[None, :]]

    n00 = dx0 * g00[..., 0] + dy0 * g00[..., 1]
    n10 = dx1 * g10[..., 0] + dy0 * g10[..., 1]
    n01 = dx0 * g01[..., 0] + dy1 * g01[..., 1]
    n11 = dx1 * g11[..., 0] + dy1 * g11[..., 1]

    ix0 = interpolate(n00, n10, sx)
    ix1 = interpolate(n01, n11, sx)
    return interpolate(ix0, ix1, sy)
