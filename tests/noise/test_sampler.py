"""Tests for the Perlin sampler.

Tests for:
1. interpolate: smoothstep kernel endpoints and monotonicity
2. perlin: scalar evaluation, lattice zeros, bounds, continuity
3. perlin_lattice: agreement with the scalar form
"""

import math

import numpy as np
import pytest

from perlinfield.noise.gradients import build_gradient_grid
from perlinfield.noise.random import SeededRandomSource
from perlinfield.noise.sampler import (
    dot_grid_gradient,
    interpolate,
    perlin,
    perlin_lattice,
    smoothstep,
)


@pytest.fixture
def grid():
    """Gradient grid covering 8x8 cells."""
    return build_gradient_grid(SeededRandomSource((42, 7)), 8, 8, 1)


# =============================================================================
# Interpolation Kernel Tests
# =============================================================================


class TestInterpolate:
    """Test the smoothstep interpolation kernel."""

    @pytest.mark.parametrize(
        "a0,a1",
        [(0.0, 1.0), (0.1, 0.3), (-2.5, 7.25), (1e300, -1e300), (-0.7071, 0.7071), (3.0, 3.0)],
    )
    def test_endpoints(self, a0, a1):
        assert interpolate(a0, a1, 0.0) == a0
        assert interpolate(a0, a1, 1.0) == a1

    def test_midpoint(self):
        assert interpolate(2.0, 4.0, 0.5) == pytest.approx(3.0)

    def test_smoothstep_values(self):
        assert smoothstep(0.0) == 0.0
        assert smoothstep(1.0) == 1.0
        assert smoothstep(0.25) == pytest.approx(3 * 0.0625 - 2 * 0.015625)

    @pytest.mark.parametrize("a0,a1", [(0.0, 1.0), (-3.0, 5.0), (0.2, 0.2000001)])
    def test_monotonic(self, a0, a1):
        w = np.linspace(0.0, 1.0, 1001)
        values = interpolate(a0, a1, w)
        assert np.all(np.diff(values) >= -1e-15 * max(abs(a0), abs(a1), 1.0))
        assert values.min() >= min(a0, a1) - 1e-15
        assert values.max() <= max(a0, a1) + 1e-15

    def test_zero_slope_at_endpoints(self):
        """Smoothstep derivative vanishes at 0 and 1 (no creases at cell edges)."""
        h = 1e-6
        assert (smoothstep(h) - smoothstep(0.0)) / h == pytest.approx(0.0, abs=1e-5)
        assert (smoothstep(1.0) - smoothstep(1.0 - h)) / h == pytest.approx(0.0, abs=1e-5)

    def test_array_inputs(self):
        out = interpolate(np.zeros(3), np.ones(3), np.array([0.0, 0.5, 1.0]))
        np.testing.assert_allclose(out, [0.0, 0.5, 1.0])


# =============================================================================
# Scalar Perlin Tests
# =============================================================================


class TestPerlin:
    """Test scalar Perlin evaluation."""

    def test_dot_grid_gradient(self, grid):
        gx, gy = grid[2, 3]
        assert dot_grid_gradient(grid, 2, 3, 2.5, 3.25) == pytest.approx(0.5 * gx + 0.25 * gy)

    @pytest.mark.parametrize("x,y", [(0.0, 0.0), (3.0, 5.0), (7.0, 1.0)])
    def test_zero_at_lattice_points(self, grid, x, y):
        assert perlin(grid, x, y) == 0.0

    def test_bounded(self, grid):
        rng = np.random.default_rng(0)
        points = rng.random((2000, 2)) * 8.0
        values = [perlin(grid, float(x), float(y)) for x, y in points]
        assert max(abs(v) for v in values) <= math.sqrt(2.0) / 2.0 + 1e-9

    def test_continuous_across_cell_boundary(self, grid):
        y = 2.37
        left = perlin(grid, 3.0 - 1e-9, y)
        right = perlin(grid, 3.0, y)
        assert left == pytest.approx(right, abs=1e-6)

    def test_single_cell_matches_manual_computation(self, grid):
        x, y = 1.3, 4.6
        n00 = dot_grid_gradient(grid, 1, 4, x, y)
        n10 = dot_grid_gradient(grid, 2, 4, x, y)
        n01 = dot_grid_gradient(grid, 1, 5, x, y)
        n11 = dot_grid_gradient(grid, 2, 5, x, y)
        sx, sy = x - 1, y - 4
        expected = interpolate(interpolate(n00, n10, sx), interpolate(n01, n11, sx), sy)
        assert perlin(grid, x, y) == pytest.approx(expected)

    @pytest.mark.parametrize("x,y", [(-0.5, 1.0), (1.0, -0.1), (8.0, 1.0), (1.0, 8.5)])
    def test_out_of_range(self, grid, x, y):
        with pytest.raises(IndexError, match="outside gradient grid"):
            perlin(grid, x, y)


# =============================================================================
# Vectorized Perlin Tests
# =============================================================================


class TestPerlinLattice:
    """Test vectorized evaluation."""

    def test_shape(self, grid):
        out = perlin_lattice(grid, np.arange(8) / 2.0, np.arange(5) / 4.0)
        assert out.shape == (8, 5)

    def test_matches_scalar(self, grid):
        xs = np.arange(16) / 2.0
        ys = np.linspace(0.0, 7.9, 11)
        out = perlin_lattice(grid, xs, ys)

        for i, x in enumerate(xs):
            for j, y in enumerate(ys):
                assert out[i, j] == pytest.approx(perlin(grid, float(x), float(y)), abs=1e-12)

    def test_zero_on_integer_coordinates(self, grid):
        out = perlin_lattice(grid, np.arange(8.0), np.arange(8.0))
        np.testing.assert_array_equal(out, np.zeros((8, 8)))

    def test_empty_inputs(self, grid):
        assert perlin_lattice(grid, np.array([]), np.arange(3.0)).shape == (0, 3)

    def test_out_of_range(self, grid):
        with pytest.raises(IndexError):
            perlin_lattice(grid, np.array([0.5, 8.2]), np.array([0.5]))
