"""Fractal Perlin noise generation core."""

from .random import SeededRandomSource
from .gradients import build_gradient_grid, grid_shape
from .sampler import dot_grid_gradient, interpolate, perlin, perlin_lattice, smoothstep
from .octaves import FractalNoiseGenerator, NoiseField, Octave, generate_noise, octave_schedule
from .quantize import quantize, to_raster

__all__ = [
    "SeededRandomSource",
    "build_gradient_grid",
    "grid_shape",
    "dot_grid_gradient",
    "interpolate",
    "perlin",
    "perlin_lattice",
    "smoothstep",
    "FractalNoiseGenerator",
    "NoiseField",
    "Octave",
    "generate_noise",
    "octave_schedule",
    "quantize",
    "to_raster",
]
