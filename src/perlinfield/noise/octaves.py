"""
Multi-octave fractal noise accumulation.

Octaves run coarsest first: level ``octaves-1`` down to 0, cell size
``2**level``, amplitude starting at 1.0 and multiplied by the attenuation
factor after each octave. The accumulated field is divided by the sum of
amplitudes (a weighted average, not a min/max rescale), so its scale does
not depend on the octave count.

All octaves draw from one random source, in schedule order. Octave k's
gradients therefore depend on every earlier octave's lattice size; changing
height, width or octaves changes the whole field, not just the extra detail.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from tqdm import tqdm

from .gradients import build_gradient_grid
from .quantize import to_raster
from .random import SeededRandomSource
from .sampler import perlin_lattice
from ..config.schema import NoiseConfig, build_noise_config
from ..output.raster import Raster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Octave:
    """One noise pass: cell size 2**level weighted by amplitude."""

    level: int
    cell_size: int
    amplitude: float


@dataclass(frozen=True)
class NoiseField:
    """Normalized fractal noise plus the schedule that produced it."""

    values: np.ndarray
    octaves: Tuple[Octave, ...]
    scale_sum: float

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape


def octave_schedule(octaves: int, attenuation: float) -> List[Octave]:
    """
    Build the octave schedule, coarsest first.

    Example:
        >>> [o.cell_size for o in octave_schedule(3, 0.5)]
        [4, 2, 1]
        >>> [o.amplitude for o in octave_schedule(3, 0.5)]
        [1.0, 0.5, 0.25]
    """
    if octaves < 1:
        raise ValueError(f"octaves must be >= 1, got {octaves}")

    schedule = []
    amplitude = 1.0
    for level in reversed(range(octaves)):
        schedule.append(Octave(level=level, cell_size=1 << level, amplitude=amplitude))
        amplitude *= attenuation
    return schedule


class FractalNoiseGenerator:
    """
    Seeded fractal Perlin noise over a fixed raster.

    Every ``generate`` call starts from a fresh random source, so repeated
    calls return identical fields.

    Example:
        ```python
        generator = FractalNoiseGenerator(NoiseConfig(height=256, width=256))
        field = generator.generate()
        print(field.scale_sum, field.values.shape)

        raster = generator.generate_raster()
        print(raster.digest())
        ```
    """

    def __init__(self, config: NoiseConfig):
        """
        Initialize generator.

        Args:
            config: Validated noise configuration
        """
        self.config = config
        self.schedule = octave_schedule(config.octaves, config.attenuation)

    def _accumulate_octave(
        self, field: np.ndarray, source: SeededRandomSource, octave: Octave
    ) -> None:
        height, width = field.shape
        grid = build_gradient_grid(source, height, width, octave.cell_size)

        xs = np.arange(height, dtype=np.float64) / octave.cell_size
        ys = np.arange(width, dtype=np.float64) / octave.cell_size
        field += perlin_lattice(grid, xs, ys) * octave.amplitude

        logger.debug(
            f"Octave level={octave.level} cell_size={octave.cell_size} "
            f"grid={grid.shape[0]}x{grid.shape[1]} amplitude={octave.amplitude:.6f}"
        )

    def generate(self, progress: bool = False) -> NoiseField:
        """
        Generate the normalized noise field.

        Args:
            progress: Show a tqdm progress bar over octaves

        Returns:
            NoiseField with values [height, width]
        """
        cfg = self.config
        source = SeededRandomSource(cfg.seed)
        field = np.zeros((cfg.height, cfg.width), dtype=np.float64)

        scale_sum = 0.0
        for octave in tqdm(self.schedule, desc="Octaves", disable=not progress):
            self._accumulate_octave(field, source, octave)
            scale_sum += octave.amplitude

        field /= scale_sum
        field.setflags(write=False)

        logger.info(
            f"Generated {cfg.height}x{cfg.width} field over {cfg.octaves} octaves "
            f"(scale_sum={scale_sum:.6f})"
        )
        return NoiseField(values=field, octaves=tuple(self.schedule), scale_sum=scale_sum)

    def generate_raster(self, progress: bool = False) -> Raster:
        """Generate and quantize in one step."""
        return to_raster(self.generate(progress=progress).values)


def generate_noise(**params) -> Raster:
    """
    Generate a raster from keyword parameters.

    Accepts the NoiseConfig fields (height, width, octaves, attenuation,
    seed); unset fields take the reference defaults.

    Raises:
        ConfigurationError: If the parameters are invalid
    """
    return FractalNoiseGenerator(build_noise_config(**params)).generate_raster()
