"""
perlinfield - seeded fractal Perlin noise rasters.

Example:
    ```python
    from perlinfield import generate_noise

    raster = generate_noise(height=256, width=256, octaves=6)
    print(raster.digest())
    ```
"""

__version__ = "1.0.0"

from .config import ConfigurationError, NoiseConfig, PerlinFieldConfig
from .noise import FractalNoiseGenerator, NoiseField, generate_noise
from .output import Raster

__all__ = [
    "__version__",
    "ConfigurationError",
    "NoiseConfig",
    "PerlinFieldConfig",
    "FractalNoiseGenerator",
    "NoiseField",
    "generate_noise",
    "Raster",
]
