"""
Configuration schemas for perlinfield using Pydantic.

Provides type-safe, validated configuration models for all system components:
- Noise generation (dimensions, octaves, attenuation, seed)
- Output destinations (PNG image, optional HDF5 field archive)
- Logging

Every model is fully defaulted, so an empty YAML document reproduces the
reference configuration (512x512, 8 octaves, attenuation 0.75).
"""

from typing import Any, Literal, Optional, Tuple, Union
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# Reference seed pair (fractional hex digits of pi)
REFERENCE_SEED: Tuple[int, int] = (0x243F6A8885A308D3, 0x13198A2E03707344)

SEED_LIMIT = 1 << 64

# Cell sizes are 2**level; keep them within a 32-bit signed range
MAX_OCTAVES = 31


class ConfigurationError(ValueError):
    """Raised when a configuration is invalid, before any generation starts."""


def _parse_seed_part(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return int(value.strip(), 0)
        except ValueError:
            raise ValueError(f"Seed part must be an integer or 0x-prefixed hex string, got {value!r}")
    return value


# =============================================================================
# Noise Configuration
# =============================================================================


class NoiseConfig(BaseModel):
    """
    Fractal Perlin noise parameters.

    Valid ranges:
        height, width: positive integers (raster dimensions)
        octaves: 1..31 (coarsest cell size is 2**(octaves-1))
        attenuation: strictly between 0 and 1 (per-octave amplitude decay)
        seed: two unsigned 64-bit integers
    """

    model_config = ConfigDict(validate_assignment=True)

    height: int = Field(default=512, gt=0)
    width: int = Field(default=512, gt=0)
    octaves: int = Field(default=8, ge=1, le=MAX_OCTAVES)
    attenuation: float = Field(default=0.75, gt=0, lt=1)
    seed: Tuple[int, int] = REFERENCE_SEED

    @field_validator('seed', mode='before')
    @classmethod
    def parse_seed(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(_parse_seed_part(part) for part in v)
        return v

    @field_validator('seed')
    @classmethod
    def validate_seed(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        for part in v:
            if not 0 <= part < SEED_LIMIT:
                raise ValueError(f"Seed part {part} outside unsigned 64-bit range [0, 2**64)")
        return v

    @property
    def num_pixels(self) -> int:
        return self.height * self.width


# =============================================================================
# Output Configuration
# =============================================================================


class OutputConfig(BaseModel):
    """Output destinations and HDF5 storage options."""

    model_config = ConfigDict(validate_assignment=True)

    image_path: Path = Path("output.png")
    field_path: Optional[Path] = None
    compression: Literal["gzip", "lzf", "none"] = "gzip"
    compression_level: int = Field(default=4, ge=0, le=9)


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["structured", "plain"] = "plain"
    progress: bool = False


# =============================================================================
# Root Configuration
# =============================================================================


class MetadataConfig(BaseModel):
    """Run metadata stored alongside archived fields."""

    name: str = "perlinfield"
    description: str = ""


class PerlinFieldConfig(BaseModel):
    """
    Root configuration model for perlinfield.

    Example:
        ```python
        config = load_config(Path("configs/reference.yaml"))
        print(config.noise.octaves, config.output.image_path)
        ```
    """

    version: str = "1.0"
    metadata: MetadataConfig = Field(default_factory=MetadataConfig)
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def build_noise_config(**params: Union[int, float, Tuple[int, int]]) -> NoiseConfig:
    """
    Build a NoiseConfig from keyword arguments, raising ConfigurationError on failure.

    Example:
        >>> build_noise_config(height=64, width=64, octaves=3).octaves
        3
    """
    try:
        return NoiseConfig(**params)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid noise configuration:\n{e}") from e
