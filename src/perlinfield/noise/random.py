"""
Seeded random source for gradient generation.

Wraps numpy's PCG64 bit generator seeded from a fixed pair of 64-bit
integers via SeedSequence. The stream is fully determined by the seed pair:
no reseeding and no external entropy.

Consumption contract: one float64 per gradient lattice point, row-major.
Drawing an array of n samples advances the stream exactly like n scalar
draws, so ``sample_array((h, w))`` equals h*w sequential ``sample()`` calls
laid out row by row.
"""

from typing import Tuple, Union

import numpy as np

from ..config.schema import ConfigurationError, SEED_LIMIT


class SeededRandomSource:
    """
    Deterministic stream of uniform samples in [0, 1).

    Example:
        ```python
        source = SeededRandomSource((0x243F6A8885A308D3, 0x13198A2E03707344))
        u = source.sample()
        block = source.sample_array((3, 4))
        ```
    """

    def __init__(self, seed: Tuple[int, int]):
        """
        Initialize random source.

        Args:
            seed: Pair of unsigned 64-bit integers

        Raises:
            ConfigurationError: If the seed is not a pair of values in [0, 2**64)
        """
        seed = tuple(seed)
        if len(seed) != 2:
            raise ConfigurationError(f"Seed must be a pair of integers, got {seed!r}")
        for part in seed:
            if not 0 <= part < SEED_LIMIT:
                raise ConfigurationError(
                    f"Seed part {part} outside unsigned 64-bit range [0, 2**64)"
                )

        self._seed = (int(seed[0]), int(seed[1]))
        self._rng = np.random.Generator(
            np.random.PCG64(np.random.SeedSequence(list(self._seed)))
        )

    @property
    def seed(self) -> Tuple[int, int]:
        return self._seed

    def sample(self) -> float:
        """Draw one uniform sample in [0, 1)."""
        return float(self._rng.random())

    def sample_array(self, shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
        """Draw a row-major block of uniform samples in [0, 1) (float64)."""
        return self._rng.random(shape)
