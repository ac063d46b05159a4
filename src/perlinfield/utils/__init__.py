"""Numeric utilities for perlinfield."""

from .intmath import (
    div_ceil,
    div_floor,
    gcd,
    highest_one,
    lowest_one,
    sig_bits,
    trailing_zeros,
)

__all__ = [
    "div_ceil",
    "div_floor",
    "gcd",
    "highest_one",
    "lowest_one",
    "sig_bits",
    "trailing_zeros",
]
