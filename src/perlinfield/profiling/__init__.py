"""Stage timing utilities for noise generation runs."""

from .timers import StageTimer, TimingAccumulator, TimingRecord

__all__ = [
    "StageTimer",
    "TimingAccumulator",
    "TimingRecord",
]
