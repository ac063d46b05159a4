"""Wall-clock timing utilities for pipeline stages."""

import time
import threading
from typing import Dict, List, Optional
from dataclasses import dataclass
from collections import defaultdict


@dataclass
class TimingRecord:
    """Single timing measurement."""

    name: str
    elapsed_ms: float


class StageTimer:
    """
    Context manager measuring elapsed wall-clock time with perf_counter.

    When an accumulator is given, the measurement is recorded on exit.

    Example:
        ```python
        accumulator = TimingAccumulator()
        with StageTimer("noise", accumulator) as timer:
            field = generator.generate()
        print(timer.elapsed_ms())
        ```
    """

    def __init__(self, name: str, accumulator: Optional["TimingAccumulator"] = None):
        self.name = name
        self.accumulator = accumulator
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.end_time = None
        return self

    def __exit__(self, *args):
        self.end_time = time.perf_counter()
        if self.accumulator is not None:
            self.accumulator.add(self.name, self.elapsed_ms())

    def elapsed_ms(self) -> float:
        """Elapsed milliseconds (running total if the stage hasn't finished)."""
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.perf_counter()
        return (end - self.start_time) * 1000.0


class TimingAccumulator:
    """
    Thread-safe accumulator for timing measurements.

    Collects timing records and provides aggregate statistics per stage.
    """

    def __init__(self):
        self.records: List[TimingRecord] = []
        self.lock = threading.Lock()

    def add(self, name: str, elapsed_ms: float):
        """Add timing record (thread-safe)."""
        with self.lock:
            self.records.append(TimingRecord(name=name, elapsed_ms=elapsed_ms))

    def get_stats(self) -> Dict[str, Dict[str, float]]:
        """
        Compute aggregate statistics per stage.

        Returns:
            Dict mapping stage name to stats dict containing:
                - total_ms: Total time across all measurements
                - count: Number of measurements
                - mean_ms: Average time per measurement
                - min_ms: Minimum time
                - max_ms: Maximum time
        """
        stats = defaultdict(
            lambda: {
                "total_ms": 0.0,
                "count": 0,
                "mean_ms": 0.0,
                "min_ms": float("inf"),
                "max_ms": 0.0,
            }
        )

        with self.lock:
            for record in self.records:
                s = stats[record.name]
                s["total_ms"] += record.elapsed_ms
                s["count"] += 1
                s["min_ms"] = min(s["min_ms"], record.elapsed_ms)
                s["max_ms"] = max(s["max_ms"], record.elapsed_ms)

        for s in stats.values():
            if s["count"] > 0:
                s["mean_ms"] = s["total_ms"] / s["count"]

        return dict(stats)

    def clear(self):
        """Clear all timing records."""
        with self.lock:
            self.records.clear()

    def __len__(self) -> int:
        """Get number of timing records."""
        with self.lock:
            return len(self.records)
