"""Tests for stage timing utilities."""

import time

import pytest

from perlinfield.profiling import StageTimer, TimingAccumulator


class TestStageTimer:
    """Test context-manager timing."""

    def test_measures_elapsed(self):
        with StageTimer("sleep") as timer:
            time.sleep(0.01)
        assert timer.elapsed_ms() >= 9.0

    def test_not_started(self):
        assert StageTimer("idle").elapsed_ms() == 0.0

    def test_records_into_accumulator(self):
        accumulator = TimingAccumulator()
        with StageTimer("noise", accumulator):
            pass
        assert len(accumulator) == 1
        assert accumulator.records[0].name == "noise"

    def test_records_on_exception(self):
        accumulator = TimingAccumulator()
        with pytest.raises(RuntimeError):
            with StageTimer("failing", accumulator):
                raise RuntimeError("boom")
        assert len(accumulator) == 1


class TestTimingAccumulator:
    """Test aggregate statistics."""

    def test_stats(self):
        accumulator = TimingAccumulator()
        for ms in (1.0, 2.0, 6.0):
            accumulator.add("png", ms)
        accumulator.add("noise", 10.0)

        stats = accumulator.get_stats()
        assert stats["png"]["count"] == 3
        assert stats["png"]["total_ms"] == pytest.approx(9.0)
        assert stats["png"]["mean_ms"] == pytest.approx(3.0)
        assert stats["png"]["min_ms"] == 1.0
        assert stats["png"]["max_ms"] == 6.0
        assert stats["noise"]["count"] == 1

    def test_empty(self):
        assert TimingAccumulator().get_stats() == {}

    def test_clear(self):
        accumulator = TimingAccumulator()
        accumulator.add("x", 1.0)
        accumulator.clear()
        assert len(accumulator) == 0
