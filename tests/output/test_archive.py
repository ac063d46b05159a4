"""Tests for the HDF5 field archive."""

import h5py
import numpy as np
import pytest

from perlinfield.config import NoiseConfig
from perlinfield.noise import FractalNoiseGenerator, to_raster
from perlinfield.output.archive import FieldArchiveReader, FieldArchiveWriter


@pytest.fixture
def generated():
    """Small generated field and its raster."""
    field = FractalNoiseGenerator(NoiseConfig(height=24, width=16, octaves=3)).generate()
    return field, to_raster(field.values)


class TestFieldArchive:
    """Test archive writing and reading."""

    @pytest.mark.parametrize("compression", ["gzip", "lzf", "none"])
    def test_round_trip(self, tmp_path, generated, compression):
        field, raster = generated
        path = tmp_path / "field.h5"

        with FieldArchiveWriter(path, compression=compression) as writer:
            writer.write_field(field, raster)

        with FieldArchiveReader(path) as reader:
            np.testing.assert_array_equal(reader.get_field(), field.values)
            assert reader.get_raster() == raster

    def test_octave_table(self, tmp_path, generated):
        field, raster = generated
        path = tmp_path / "field.h5"
        with FieldArchiveWriter(path) as writer:
            writer.write_field(field, raster)

        with FieldArchiveReader(path) as reader:
            octaves = reader.get_octaves()

        assert [o["cell_size"] for o in octaves] == [4, 2, 1]
        assert [o["level"] for o in octaves] == [2, 1, 0]
        assert octaves[1]["amplitude"] == pytest.approx(0.75)

    def test_metadata(self, tmp_path, generated):
        field, raster = generated
        path = tmp_path / "field.h5"
        with FieldArchiveWriter(path) as writer:
            writer.write_field(field, raster)
            writer.write_metadata({"name": "test", "config": {"noise": {"octaves": 3}}})

        with FieldArchiveReader(path) as reader:
            metadata = reader.get_metadata()

        assert metadata["name"] == "test"
        assert metadata["config"] == {"noise": {"octaves": 3}}
        assert metadata["height"] == 24
        assert metadata["width"] == 16
        assert metadata["digest"] == raster.digest()
        assert metadata["scale_sum"] == pytest.approx(field.scale_sum)
        assert metadata["version"] == "1.0"
        assert "creation_date" in metadata

    def test_layout(self, tmp_path, generated):
        field, raster = generated
        path = tmp_path / "field.h5"
        with FieldArchiveWriter(path) as writer:
            writer.write_field(field, raster)

        with h5py.File(path, "r") as f:
            assert f["field"].shape == (24, 16)
            assert f["field"].dtype == np.float64
            assert f["raster"].dtype == np.uint8

    def test_shape_mismatch(self, tmp_path, generated):
        field, _ = generated
        other = FractalNoiseGenerator(NoiseConfig(height=8, width=8, octaves=1)).generate_raster()
        with FieldArchiveWriter(tmp_path / "field.h5") as writer:
            with pytest.raises(ValueError, match="does not match"):
                writer.write_field(field, other)

    def test_write_requires_open(self, tmp_path, generated):
        field, raster = generated
        writer = FieldArchiveWriter(tmp_path / "field.h5")
        with pytest.raises(RuntimeError, match="not opened"):
            writer.write_field(field, raster)

    def test_read_requires_open(self, tmp_path):
        with pytest.raises(RuntimeError, match="not opened"):
            FieldArchiveReader(tmp_path / "missing.h5").get_field()
