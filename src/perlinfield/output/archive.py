"""
HDF5 archive for generated noise fields.

Keeps the full-precision normalized field next to its quantized raster so
downstream tools can requantize or analyze without regenerating.

Schema:
    / (attrs)
        - creation_date, version
        - height, width, scale_sum, digest
        - any extra metadata (complex values as JSON strings)
    /field   [H, W] float64 - normalized scalar field
    /raster  [H, W] uint8   - quantized intensities
    /octaves [K] (level, cell_size, amplitude) - schedule, coarsest first
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

import h5py
import numpy as np

from .raster import Raster

logger = logging.getLogger(__name__)

ARCHIVE_VERSION = "1.0"

OCTAVE_DTYPE = np.dtype([("level", np.int32), ("cell_size", np.int64), ("amplitude", np.float64)])


class FieldArchiveWriter:
    """
    HDF5 writer for a single generated field.

    Example:
        ```python
        with FieldArchiveWriter(Path("field.h5")) as writer:
            writer.write_field(noise_field, raster)
            writer.write_metadata({"config": config.model_dump(mode="json")})
        ```
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "gzip",
        compression_opts: int = 4,
    ):
        """
        Initialize archive writer.

        Args:
            output_path: Path to output HDF5 file
            compression: Compression algorithm ("gzip", "lzf", "none")
            compression_opts: Compression level (0-9 for gzip)
        """
        self.output_path = Path(output_path)
        self.compression = compression if compression != "none" else None
        self.compression_opts = compression_opts if compression == "gzip" else None
        self.file: Optional[h5py.File] = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def open(self) -> None:
        """Create HDF5 file and write header attributes."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        self.file = h5py.File(self.output_path, "w")
        self.file.attrs["creation_date"] = datetime.now().isoformat()
        self.file.attrs["version"] = ARCHIVE_VERSION

    def close(self) -> None:
        if self.file is not None:
            self.file.close()
            self.file = None

    def write_field(self, noise_field: Any, raster: Raster) -> None:
        """
        Write the normalized field, its raster and the octave schedule.

        Args:
            noise_field: NoiseField from FractalNoiseGenerator.generate()
            raster: Quantized raster of the same field
        """
        if self.file is None:
            raise RuntimeError("HDF5 file not opened. Use context manager or call open()")

        values = np.asarray(noise_field.values, dtype=np.float64)
        if values.shape != (raster.height, raster.width):
            raise ValueError(
                f"Field shape {values.shape} does not match raster "
                f"{raster.height}x{raster.width}"
            )

        self.file.create_dataset(
            "field",
            data=values,
            compression=self.compression,
            compression_opts=self.compression_opts,
        )
        self.file.create_dataset(
            "raster",
            data=raster.to_array(),
            compression=self.compression,
            compression_opts=self.compression_opts,
        )

        octaves = np.array(
            [(o.level, o.cell_size, o.amplitude) for o in noise_field.octaves],
            dtype=OCTAVE_DTYPE,
        )
        self.file.create_dataset("octaves", data=octaves)

        self.file.attrs["height"] = raster.height
        self.file.attrs["width"] = raster.width
        self.file.attrs["scale_sum"] = float(noise_field.scale_sum)
        self.file.attrs["digest"] = raster.digest()

        logger.info(f"Archived {raster.height}x{raster.width} field: {self.output_path}")

    def write_metadata(self, metadata: Dict[str, Any]) -> None:
        """
        Write metadata attributes.

        Dicts and lists are stored as JSON strings; scalars as-is.
        """
        if self.file is None:
            raise RuntimeError("HDF5 file not opened")

        for key, value in metadata.items():
            if isinstance(value, (dict, list)):
                self.file.attrs[key] = json.dumps(value, indent=2)
            elif isinstance(value, (str, int, float, bool)):
                self.file.attrs[key] = value
            else:
                self.file.attrs[key] = json.dumps(value, default=str)


class FieldArchiveReader:
    """
    Reader for field archives.

    Example:
        ```python
        with FieldArchiveReader(Path("field.h5")) as reader:
            metadata = reader.get_metadata()
            field = reader.get_field()
            raster = reader.get_raster()
        ```
    """

    def __init__(self, archive_path: Path):
        self.archive_path = Path(archive_path)
        self.file: Optional[h5py.File] = None

    def __enter__(self):
        self.file = h5py.File(self.archive_path, "r")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.file:
            self.file.close()
            self.file = None

    def _require_open(self) -> h5py.File:
        if self.file is None:
            raise RuntimeError("HDF5 file not opened")
        return self.file

    def get_metadata(self) -> Dict[str, Any]:
        """Get root attributes, decoding JSON strings."""
        metadata = dict(self._require_open().attrs)

        for key, value in metadata.items():
            if isinstance(value, bytes):
                value = value.decode("utf-8")
                metadata[key] = value
            if isinstance(value, str) and (value.startswith("{") or value.startswith("[")):
                try:
                    metadata[key] = json.loads(value)
                except json.JSONDecodeError:
                    pass
            elif isinstance(value, np.generic):
                metadata[key] = value.item()

        return metadata

    def get_field(self) -> np.ndarray:
        """Get the normalized field [H, W]."""
        return cast(h5py.Dataset, self._require_open()["field"])[()]

    def get_raster(self) -> Raster:
        """Get the quantized raster."""
        pixels = cast(h5py.Dataset, self._require_open()["raster"])[()]
        return Raster.from_array(np.asarray(pixels, dtype=np.uint8))

    def get_octaves(self) -> List[Dict[str, Any]]:
        """Get the octave schedule as dicts, coarsest first."""
        table = cast(h5py.Dataset, self._require_open()["octaves"])[()]
        return [
            {"level": int(row["level"]), "cell_size": int(row["cell_size"]), "amplitude": float(row["amplitude"])}
            for row in table
        ]
