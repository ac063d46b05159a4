"""Output components: raster buffer, PNG encoding, HDF5 field archive."""

from .raster import Raster
from .png import read_png, write_png
from .archive import FieldArchiveReader, FieldArchiveWriter

__all__ = [
    "Raster",
    "read_png",
    "write_png",
    "FieldArchiveReader",
    "FieldArchiveWriter",
]
