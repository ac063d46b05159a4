"""
Info command for perlinfield CLI.

Displays raster dimensions, digest and intensity statistics for a PNG or
an HDF5 field archive.
"""

from argparse import ArgumentParser, Namespace
from pathlib import Path
import json

import numpy as np

from .base import CLICommand
from ..output import FieldArchiveReader, Raster, read_png

ARCHIVE_SUFFIXES = {".h5", ".hdf5"}


class InfoCommand(CLICommand):
    """Command to display information about a generated raster or archive."""

    @property
    def name(self) -> str:
        return "info"

    @property
    def help(self) -> str:
        return "Display raster or field archive information"

    @property
    def description(self) -> str:
        return """
Display information about a generated PNG or HDF5 field archive.

Examples:
  # Basic information
  perlinfield info --path output.png

  # Archive with full metadata
  perlinfield info --path renders/noise.h5 --verbose
        """

    def add_arguments(self, parser: ArgumentParser) -> None:
        """Add info command arguments."""
        parser.add_argument(
            "--path", type=Path, required=True, metavar="PATH", help="PNG image or HDF5 archive"
        )
        parser.add_argument(
            "--verbose", action="store_true", help="Show detailed information including metadata"
        )

    def execute(self, args: Namespace) -> int:
        """Execute info command."""
        if not self.validate_file_exists(args.path, "Input"):
            return 1

        try:
            if args.path.suffix.lower() in ARCHIVE_SUFFIXES:
                return self._print_archive_info(args.path, args.verbose)
            return self._print_image_info(args.path)
        except Exception as e:
            return self.error(f"Failed to read {args.path}: {e}")

    def _print_raster_stats(self, raster: Raster) -> None:
        pixels = raster.to_array()
        print("\nRaster:")
        print(f"  Size: {raster.width}x{raster.height} ({len(raster)} bytes)")
        print(f"  SHA-256: {raster.digest()}")
        print(
            f"  Intensity: min={int(pixels.min())} max={int(pixels.max())} "
            f"mean={pixels.mean():.2f} std={pixels.std():.2f}"
        )

    def _print_image_info(self, path: Path) -> int:
        raster = read_png(path)

        print("=" * 60)
        print(f"PERLINFIELD IMAGE: {path.name}")
        print("=" * 60)
        self._print_raster_stats(raster)
        print(f"\nFile size: {path.stat().st_size / 1024:.1f} KB")
        print("=" * 60)
        return 0

    def _print_archive_info(self, path: Path, verbose: bool) -> int:
        with FieldArchiveReader(path) as reader:
            metadata = reader.get_metadata()
            field = reader.get_field()
            raster = reader.get_raster()
            octaves = reader.get_octaves()

        print("=" * 60)
        print(f"PERLINFIELD ARCHIVE: {path.name}")
        print("=" * 60)

        print("\nMetadata:")
        print(f"  Version: {metadata.get('version', 'unknown')}")
        print(f"  Created: {metadata.get('creation_date', 'unknown')}")
        print(f"  Scale sum: {metadata.get('scale_sum', 'unknown')}")

        print("\nField:")
        print(f"  Shape: {field.shape} {field.dtype}")
        print(f"  Range: [{np.min(field):.6f}, {np.max(field):.6f}]")

        self._print_raster_stats(raster)
        stored = metadata.get("digest")
        if stored is not None and stored != raster.digest():
            print(f"  ✗ Stored digest mismatch: {stored}")

        print(f"\nOctaves ({len(octaves)}):")
        for octave in octaves:
            print(
                f"  level={octave['level']:2d} cell_size={octave['cell_size']:6d} "
                f"amplitude={octave['amplitude']:.6f}"
            )

        if verbose:
            print("\nFull Metadata:")
            print(json.dumps(metadata, indent=2, default=str))

        print(f"\nFile size: {path.stat().st_size / (1024**2):.2f} MB")
        print("=" * 60)
        return 0
