"""
Visualize command for perlinfield CLI.

Renders a raster preview with its intensity histogram.
"""

from argparse import ArgumentParser, Namespace
from pathlib import Path

from .base import CLICommand
from .info import ARCHIVE_SUFFIXES
from ..output import FieldArchiveReader, read_png


class VisualizeCommand(CLICommand):
    """Command to render a preview figure for a PNG or field archive."""

    @property
    def name(self) -> str:
        return "visualize"

    @property
    def help(self) -> str:
        return "Render a raster preview with intensity histogram"

    @property
    def description(self) -> str:
        return """
Render a raster next to its intensity histogram.

Examples:
  perlinfield visualize --input output.png --output preview.png
  perlinfield visualize --input renders/noise.h5 --output preview.svg --bins 128
        """

    def add_arguments(self, parser: ArgumentParser) -> None:
        """Add visualize command arguments."""
        parser.add_argument(
            "--input", type=Path, required=True, metavar="PATH", help="PNG image or HDF5 archive"
        )
        parser.add_argument(
            "--output", type=Path, required=True, metavar="PATH", help="Figure output path"
        )
        parser.add_argument(
            "--bins", type=int, default=64, metavar="N", help="Histogram bins (default: 64)"
        )

    def execute(self, args: Namespace) -> int:
        """Execute preview rendering."""
        from ..visualization import RasterPreviewPlotter

        if not self.validate_file_exists(args.input, "Input"):
            return 1

        try:
            if args.input.suffix.lower() in ARCHIVE_SUFFIXES:
                with FieldArchiveReader(args.input) as reader:
                    raster = reader.get_raster()
            else:
                raster = read_png(args.input)

            plotter = RasterPreviewPlotter(bins=args.bins)
            output = plotter.save(raster, args.output, title=args.input.name)
        except Exception as e:
            return self.error(f"Visualization failed: {e}")

        print(f"✓ Preview saved: {output}")
        return 0
