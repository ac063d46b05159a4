"""
Generate command for perlinfield CLI.

Handles raster generation with configuration loading and pipeline execution.
"""

from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Dict, Any
import sys
import time

from .base import ConfigurableCommand
from ..config import ConfigurationError, configure_logging


def _int_auto(text: str) -> int:
    """Parse decimal or 0x-prefixed integers."""
    return int(text, 0)


class GenerateCommand(ConfigurableCommand):
    """
    Command to generate a fractal noise raster.

    Loads configuration, applies overrides, and executes the generation pipeline.
    """

    @property
    def name(self) -> str:
        return "generate"

    @property
    def help(self) -> str:
        return "Generate a noise raster"

    @property
    def description(self) -> str:
        return """
Generate a seeded fractal Perlin noise raster and write it as a grayscale PNG.

Examples:
  # Reference configuration (512x512, 8 octaves, attenuation 0.75)
  perlinfield generate

  # From a configuration file with overrides
  perlinfield generate --config configs/reference.yaml \\
      --output renders/noise.png \\
      --octaves 6 --attenuation 0.5

  # Custom seed and an HDF5 archive of the full-precision field
  perlinfield generate --seed 0x1 0x2 --field-output renders/noise.h5

  # Layer a run-specific YAML over a base configuration
  perlinfield generate --config configs/reference.yaml --config-override small.yaml

  # Dry run to validate configuration
  perlinfield generate --config configs/reference.yaml --dry-run
        """

    def add_arguments(self, parser: ArgumentParser) -> None:
        """Add generate command arguments."""
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to YAML configuration file (defaults to the reference configuration)",
        )
        parser.add_argument(
            "--config-override",
            type=Path,
            metavar="PATH",
            help="YAML file deep-merged over --config (e.g. a larger raster or another seed)",
        )

        override_group = parser.add_argument_group("configuration overrides")

        override_group.add_argument(
            "--output", type=Path, metavar="PATH", help="Override PNG output path"
        )
        override_group.add_argument(
            "--field-output",
            type=Path,
            metavar="PATH",
            help="Also archive the normalized field to this HDF5 file",
        )
        override_group.add_argument("--height", type=int, metavar="N", help="Raster height")
        override_group.add_argument("--width", type=int, metavar="N", help="Raster width")
        override_group.add_argument("--octaves", type=int, metavar="N", help="Octave count")
        override_group.add_argument(
            "--attenuation", type=float, metavar="F", help="Per-octave amplitude decay in (0, 1)"
        )
        override_group.add_argument(
            "--seed",
            type=_int_auto,
            nargs=2,
            metavar=("SEED0", "SEED1"),
            help="Seed pair (decimal or 0x-prefixed hex)",
        )

        exec_group = parser.add_argument_group("execution options")

        exec_group.add_argument(
            "--dry-run",
            action="store_true",
            help="Validate configuration without generating",
        )
        exec_group.add_argument(
            "--progress", action="store_true", help="Show a progress bar over octaves"
        )
        exec_group.add_argument(
            "--verbose", action="store_true", help="Print detailed progress information"
        )

    def execute(self, args: Namespace) -> int:
        """Execute raster generation."""
        config = self.load_config(
            args.config, verbose=args.verbose, override_path=args.config_override
        )
        if config is None:
            return 1

        overrides: Dict[str, Any] = {
            "output.image_path": args.output,
            "output.field_path": args.field_output,
            "noise.height": args.height,
            "noise.width": args.width,
            "noise.octaves": args.octaves,
            "noise.attenuation": args.attenuation,
            "noise.seed": tuple(args.seed) if args.seed else None,
            "logging.progress": True if args.progress else None,
            "logging.level": "DEBUG" if args.verbose else None,
        }

        if args.verbose and any(v is not None for v in overrides.values()):
            print("\nApplying configuration overrides:")

        try:
            self.apply_overrides(config, overrides, verbose=args.verbose)
        except ConfigurationError as e:
            return self.error(str(e))

        if args.verbose:
            self._print_config_summary(config)

        if args.dry_run:
            print("\n✓ Configuration valid (dry-run mode, no raster generated)")
            return 0

        try:
            return self._run_generation(config, args.verbose)
        except KeyboardInterrupt:
            print("\n\nGeneration interrupted by user", file=sys.stderr)
            return 130
        except Exception as e:
            print(f"\nError during generation: {e}", file=sys.stderr)
            if args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _print_config_summary(self, config: Any) -> None:
        noise = config.noise
        print("\nConfiguration:")
        print(f"  Size: {noise.width}x{noise.height} ({noise.num_pixels} pixels)")
        print(f"  Octaves: {noise.octaves}")
        print(f"  Attenuation: {noise.attenuation}")
        print(f"  Seed: (0x{noise.seed[0]:016X}, 0x{noise.seed[1]:016X})")
        print(f"  Output: {config.output.image_path}")
        if config.output.field_path is not None:
            print(f"  Field archive: {config.output.field_path}")

    def _run_generation(self, config: Any, verbose: bool) -> int:
        """
        Run the generation pipeline.

        Returns:
            Exit code (0 for success)
        """
        from ..pipeline import NoiseGenerationPipeline

        configure_logging(config.logging)

        start_time = time.time()
        result = NoiseGenerationPipeline(config).run()
        elapsed = time.time() - start_time

        print("\n" + "=" * 60)
        print("✓ GENERATION COMPLETE")
        print("=" * 60)
        print(f"Image: {result.image_path}")
        if result.field_path is not None:
            print(f"Field archive: {result.field_path}")
        print(f"Pixels: {len(result.raster)}")
        print(f"Scale sum: {result.noise_field.scale_sum:.6f}")
        print(f"SHA-256: {result.raster.digest()}")
        print(f"Total time: {elapsed:.2f}s")
        if verbose:
            for stage, ms in result.timings.items():
                print(f"  {stage}: {ms:.1f} ms")
        print("=" * 60)

        return 0
