"""
perlinfield CLI - main entry point.

Routes commands to modular command implementations in perlinfield.cli.
This module is a thin router; all logic lives in command classes.
"""

import sys
import argparse
from typing import List, Optional

from .. import __version__
from .generate import GenerateCommand
from .info import InfoCommand
from .validate import ValidateCommand
from .visualize import VisualizeCommand


def create_parser() -> argparse.ArgumentParser:
    """
    Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="perlinfield",
        description="perlinfield - Seeded fractal Perlin noise rasters",
        epilog="""
Examples:
  # Generate the reference raster
  perlinfield generate

  # Inspect the result
  perlinfield info --path output.png

  # Validate a configuration
  perlinfield validate --config configs/reference.yaml

For more help on a specific command:
  perlinfield <command> --help
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"perlinfield v{__version__}")

    subparsers = parser.add_subparsers(
        title="commands", description="Available commands", dest="command", required=True
    )

    commands = [
        GenerateCommand(),
        InfoCommand(),
        ValidateCommand(),
        VisualizeCommand(),
    ]

    for command in commands:
        cmd_parser = subparsers.add_parser(
            command.name,
            help=command.help,
            description=command.description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        command.add_arguments(cmd_parser)
        cmd_parser.set_defaults(command_handler=command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        return args.command_handler.execute(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
