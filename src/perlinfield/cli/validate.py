"""
Validate command for perlinfield CLI.

Validates a YAML configuration file against the schema.
"""

from argparse import ArgumentParser, Namespace
from pathlib import Path

from .base import CLICommand
from ..config import validate_config_file


class ValidateCommand(CLICommand):
    """Command to validate a configuration file without generating."""

    @property
    def name(self) -> str:
        return "validate"

    @property
    def help(self) -> str:
        return "Validate a configuration file"

    @property
    def description(self) -> str:
        return """
Validate a perlinfield YAML configuration.

Checks dimensions and octave count are positive, attenuation lies strictly
between 0 and 1, and both seed parts fit in 64 bits.

Examples:
  perlinfield validate --config configs/reference.yaml
        """

    def add_arguments(self, parser: ArgumentParser) -> None:
        """Add validate command arguments."""
        parser.add_argument(
            "--config", type=Path, required=True, metavar="PATH", help="Path to YAML configuration file"
        )

    def execute(self, args: Namespace) -> int:
        """Execute configuration validation."""
        if not self.validate_file_exists(args.config, "Configuration file"):
            return 1
        return 0 if validate_config_file(args.config) else 1
