"""
Base command class for perlinfield CLI.

Provides abstract interface and shared functionality for CLI commands.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Optional, Dict, Any
import sys

from pydantic import ValidationError

from ..config import ConfigurationError, PerlinFieldConfig


class CLICommand(ABC):
    """
    Abstract base class for CLI commands.

    Subclasses implement specific commands (generate, info, validate, visualize).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name (e.g., 'generate')."""
        pass

    @property
    @abstractmethod
    def help(self) -> str:
        """Short help text for command."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Detailed command description."""
        pass

    @abstractmethod
    def add_arguments(self, parser: ArgumentParser) -> None:
        """
        Add command-specific arguments to parser.

        Args:
            parser: ArgumentParser for this command
        """
        pass

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        pass

    def error(self, message: str, exit_code: int = 1) -> int:
        """Print error message to stderr and return exit code."""
        print(f"Error: {message}", file=sys.stderr)
        return exit_code

    def validate_file_exists(self, path: Path, description: str = "File") -> bool:
        """
        Validate that a file exists.

        Returns:
            True if file exists, False otherwise (with error printed)
        """
        if not path.exists():
            print(f"Error: {description} not found: {path}", file=sys.stderr)
            return False
        return True


class ConfigurableCommand(CLICommand):
    """
    Base class for commands that load and apply configuration.

    Provides utilities for loading configs and applying CLI overrides.
    """

    def load_config(
        self,
        config_path: Optional[Path],
        verbose: bool = False,
        override_path: Optional[Path] = None,
    ) -> Optional[PerlinFieldConfig]:
        """
        Load configuration from YAML file, or defaults when no path is given.

        When ``override_path`` is given its YAML is deep-merged over the base
        file before validation.

        Returns:
            Loaded PerlinFieldConfig or None on error (with error printed)
        """
        from ..config import load_config, load_config_with_overrides

        if config_path is None:
            if override_path is not None:
                print("Error: --config-override requires --config", file=sys.stderr)
                return None
            if verbose:
                print("No configuration file given, using reference defaults")
            return PerlinFieldConfig()

        if not self.validate_file_exists(config_path, "Configuration file"):
            return None
        if override_path is not None and not self.validate_file_exists(
            override_path, "Override file"
        ):
            return None

        if verbose:
            print(f"Loading configuration from: {config_path}")
            if override_path is not None:
                print(f"Merging overrides from: {override_path}")

        try:
            if override_path is not None:
                return load_config_with_overrides(config_path, override_path)
            return load_config(config_path)
        except ConfigurationError as e:
            print(f"Error: Failed to load configuration: {e}", file=sys.stderr)
            return None

    def apply_overrides(
        self,
        config: PerlinFieldConfig,
        overrides: Dict[str, Any],
        verbose: bool = False
    ) -> None:
        """
        Apply CLI overrides to configuration.

        Models validate on assignment, so an invalid override raises
        ConfigurationError.

        Args:
            config: PerlinFieldConfig object to modify
            overrides: Dictionary of dotted config path -> value (None = skip)
            verbose: Print applied overrides

        Example:
            >>> overrides = {
            ...     "output.image_path": Path("/tmp/noise.png"),
            ...     "noise.octaves": 4,
            ... }
            >>> command.apply_overrides(config, overrides)
        """
        for path, value in overrides.items():
            if value is None:
                continue

            parts = path.split('.')
            obj = config
            for part in parts[:-1]:
                obj = getattr(obj, part)

            try:
                setattr(obj, parts[-1], value)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid override {path}={value!r}:\n{e}") from e

            if verbose:
                print(f"  Override: {path} = {value}")
