"""
perlinfield CLI package.

Provides modular command implementations for the perlinfield CLI.
Commands use the Command pattern for clean separation and testability.
"""

from .base import CLICommand, ConfigurableCommand
from .generate import GenerateCommand
from .info import InfoCommand
from .validate import ValidateCommand
from .visualize import VisualizeCommand

__all__ = [
    "CLICommand",
    "ConfigurableCommand",
    "GenerateCommand",
    "InfoCommand",
    "ValidateCommand",
    "VisualizeCommand",
]
