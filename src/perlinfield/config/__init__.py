"""Configuration system for perlinfield."""

from .schema import (
    REFERENCE_SEED,
    ConfigurationError,
    LoggingConfig,
    MetadataConfig,
    NoiseConfig,
    OutputConfig,
    PerlinFieldConfig,
    build_noise_config,
)
from .loader import (
    load_config,
    load_config_with_overrides,
    merge_configs,
    save_config,
    validate_config_file,
)
from .log_setup import configure_logging

__all__ = [
    "REFERENCE_SEED",
    "ConfigurationError",
    "LoggingConfig",
    "MetadataConfig",
    "NoiseConfig",
    "OutputConfig",
    "PerlinFieldConfig",
    "build_noise_config",
    "load_config",
    "load_config_with_overrides",
    "merge_configs",
    "save_config",
    "validate_config_file",
    "configure_logging",
]
