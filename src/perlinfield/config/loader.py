"""
YAML configuration loader for perlinfield.

Provides utilities to load and validate YAML configurations using Pydantic schemas.
Supports parameter substitution for runtime values (e.g., ${octaves}).
"""

import yaml
import re
import os
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from .schema import ConfigurationError, PerlinFieldConfig

logger = logging.getLogger(__name__)


def substitute_params(obj: Any, params: Dict[str, Any]) -> Any:
    """
    Recursively substitute ${param} placeholders with actual values.

    Substitution priority:
    1. Runtime params (passed via params argument)
    2. Environment variables (from os.environ)

    Args:
        obj: Configuration object (dict, list, str, or scalar)
        params: Dictionary of parameter name -> value mappings

    Returns:
        Configuration object with substitutions applied

    Raises:
        ConfigurationError: If a placeholder has no value in either source

    Example:
        >>> config = {"noise": {"octaves": "${octaves}", "seed": [1, "${octaves}"]}}
        >>> substitute_params(config, {"octaves": 4})
        {'noise': {'octaves': 4, 'seed': [1, 4]}}
    """
    if isinstance(obj, str):
        match = re.fullmatch(r'\$\{(\w+)\}', obj)
        if match:
            param_name = match.group(1)

            if param_name in params:
                return params[param_name]

            env_value = os.getenv(param_name)
            if env_value is not None:
                return env_value

            raise ConfigurationError(
                f"Missing parameter: {param_name}. "
                f"Not found in runtime parameters {list(params.keys())} "
                f"or environment variables."
            )
        return obj
    elif isinstance(obj, dict):
        return {k: substitute_params(v, params) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [substitute_params(item, params) for item in obj]
    else:
        return obj


def load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load YAML file.

    An empty file loads as an empty dict (all defaults).

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If YAML is malformed or not a mapping
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a YAML dict, got {type(config)}")

    return config


def _validate(raw_config: Dict[str, Any], source: Union[Path, str]) -> PerlinFieldConfig:
    try:
        return PerlinFieldConfig(**raw_config)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed for {source}:\n{e}\n\n"
            f"Check your YAML against the schema in perlinfield/config/schema.py"
        ) from e


def load_config(
    path: Path,
    runtime_params: Union[Dict[str, Any], None] = None
) -> PerlinFieldConfig:
    """
    Load and validate perlinfield configuration from YAML file.

    Args:
        path: Path to YAML configuration file
        runtime_params: Optional runtime parameters for substitution

    Returns:
        Validated PerlinFieldConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or validation fails

    Example:
        ```python
        config = load_config(
            Path("configs/reference.yaml"),
            runtime_params={"octaves": 6}
        )
        ```
    """
    raw_config = load_yaml(path)

    # Always run substitution to pick up environment variables
    raw_config = substitute_params(raw_config, runtime_params or {})

    config = _validate(raw_config, path)
    logger.debug(f"Loaded configuration from {path}")
    return config


def save_config(config: PerlinFieldConfig, path: Path) -> None:
    """
    Save PerlinFieldConfig to YAML file.

    Seeds are written as hex strings so they survive YAML round trips
    readably; the schema parses them back.
    """
    config_dict = config.model_dump(mode='json')
    config_dict["noise"]["seed"] = [f"0x{part:016X}" for part in config.noise.seed]

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def validate_config_file(path: Path, runtime_params: Union[Dict[str, Any], None] = None) -> bool:
    """
    Validate a YAML configuration file.

    Returns:
        True if valid, False otherwise (prints errors)
    """
    try:
        load_config(path, runtime_params)
        print(f"✓ Configuration valid: {path}")
        return True
    except (FileNotFoundError, ConfigurationError) as e:
        print(f"✗ Configuration invalid: {path}")
        print(f"  Error: {e}")
        return False


# =============================================================================
# Utility Functions
# =============================================================================


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries (deep merge).

    Example:
        ```python
        base = {"noise": {"octaves": 8}}
        override = {"noise": {"attenuation": 0.5}}
        merged = merge_configs(base, override)
        # Result: {"noise": {"octaves": 8, "attenuation": 0.5}}
        ```
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_overrides(
    base_path: Path,
    override_path: Union[Path, None] = None,
    runtime_params: Union[Dict[str, Any], None] = None
) -> PerlinFieldConfig:
    """
    Load configuration with optional overrides.

    Useful for inheriting from a base configuration and applying
    run-specific changes (e.g., a larger raster or a different seed).
    """
    base_config = load_yaml(base_path)

    if override_path:
        override_config = load_yaml(override_path)
        base_config = merge_configs(base_config, override_config)

    base_config = substitute_params(base_config, runtime_params or {})

    return _validate(base_config, override_path or base_path)
