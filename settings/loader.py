"""Settings loader for RecordBuilder.

This module handles loading YAML/JSON settings files and validating
them against AppSettings. It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Optional, Union

import yaml

from settings.schema import AppSettings
from utils import PathValidationError, is_supported_config_format, validate_path_safe


class SettingsValidationError(Exception):
    """Raised when settings loading or validation fails."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration (empty for an empty file)

    Raises:
        SettingsValidationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True)
    except PathValidationError as e:
        raise SettingsValidationError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise SettingsValidationError(f"Configuration file not found: {config_path}") from e

    suffix = config_path.suffix.lower()
    if not is_supported_config_format(config_path):
        raise SettingsValidationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                text = f.read()
                config = json.loads(text) if text.strip() else None
            else:
                config = yaml.safe_load(f)
    except (OSError, IOError) as e:
        raise SettingsValidationError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SettingsValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SettingsValidationError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise SettingsValidationError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    return config


def validate_settings(config: dict) -> AppSettings:
    """Validate configuration against AppSettings.

    Raises:
        SettingsValidationError: If validation fails with user-friendly error message
    """
    try:
        return AppSettings(**config)
    except Exception as e:
        error_msg = _format_validation_error(e)
        raise SettingsValidationError(f"Settings validation failed:\n{error_msg}") from e


def _format_validation_error(error: Exception) -> str:
    """Format validation error for user-friendly display."""
    if hasattr(error, "errors"):
        errors = []
        for err in error.errors():
            field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
            error_msg = err.get("msg", "Validation error")
            error_type = err.get("type", "unknown")
            errors.append(f"  {field_path}: {error_msg} ({error_type})")
        return "\n".join(errors)

    return str(error)


def load_settings(
    config_path: Optional[Union[str, pathlib.Path]] = None,
    root: Optional[str] = None,
) -> AppSettings:
    """Load and validate settings.

    This is the main entry point for configuration. Without a path the
    defaults are used. A ``root`` overrides ``storage.root`` from the file
    and is validated together with it.

    Raises:
        SettingsValidationError: If loading or validation fails
    """
    config = load_config_file(config_path) if config_path is not None else {}
    if root is not None:
        storage = config.get("storage", {})
        if isinstance(storage, dict):
            config = {**config, "storage": {**storage, "root": root}}
    return validate_settings(config)
