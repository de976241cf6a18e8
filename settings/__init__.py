"""Session configuration for RecordBuilder."""

from .loader import (
    SettingsValidationError,
    load_config_file,
    load_settings,
    validate_settings,
)
from .schema import (
    AppSettings,
    BuilderSettings,
    NestedInclusion,
    StopMode,
    StorageSettings,
)

__all__ = [
    "AppSettings",
    "BuilderSettings",
    "NestedInclusion",
    "SettingsValidationError",
    "StopMode",
    "StorageSettings",
    "load_config_file",
    "load_settings",
    "validate_settings",
]
