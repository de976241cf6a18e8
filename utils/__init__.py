"""Shared utilities for RecordBuilder.

This module provides common utilities used across the application.
"""

from .console import ConsolePrompter, Prompter, ask_yes_no, indent_for, is_yes
from .constants import (
    ACTION_ADD,
    ACTION_SUBMODULE,
    APP_NAME,
    APP_VERSION,
    DEFAULT_DONE_KEYWORD,
    DEFAULT_JSON_INDENT,
    DEFAULT_STORAGE_ROOT,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    INSTANCE_FILENAME,
    METADATA_INDEX_FILENAME,
    METADATA_STRUCTURE_FILENAME,
    STRUCTURE_FILENAME,
)
from .file_helpers import (
    FileHelperError,
    PathValidationError,
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    read_json,
    resolve_child,
    validate_path_safe,
    write_json,
)
from .logging import get_logger, setup_logging

__all__ = [
    "ACTION_ADD",
    "ACTION_SUBMODULE",
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_DONE_KEYWORD",
    "DEFAULT_JSON_INDENT",
    "DEFAULT_STORAGE_ROOT",
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "INSTANCE_FILENAME",
    "METADATA_INDEX_FILENAME",
    "METADATA_STRUCTURE_FILENAME",
    "STRUCTURE_FILENAME",
    "ConsolePrompter",
    "FileHelperError",
    "PathValidationError",
    "Prompter",
    "ask_yes_no",
    "ensure_directory",
    "get_file_extension",
    "get_logger",
    "indent_for",
    "is_supported_config_format",
    "is_yes",
    "read_json",
    "setup_logging",
    "resolve_child",
    "validate_path_safe",
    "write_json",
]
