"""File helper utilities for RecordBuilder.

This module provides the whole-document JSON reads and writes used by the
repository, plus path checks for user-supplied folder and instance names.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


class FileHelperError(Exception):
    """Raised when file operations fail."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        FileHelperError: If directory creation fails
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        raise FileHelperError(f"Failed to resolve or create directory {path}: {e}") from e


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path (without dot, lower-cased)."""
    return Path(file_path).suffix.lstrip(".").lower()


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported settings format."""
    return get_file_extension(file_path) in ["yaml", "yml", "json"]


def validate_path_safe(
    file_path: str | Path,
    base_dir: Optional[Path] = None,
    must_exist: bool = False,
) -> Path:
    """Validate path to prevent directory traversal attacks.

    This function:
    - Checks for directory traversal sequences (..)
    - Resolves paths to prevent symlink attacks
    - Optionally validates paths are within a base directory

    Args:
        file_path: Path to validate
        base_dir: Optional base directory to restrict paths within
        must_exist: If True, path must exist

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If must_exist=True and path doesn't exist
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if base_dir is not None:
        base_resolved = Path(base_dir).expanduser().resolve()
        try:
            common = os.path.commonpath([str(resolved), str(base_resolved)])
        except ValueError:
            # Paths on different drives (Windows)
            raise PathValidationError(
                f"Path {file_path} cannot be validated against base directory {base_dir}"
            )
        if common != str(base_resolved):
            raise PathValidationError(
                f"Path {file_path} is outside allowed base directory {base_dir}"
            )

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    return resolved


def validate_name_component(name: str, kind: str = "name") -> str:
    """Validate a single user-supplied folder or instance name.

    The name is used verbatim (empty and whitespace names included) as
    long as it cannot escape its parent directory.

    Raises:
        PathValidationError: If the name is anchored, contains a traversal
            segment or a null byte
    """
    if "\x00" in name:
        raise PathValidationError(f"Invalid {kind}: contains a null byte")
    if Path(name).anchor:
        raise PathValidationError(f"Invalid {kind} {name!r}: must be relative")
    if ".." in Path(name).parts:
        raise PathValidationError(
            f"Invalid {kind} {name!r}: contains directory traversal sequence"
        )
    return name


def resolve_child(parent: Path, name: str, kind: str = "name") -> Path:
    """Resolve a user-supplied name under a parent directory.

    Returns:
        Resolved path of the child, guaranteed to lie inside ``parent``

    Raises:
        PathValidationError: If the name could escape ``parent``
    """
    validate_name_component(name, kind=kind)
    try:
        return validate_path_safe(parent.resolve() / name, base_dir=parent)
    except PathValidationError as e:
        raise PathValidationError(f"Invalid {kind} {name!r}: {e}") from e


def read_json(file_path: Path) -> Any:
    """Read and parse a whole JSON document.

    Raises:
        FileNotFoundError: If the file does not exist
        FileHelperError: If the file cannot be read or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise
    except json.JSONDecodeError as e:
        raise FileHelperError(f"Invalid JSON syntax in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise FileHelperError(f"Failed to decode {file_path}: Encoding error: {e}") from e
    except OSError as e:
        raise FileHelperError(f"Failed to read {file_path}: I/O error: {e}") from e

    logger.debug(f"JSON read from: {file_path}")
    return data


def write_json(data: Any, file_path: Path, indent: int = 2) -> Path:
    """Write (or replace) a whole JSON document, creating parent directories.

    Args:
        data: Data to serialize to JSON
        file_path: Path to write file
        indent: JSON indentation

    Returns:
        Resolved path of the written file

    Raises:
        FileHelperError: If the write fails
    """
    try:
        resolved_path = file_path.resolve()
    except (OSError, RuntimeError) as e:
        raise FileHelperError(f"Failed to resolve path {file_path}: {e}") from e

    ensure_directory(resolved_path.parent)
    try:
        with open(resolved_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
    except OSError as e:
        raise FileHelperError(f"Failed to write JSON to {resolved_path}: I/O error: {e}") from e
    except (TypeError, ValueError) as e:
        raise FileHelperError(f"Failed to serialize data to JSON for {resolved_path}: {e}") from e

    logger.debug(f"JSON written to: {resolved_path}")
    return resolved_path
