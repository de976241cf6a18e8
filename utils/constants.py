"""Constants for RecordBuilder.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "RecordBuilder"
APP_VERSION = "1.0.0"

# Fixed file names inside a submodule folder
STRUCTURE_FILENAME = ".structure"
METADATA_STRUCTURE_FILENAME = ".metadataStructure"
METADATA_INDEX_FILENAME = "metadata.json"
INSTANCE_FILENAME = "info.json"

# Default values
DEFAULT_STORAGE_ROOT = "."
DEFAULT_JSON_INDENT = 2
DEFAULT_DONE_KEYWORD = "done"

# Actions accepted at the action prompt
ACTION_SUBMODULE = "submodule"
ACTION_ADD = "add"
