"""Settings schema definitions using Pydantic.

This module defines the validated, immutable configuration for a
RecordBuilder session: where submodule folders live and how the schema
builder interprets its prompts.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.constants import (
    DEFAULT_DONE_KEYWORD,
    DEFAULT_JSON_INDENT,
    DEFAULT_STORAGE_ROOT,
)


class StopMode(str, Enum):
    """How far the termination keyword reaches while building a schema."""

    LEVEL = "level"
    SESSION = "session"


class NestedInclusion(str, Enum):
    """What a "yes" to the metadata question does for a nested field.

    KEEP leaves the nested metadata schema in place; OVERWRITE replaces it
    with a leaf so the whole value is copied.
    """

    KEEP = "keep"
    OVERWRITE = "overwrite"


class StorageSettings(BaseModel):
    """Where and how JSON documents are stored."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: str = Field(default=DEFAULT_STORAGE_ROOT, description="Base directory for submodule folders")
    json_indent: int = Field(
        default=DEFAULT_JSON_INDENT, ge=0, le=8, description="Indentation of written JSON documents"
    )

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Validate storage root."""
        if not v or not v.strip():
            raise ValueError("storage.root cannot be empty")
        return v.strip()


class BuilderSettings(BaseModel):
    """Schema builder behaviour."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    done_keyword: str = Field(
        default=DEFAULT_DONE_KEYWORD, min_length=1, description="Keyword that ends a level of fields"
    )
    stop_mode: StopMode = Field(default=StopMode.LEVEL, description="Reach of the done keyword")
    nested_inclusion: NestedInclusion = Field(
        default=NestedInclusion.KEEP, description="Effect of including a nested field in metadata"
    )

    @field_validator("done_keyword")
    @classmethod
    def validate_done_keyword(cls, v: str) -> str:
        """Normalize the done keyword for case-insensitive comparison."""
        if not v.strip():
            raise ValueError("builder.done_keyword cannot be blank")
        return v.strip().lower()


class AppSettings(BaseModel):
    """Complete settings - read-only once validated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    storage: StorageSettings = Field(default_factory=StorageSettings)
    builder: BuilderSettings = Field(default_factory=BuilderSettings)
