"""Consolidated metadata index of a submodule.

The index maps instance name to projected value. Entries are inserted or
replaced whole; there is no merge and no deletion.
"""

from dataclasses import dataclass, field
from typing import Any

from structure.nodes import ProjectedValue
from utils import get_logger

logger = get_logger(__name__)


class MetadataIndexError(ValueError):
    """Raised when a stored metadata index is not a JSON object."""

    pass


@dataclass
class MetadataIndex:
    """Instance name -> projected value, last write wins."""

    entries: dict[str, ProjectedValue] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Any) -> "MetadataIndex":
        """Build an index from a parsed ``metadata.json`` document.

        Raises:
            MetadataIndexError: If the document is not a mapping
        """
        if not isinstance(document, dict):
            raise MetadataIndexError(
                f"Metadata index must be a JSON object, got {type(document).__name__}"
            )
        return cls(entries=dict(document))

    def to_document(self) -> dict[str, ProjectedValue]:
        """Return the JSON-compatible document for ``metadata.json``."""
        return dict(self.entries)

    def upsert(self, name: str, value: ProjectedValue) -> bool:
        """Insert or fully replace the entry for ``name``.

        Returns:
            True if an existing entry was replaced
        """
        replaced = name in self.entries
        self.entries[name] = value
        logger.debug(f"Metadata entry {'replaced' if replaced else 'added'}: {name!r}")
        return replaced

    def __len__(self) -> int:
        return len(self.entries)
