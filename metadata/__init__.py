"""Metadata projection and the consolidated metadata index.

Key principles:
- Deterministic only
- No data mutation: projections are new values
- Machine-readable artifacts
"""

from .index import MetadataIndex, MetadataIndexError
from .projector import MetadataProjector

__all__ = [
    "MetadataIndex",
    "MetadataIndexError",
    "MetadataProjector",
]
