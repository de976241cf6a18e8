"""Persistence layer for submodules.

This module reads and writes the whole-document JSON files of one
submodule folder:

- ``.structure``: full schema
- ``.metadataStructure``: metadata schema
- ``<instance>/info.json``: one data instance
- ``metadata.json``: the consolidated metadata index
"""

from pathlib import Path
from typing import Any, Optional

from metadata.index import MetadataIndex, MetadataIndexError
from structure.codec import SchemaDecodeError, decode_schema, encode_schema
from structure.nodes import DataInstance, SchemaNode
from utils import (
    DEFAULT_JSON_INDENT,
    INSTANCE_FILENAME,
    METADATA_INDEX_FILENAME,
    METADATA_STRUCTURE_FILENAME,
    STRUCTURE_FILENAME,
    FileHelperError,
    get_logger,
    read_json,
    resolve_child,
    write_json,
)

logger = get_logger(__name__)


class RepositoryError(Exception):
    """Raised when submodule storage operations fail."""

    pass


class SubmoduleRepository:
    """Whole-document JSON storage for one submodule folder.

    Nothing is created on construction; directories appear on the first
    write.

    Args:
        root: Base directory holding submodule folders
        folder: Submodule folder name (must stay inside the root)
        json_indent: Indentation of written documents

    Raises:
        PathValidationError: If the folder name could escape the root
    """

    def __init__(self, root: Path, folder: str, json_indent: int = DEFAULT_JSON_INDENT):
        self.root = Path(root)
        resolve_child(self.root, folder, kind="folder name")
        self.folder = folder
        self.json_indent = json_indent
        self.path = self.root / folder
        logger.debug(f"SubmoduleRepository initialized: {self.path}")

    @property
    def structure_path(self) -> Path:
        return self.path / STRUCTURE_FILENAME

    @property
    def metadata_structure_path(self) -> Path:
        return self.path / METADATA_STRUCTURE_FILENAME

    @property
    def metadata_index_path(self) -> Path:
        return self.path / METADATA_INDEX_FILENAME

    def instance_path(self, name: str) -> Path:
        """Path of ``info.json`` for an instance name.

        Raises:
            PathValidationError: If the instance name could escape the folder
        """
        resolve_child(self.path, name, kind="instance name")
        return self.path / name / INSTANCE_FILENAME

    def has_structure(self) -> bool:
        """Return True once a schema has been defined for this submodule."""
        return self.structure_path.is_file()

    def save_schemas(self, schema: SchemaNode, metadata_schema: SchemaNode) -> tuple[Path, Path]:
        """Write ``.structure`` and ``.metadataStructure``.

        Returns:
            Tuple of (structure path, metadata structure path)

        Raises:
            RepositoryError: If a write fails
        """
        self._write(encode_schema(schema), self.structure_path, "structure")
        self._write(encode_schema(metadata_schema), self.metadata_structure_path, "metadata structure")
        return self.structure_path, self.metadata_structure_path

    def load_schema(self) -> SchemaNode:
        """Read and decode ``.structure``.

        Raises:
            RepositoryError: If the file is missing, unreadable or malformed
        """
        return self._read_schema(self.structure_path)

    def load_metadata_schema(self) -> SchemaNode:
        """Read and decode ``.metadataStructure``.

        Raises:
            RepositoryError: If the file is missing, unreadable or malformed
        """
        return self._read_schema(self.metadata_structure_path)

    def save_instance(self, name: str, data: DataInstance) -> Path:
        """Write (or overwrite) ``<name>/info.json``.

        Raises:
            RepositoryError: If the write fails
            PathValidationError: If the instance name is unsafe
        """
        file_path = self.instance_path(name)
        self._write(data, file_path, f"instance {name!r}")
        return file_path

    def load_metadata_index(self) -> MetadataIndex:
        """Read ``metadata.json``; a missing file is an empty index.

        Raises:
            RepositoryError: If the file is unreadable or malformed
        """
        if not self.metadata_index_path.exists():
            logger.debug(f"No metadata index yet at {self.metadata_index_path}")
            return MetadataIndex()
        document = self._read(self.metadata_index_path)
        try:
            return MetadataIndex.from_document(document)
        except MetadataIndexError as e:
            raise RepositoryError(f"Malformed metadata index {self.metadata_index_path}: {e}") from e

    def save_metadata_index(self, index: MetadataIndex) -> Path:
        """Rewrite ``metadata.json`` in full.

        Raises:
            RepositoryError: If the write fails
        """
        self._write(index.to_document(), self.metadata_index_path, "metadata index")
        return self.metadata_index_path

    def _read(self, file_path: Path) -> Any:
        try:
            return read_json(file_path)
        except FileNotFoundError as e:
            logger.error(f"Missing file: {file_path}")
            raise RepositoryError(f"File does not exist: {file_path}") from e
        except FileHelperError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            raise RepositoryError(str(e)) from e

    def _read_schema(self, file_path: Path) -> SchemaNode:
        document = self._read(file_path)
        try:
            return decode_schema(document)
        except SchemaDecodeError as e:
            logger.error(f"Malformed schema in {file_path}: {e}")
            raise RepositoryError(f"Malformed schema in {file_path}: {e}") from e

    def _write(self, document: Any, file_path: Path, label: Optional[str] = None) -> None:
        try:
            write_json(document, file_path, indent=self.json_indent)
        except FileHelperError as e:
            logger.error(f"Failed to write {label or file_path}: {e}")
            raise RepositoryError(f"Failed to write {label or 'document'}: {e}") from e
        logger.info(f"Saved {label or 'document'}: {file_path}")
