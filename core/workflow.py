"""Submodule workflow for coordinating the two user actions.

This module defines the SubmoduleWorkflow class which wires the schema
builder, data collector, metadata projector and repository together for
the ``submodule`` and ``add`` actions.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from collection.collector import DataCollector
from metadata.projector import MetadataProjector
from repository.store import SubmoduleRepository
from settings.schema import AppSettings
from structure.builder import SchemaBuilder
from structure.nodes import DataInstance, ProjectedValue
from utils import Prompter, get_logger

logger = get_logger(__name__)

MISSING_STRUCTURE_MESSAGE = "Structure file does not exist!"


@dataclass(frozen=True)
class AddResult:
    """Outcome of one ``add`` action."""

    instance_name: str
    instance_path: Path
    metadata_index_path: Path
    data: DataInstance
    projected: ProjectedValue
    replaced: bool


class SubmoduleWorkflow:
    """Runs the ``submodule`` and ``add`` actions.

    Writes happen only after a schema pair or data instance is complete in
    memory, so an interrupted action leaves no partial files behind.

    Args:
        prompter: Prompt transport shared by every step
        settings: Validated settings (defaults if omitted)
    """

    def __init__(self, prompter: Prompter, settings: Optional[AppSettings] = None):
        self.prompter = prompter
        self.settings = settings or AppSettings()
        self.root = Path(self.settings.storage.root)
        logger.debug(f"SubmoduleWorkflow initialized with root: {self.root}")

    def repository(self, folder: str) -> SubmoduleRepository:
        """Open the repository of a submodule folder."""
        return SubmoduleRepository(self.root, folder, json_indent=self.settings.storage.json_indent)

    def define_submodule(self, folder: str) -> tuple[Path, Path]:
        """Build a schema pair interactively and persist it.

        Returns:
            Tuple of (structure path, metadata structure path)

        Raises:
            RepositoryError: If the schema files cannot be written
        """
        repository = self.repository(folder)
        logger.info(f"Defining submodule: {repository.path}")

        builder = SchemaBuilder(self.prompter, self.settings.builder)
        schema, metadata_schema = builder.build()

        structure_path, metadata_structure_path = repository.save_schemas(schema, metadata_schema)
        self.prompter.say(f"Structure file created at {structure_path}")
        self.prompter.say(f"Metadata structure file created at {metadata_structure_path}")
        return structure_path, metadata_structure_path

    def add_instance(self, folder: str, name: str) -> Optional[AddResult]:
        """Collect one data instance, store it and update the metadata index.

        Returns:
            AddResult, or None if the submodule has no structure yet

        Raises:
            RepositoryError: If a schema or index cannot be read or a write fails
        """
        repository = self.repository(folder)
        instance_path = repository.instance_path(name)

        if not repository.has_structure():
            logger.info(f"No structure file in {repository.path}")
            self.prompter.say(MISSING_STRUCTURE_MESSAGE)
            return None

        schema = repository.load_schema()
        data = DataCollector(self.prompter).collect(schema)

        repository.save_instance(name, data)
        self.prompter.say(f'Data added to "{instance_path}".')

        index = repository.load_metadata_index()
        metadata_schema = repository.load_metadata_schema()
        projected = MetadataProjector().project(schema, metadata_schema, data)
        replaced = index.upsert(name, projected)
        metadata_index_path = repository.save_metadata_index(index)
        logger.info(f"Metadata index of {repository.path} holds {len(index)} instance(s)")
        self.prompter.say(f'Metadata updated in "{metadata_index_path}".')

        if replaced:
            logger.info(f"Instance {name!r} replaced in {repository.path}")
        return AddResult(
            instance_name=name,
            instance_path=instance_path,
            metadata_index_path=metadata_index_path,
            data=data,
            projected=projected,
            replaced=replaced,
        )
