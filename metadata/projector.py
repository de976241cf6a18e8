"""Metadata projection.

This module derives a metadata index entry from a data instance: the
full schema drives the walk, the metadata schema decides which leaves
are kept.

Key principles:
- Containers always mirror the full schema (possibly empty)
- A leaf is kept only if the metadata schema has an entry at its key
- An array of scalars behaves like a leaf: kept whole or omitted
- No I/O
"""

from typing import Any, Optional

from structure.nodes import (
    ArrayNode,
    DataInstance,
    ObjectNode,
    ProjectedValue,
    SchemaNode,
    is_scalar_array,
)
from utils import get_logger

logger = get_logger(__name__)


def _child(metadata_node: Optional[SchemaNode], name: str) -> Optional[SchemaNode]:
    # A leaf entry at a container key (or no entry) includes nothing below it
    if isinstance(metadata_node, ObjectNode):
        return metadata_node.get(name)
    return None


def _template(metadata_node: Optional[SchemaNode]) -> Optional[SchemaNode]:
    if isinstance(metadata_node, ArrayNode):
        return metadata_node.template
    return None


class MetadataProjector:
    """Projects data instances onto their metadata schema."""

    def project(
        self,
        schema: SchemaNode,
        metadata_schema: SchemaNode,
        data: DataInstance,
    ) -> ProjectedValue:
        """Extract the metadata-marked fields of a data instance.

        Args:
            schema: Full schema of the submodule
            metadata_schema: Sparse metadata schema
            data: Data instance shaped like ``schema``

        Returns:
            Value whose containers mirror ``schema`` and whose leaves are
            the ones present in both schemas
        """
        if isinstance(schema, ObjectNode):
            projected = self._project_object(schema, metadata_schema, data)
        elif is_scalar_array(schema):
            projected = list(data) if isinstance(data, list) else []
        elif isinstance(schema, ArrayNode):
            projected = self._project_array(schema, metadata_schema, data)
        else:
            projected = data if data is not None else ""
        logger.debug("Data instance projected onto metadata schema")
        return projected

    def _project_object(
        self,
        node: ObjectNode,
        metadata_node: Optional[SchemaNode],
        data: Any,
    ) -> dict[str, ProjectedValue]:
        if not isinstance(data, dict):
            if data is not None:
                logger.warning(f"Expected an object, got {type(data).__name__}; treating as empty")
            data = {}

        projected: dict[str, ProjectedValue] = {}
        for name, child in node.items():
            metadata_child = _child(metadata_node, name)
            value = data.get(name)

            if isinstance(child, ArrayNode):
                if is_scalar_array(child):
                    if metadata_child is not None:
                        projected[name] = list(value) if isinstance(value, list) else []
                else:
                    projected[name] = self._project_array(child, metadata_child, value)
            elif isinstance(child, ObjectNode):
                projected[name] = self._project_object(child, metadata_child, value)
            elif metadata_child is not None:
                projected[name] = value if value is not None else ""

        return projected

    def _project_array(
        self,
        node: ArrayNode,
        metadata_node: Optional[SchemaNode],
        items: Any,
    ) -> list[ProjectedValue]:
        if not isinstance(items, list):
            if items is not None:
                logger.warning(f"Expected an array, got {type(items).__name__}; treating as empty")
            items = []

        template = node.template
        metadata_template = _template(metadata_node)
        if isinstance(template, ObjectNode):
            return [self._project_object(template, metadata_template, item) for item in items]
        return [self._project_array(template, metadata_template, item) for item in items]
