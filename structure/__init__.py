"""Schema model, document encoding and interactive schema construction."""

from .builder import SchemaBuilder
from .codec import SchemaDecodeError, decode_schema, encode_schema
from .nodes import (
    ArrayNode,
    DataInstance,
    LeafNode,
    ObjectNode,
    ProjectedValue,
    SchemaNode,
    is_scalar_array,
    leaf_paths,
)

__all__ = [
    "ArrayNode",
    "DataInstance",
    "LeafNode",
    "ObjectNode",
    "ProjectedValue",
    "SchemaBuilder",
    "SchemaDecodeError",
    "SchemaNode",
    "decode_schema",
    "encode_schema",
    "is_scalar_array",
    "leaf_paths",
]
