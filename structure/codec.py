"""JSON document encoding for schema trees.

On disk a schema is a plain JSON value:

- leaf -> ``""``
- object -> ``{"name": <child>, ...}``
- array -> ``[<template>]``

This module is the only place that knows that encoding.
"""

from typing import Any

from utils import get_logger

from .nodes import ArrayNode, LeafNode, ObjectNode, SchemaNode

logger = get_logger(__name__)


class SchemaDecodeError(ValueError):
    """Raised when a JSON document is not a valid schema encoding."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path or '(root)'}: {message}")


def encode_schema(node: SchemaNode) -> Any:
    """Encode a schema tree as a JSON-compatible document."""
    if isinstance(node, LeafNode):
        return ""
    if isinstance(node, ArrayNode):
        return [encode_schema(node.template)]
    if isinstance(node, ObjectNode):
        return {name: encode_schema(child) for name, child in node.items()}
    raise TypeError(f"Not a schema node: {type(node).__name__}")


def decode_schema(document: Any, path: str = "") -> SchemaNode:
    """Decode a JSON document into a schema tree.

    Any string decodes to a leaf. Lists must hold exactly one template.

    Raises:
        SchemaDecodeError: If the document does not follow the encoding
    """
    if isinstance(document, str):
        return LeafNode()

    if isinstance(document, dict):
        fields = {}
        for name, child in document.items():
            child_path = f"{path}.{name}" if path else name
            fields[name] = decode_schema(child, child_path)
        return ObjectNode(fields)

    if isinstance(document, list):
        if len(document) != 1:
            raise SchemaDecodeError(
                path, f"array must hold exactly one template, got {len(document)}"
            )
        return ArrayNode(decode_schema(document[0], f"{path}[0]"))

    raise SchemaDecodeError(path, f"unsupported value of type {type(document).__name__}")
