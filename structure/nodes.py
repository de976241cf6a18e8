"""Schema node definitions.

A schema is a finite tree of three node kinds:

- ``LeafNode``: a scalar text field
- ``ObjectNode``: ordered, uniquely named child fields
- ``ArrayNode``: exactly one template node shared by every element

The same types describe the full schema of a submodule and its sparse
metadata schema, where a leaf is present only if it was marked for
inclusion. Nodes are immutable once built.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union


@dataclass(frozen=True)
class LeafNode:
    """A scalar text field."""


@dataclass(frozen=True)
class ObjectNode:
    """An ordered mapping of field name to child node.

    The mapping is copied on construction and exposed read-only, so the
    insertion order seen by the builder is the iteration order everywhere.
    """

    fields: Mapping[str, "SchemaNode"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectNode):
            return NotImplemented
        return dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def get(self, name: str) -> Optional["SchemaNode"]:
        return self.fields.get(name)

    def items(self):
        return self.fields.items()

    def __repr__(self) -> str:
        return f"ObjectNode({dict(self.fields)!r})"


@dataclass(frozen=True)
class ArrayNode:
    """An array whose elements all follow one template node."""

    template: "SchemaNode"


SchemaNode = Union[LeafNode, ObjectNode, ArrayNode]

# Data instances and projected values are plain JSON-compatible values:
# str for leaves, dict for objects, list for arrays.
DataInstance = Any
ProjectedValue = Any


def is_scalar_array(node: SchemaNode) -> bool:
    """Return True for an array whose elements are ultimately scalars.

    ``[""]`` and ``[[""]]`` are scalar arrays; ``[{...}]`` is not.
    """
    while isinstance(node, ArrayNode):
        node = node.template
    return isinstance(node, LeafNode)


def leaf_paths(node: SchemaNode, prefix: str = "") -> list[str]:
    """List the dotted paths of every leaf, arrays marked with ``[]``.

    Used for summaries and debug logging.
    """
    if isinstance(node, LeafNode):
        return [prefix] if prefix else ["(root)"]
    if isinstance(node, ArrayNode):
        return leaf_paths(node.template, f"{prefix}[]")
    paths: list[str] = []
    for name, child in node.items():
        child_prefix = f"{prefix}.{name}" if prefix else name
        paths.extend(leaf_paths(child, child_prefix))
    return paths
