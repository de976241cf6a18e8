"""Interactive schema builder.

This module asks the user for field definitions one at a time and builds
the full schema of a submodule together with its metadata schema.

Key principles:
- Depth-first: a nested field is completed before its next sibling
- One template per array, shared by every element
- No I/O besides prompting
"""

from typing import Optional

from settings.schema import BuilderSettings, NestedInclusion, StopMode
from utils import Prompter, ask_yes_no, get_logger, indent_for

from .nodes import ArrayNode, LeafNode, ObjectNode, SchemaNode, leaf_paths

logger = get_logger(__name__)


class SchemaBuilder:
    """Builds a (schema, metadata schema) pair from interactive answers.

    For every field the user is asked whether it is nested, whether a
    nested field is an array, and whether the field belongs in metadata.
    Leaves only reach the metadata schema when marked for inclusion;
    nested fields always reach it so projection can recurse into them, and
    under ``NestedInclusion.OVERWRITE`` a "yes" turns them into a leaf.

    Args:
        prompter: Prompt transport
        settings: Builder settings (defaults if omitted)
    """

    def __init__(self, prompter: Prompter, settings: Optional[BuilderSettings] = None):
        self.prompter = prompter
        self.settings = settings or BuilderSettings()
        logger.debug(
            f"SchemaBuilder initialized: done_keyword={self.settings.done_keyword!r}, "
            f"stop_mode={self.settings.stop_mode.value}, "
            f"nested_inclusion={self.settings.nested_inclusion.value}"
        )

    def build(self) -> tuple[ObjectNode, ObjectNode]:
        """Run the interactive definition, starting from an empty root object.

        Returns:
            Tuple of (full schema, metadata schema)
        """
        schema, metadata_schema, _ = self._build_object(depth=0)
        logger.info(
            f"Schema built: {len(leaf_paths(schema))} leaf field(s), "
            f"{len(leaf_paths(metadata_schema))} in metadata"
        )
        return schema, metadata_schema

    def _is_done(self, answer: str) -> bool:
        return answer.lower() == self.settings.done_keyword

    def _build_object(self, depth: int) -> tuple[ObjectNode, ObjectNode, bool]:
        """Ask for the fields of one object level.

        Returns:
            Tuple of (schema, metadata schema, keep_going). ``keep_going`` is
            False once the done keyword ended the whole session.
        """
        indent = indent_for(depth)
        fields: dict[str, SchemaNode] = {}
        metadata_fields: dict[str, SchemaNode] = {}
        keep_going = True

        while keep_going:
            name = self.prompter.ask(
                f"{indent}Enter a field name (or type '{self.settings.done_keyword}' to finish): "
            )
            if self._is_done(name):
                if self.settings.stop_mode is StopMode.SESSION:
                    keep_going = False
                break

            # A repeated name replaces the earlier definition
            metadata_fields.pop(name, None)

            nested = ask_yes_no(self.prompter, f"{indent}Is this field a nested structure?")
            if nested:
                is_array = ask_yes_no(self.prompter, f"{indent}Is this field an array?")
                child, metadata_child, keep_going = self._build_object(depth + 1)
                if is_array:
                    fields[name] = ArrayNode(child)
                    metadata_fields[name] = ArrayNode(metadata_child)
                else:
                    fields[name] = child
                    metadata_fields[name] = metadata_child
                logger.debug(f"Nested field added: {name!r} (array={is_array}, depth={depth})")
            else:
                fields[name] = LeafNode()
                logger.debug(f"Leaf field added: {name!r} (depth={depth})")

            included = ask_yes_no(self.prompter, f'{indent}Include "{name}" in metadata?')
            if included and (not nested or self.settings.nested_inclusion is NestedInclusion.OVERWRITE):
                metadata_fields[name] = LeafNode()
                logger.debug(f"Field marked for metadata: {name!r}")

        return ObjectNode(fields), ObjectNode(metadata_fields), keep_going
