"""Schema-guided data collection.

This module walks a submodule schema and prompts for a value at every
leaf, producing one data instance shaped exactly like the schema.
"""

from structure.nodes import ArrayNode, DataInstance, LeafNode, ObjectNode, SchemaNode
from utils import Prompter, ask_yes_no, get_logger, indent_for

logger = get_logger(__name__)


class DataCollector:
    """Collects one data instance by recursive descent over a schema.

    - Leaf: one prompt, the answer is stored verbatim
    - Object: every field in schema order
    - Array: at least one element, then "add another?" after each

    Args:
        prompter: Prompt transport
    """

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def collect(self, schema: SchemaNode) -> DataInstance:
        """Prompt for a complete data instance."""
        data = self._collect(schema, depth=0, label="value")
        logger.debug("Data instance collected")
        return data

    def _collect(self, node: SchemaNode, depth: int, label: str) -> DataInstance:
        if isinstance(node, ObjectNode):
            return self._collect_object(node, depth)
        if isinstance(node, ArrayNode):
            return self._collect_array(node, depth)
        if isinstance(node, LeafNode):
            return self.prompter.ask(f"{indent_for(depth)}{label}: ")
        raise TypeError(f"Not a schema node: {type(node).__name__}")

    def _collect_object(self, node: ObjectNode, depth: int) -> dict[str, DataInstance]:
        indent = indent_for(depth)
        data: dict[str, DataInstance] = {}
        for name, child in node.items():
            if isinstance(child, ArrayNode):
                self.prompter.say(f"{indent}{name} (array):")
                data[name] = self._collect_array(child, depth + 1)
            elif isinstance(child, ObjectNode):
                self.prompter.say(f"{indent}{name}:")
                data[name] = self._collect_object(child, depth + 1)
            else:
                data[name] = self._collect(child, depth, label=name)
        return data

    def _collect_array(self, node: ArrayNode, depth: int) -> list[DataInstance]:
        indent = indent_for(depth)
        items: list[DataInstance] = []
        while True:
            items.append(self._collect(node.template, depth + 1, label="value"))
            logger.debug(f"Array element {len(items)} collected (depth={depth})")
            if not ask_yes_no(self.prompter, f"{indent}Add another item to the array?"):
                break
        return items
