"""Collapsible tree rendering of parsed JSON values."""

import json
import logging
from typing import Any, Iterator, List, Optional
from .parser import JSONParser
from .types import ProcessingError, TreeNode

DEFAULT_EXPAND_DEPTH = 2
EXPANDED_MARKER = "▾"
COLLAPSED_MARKER = "▸"
LEAF_MARKER = " "
INDENT = "  "


def value_type(value: Any) -> str:
    """Get the JSON type name of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


class TreeRenderer:
    """
    Builds and renders a tree view of a parsed JSON value.

    Nodes above expand_depth start expanded; deeper containers start
    collapsed and hide their children when rendered.
    """

    def __init__(self, expand_depth: int = DEFAULT_EXPAND_DEPTH,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the tree renderer.

        Args:
            expand_depth: Number of levels expanded by default
            parser: Optional JSONParser instance
            logger: Optional logger instance
        """
        if expand_depth < 0:
            raise ValueError("expand_depth must be non-negative")

        self.expand_depth = expand_depth
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)

    def build(self, value: Any, key: Optional[str] = None,
              index: Optional[int] = None, level: int = 0) -> TreeNode:
        """
        Build a tree node for value and all of its descendants.

        Args:
            value: Parsed JSON value
            key: Object key of this value, if any
            index: Array index of this value, if any
            level: Nesting level, 0 for the root

        Returns:
            TreeNode for value
        """
        node_type = value_type(value)
        node = TreeNode(
            value_type=node_type,
            display_value=self._display_value(value, node_type),
            level=level,
            key=key,
            index=index,
        )

        if node_type == "object":
            node.children = [self.build(child, key=str(child_key), level=level + 1)
                             for child_key, child in value.items()]
        elif node_type == "array":
            node.children = [self.build(child, index=i, level=level + 1)
                             for i, child in enumerate(value)]

        node.expanded = node.is_container and level < self.expand_depth
        return node

    @staticmethod
    def _display_value(value: Any, node_type: str) -> str:
        if node_type == "object":
            return "Object"
        if node_type == "array":
            return f"Array[{len(value)}]"
        return json.dumps(value, ensure_ascii=False)

    def render(self, node: TreeNode) -> List[str]:
        """
        Render a tree as indented text lines.

        Args:
            node: Root node to render

        Returns:
            One line per visible node
        """
        lines = []
        self._render_node(node, lines)
        return lines

    def _render_node(self, node: TreeNode, lines: List[str]) -> None:
        prefix = INDENT * node.level
        label = f"{node.label}: " if node.label is not None else ""

        if not node.is_container:
            lines.append(f"{prefix}{LEAF_MARKER} {label}{node.display_value} ({node.value_type})")
            return

        marker = EXPANDED_MARKER if node.expanded else COLLAPSED_MARKER
        count = len(node.children)
        noun = "item" if count == 1 else "items"
        lines.append(f"{prefix}{marker} {label}{node.display_value} ({count} {noun})")

        if node.expanded:
            for child in node.children:
                self._render_node(child, lines)

    def render_text(self, content: str) -> List[str]:
        """
        Parse content and render its tree.

        Returns:
            Rendered lines, or a single error line if content is not valid JSON
        """
        try:
            data = self.parser.parse(content)
        except ProcessingError as e:
            self.logger.warning(f"Cannot render tree: {e}")
            return [f"Error parsing JSON: {e}"]

        return self.render(self.build(data))

    @staticmethod
    def walk(node: TreeNode) -> Iterator[TreeNode]:
        """Iterate over node and all descendants depth-first."""
        yield node
        for child in node.children:
            yield from TreeRenderer.walk(child)

    def expand_all(self, node: TreeNode) -> TreeNode:
        """Mark every container in the tree as expanded."""
        for current in self.walk(node):
            current.expanded = current.is_container
        return node

    def collapse_all(self, node: TreeNode) -> TreeNode:
        """Mark every node in the tree as collapsed."""
        for current in self.walk(node):
            current.expanded = False
        return node
