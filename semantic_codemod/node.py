"""Structural tree model the annotator works on."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from semantic_codemod.attribute import Attribute


@dataclass(eq=False)
class Node:
    """Represents a JSX element: a component name, its attributes and children."""

    component_name: str | None
    attributes: list[Attribute] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)
    parent: "Node | None" = field(default=None, repr=False)
    host: Any = field(default=None, repr=False)  # backing syntax node, if any

    def add_child(self, child: "Node") -> "Node":
        """Attach a child node and record its parent back-reference."""
        child.parent = self
        self.children.append(child)
        return child

    def ancestors(self) -> Iterator["Node"]:
        """Yield enclosing nodes, nearest first."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
