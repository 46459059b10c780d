"""Core AST node definitions for the structural dialect."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class NodeType(str, Enum):
    """Node types produced directly by the parser.

    Element nodes created by ``add <kind>`` use the upper-cased kind as their
    type, so ``Node.type`` is a plain string that compares equal to these
    members.
    """

    ROOT = "ROOT"
    PAGE = "PAGE"
    FUNCTION = "FUNCTION"
    IMPORT = "IMPORT"
    BLOCK = "BLOCK"
    TITLE = "TITLE"
    SCRIPT_BLOCK = "SCRIPT_BLOCK"
    HEADING = "HEADING"
    PARAGRAPH = "PARAGRAPH"
    BUTTON = "BUTTON"
    LINK = "LINK"
    IMAGE = "IMAGE"
    DIV = "DIV"
    INPUT = "INPUT"
    LABEL = "LABEL"

    def __str__(self) -> str:
        return self.value


@dataclass
class Node:
    """A structural-dialect AST node.

    ``attributes`` holds dialect-specific data: IMPORT carries
    ``importType``/``path`` (and ``compiled`` once resolved), element nodes
    carry ``content`` and ``attrs``.
    """

    type: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.type, NodeType):
            self.type = self.type.value

    def add_child(self, node: "Node") -> "Node":
        self.children.append(node)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def is_a(self, node_type: str) -> bool:
        return self.type == str(node_type)

    def with_attributes(self, **updates: Any) -> "Node":
        """Return a copy of this node with ``updates`` merged into its attributes."""
        merged = dict(self.attributes)
        merged.update(updates)
        return replace(self, attributes=merged, children=list(self.children))

    def with_children(self, children: List["Node"]) -> "Node":
        return replace(self, attributes=dict(self.attributes), children=list(children))

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, node_type: str) -> List["Node"]:
        return [node for node in self.walk() if node.is_a(node_type)]

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get("name")


def element(kind: str, content: str = "", attrs: Optional[List[str]] = None) -> Node:
    """Build an element node the way ``add <kind>`` does."""
    return Node(kind.upper(), {"content": content, "attrs": list(attrs or [])})


__all__ = ["NodeType", "Node", "element"]
