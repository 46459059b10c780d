"""
Abstract syntax tree for the ENG structural dialect.

Every node is a :class:`Node` with a type tag, a dict of attributes and an
ordered list of children. The tree is built by
:mod:`englang.lang.parser`, rewritten (never mutated) by
:mod:`englang.resolver` and consumed by :mod:`englang.codegen`.
"""

from .nodes import Node, NodeType, element

__all__ = ["Node", "NodeType", "element"]
