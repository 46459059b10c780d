"""Node dispatch for document body rendering."""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from englang.ast import Node, NodeType
from englang.lang.keywords import is_setup_function

from .context import RenderContext
from .elements import (
    TEXT_TAGS,
    render_attrs,
    render_div,
    render_image,
    render_input,
    render_link,
    render_meta,
    render_script_block,
    render_style,
    render_text_element,
)
from .imports import render_import

Renderer = Callable[[Node, RenderContext], None]

_RENDERERS: Dict[str, Renderer] = {
    "LINK": render_link,
    "IMAGE": render_image,
    "INPUT": render_input,
    "META": render_meta,
    "DIV": render_div,
    "STYLE": render_style,
    NodeType.SCRIPT_BLOCK.value: render_script_block,
}


def render_node(node: Node, ctx: RenderContext) -> None:
    if node.type in (NodeType.PAGE, NodeType.BLOCK):
        render_nodes(node.children, ctx)
    elif node.is_a(NodeType.FUNCTION):
        # setup* functions are metadata only; other bodies are spliced in place
        if not is_setup_function(node.name or ""):
            render_nodes(node.children, ctx)
    elif node.is_a(NodeType.IMPORT):
        return
    elif node.type in _RENDERERS:
        _RENDERERS[node.type](node, ctx)
    elif node.type in TEXT_TAGS:
        render_text_element(node, ctx)
    else:
        ctx.emit(f"<!-- Unknown element: {node.type} -->")


def render_nodes(nodes: Sequence[Node], ctx: RenderContext) -> None:
    for node in nodes:
        render_node(node, ctx)


__all__ = [
    "RenderContext",
    "render_attrs",
    "render_import",
    "render_node",
    "render_nodes",
]
