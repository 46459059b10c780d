"""
HTML document generator for ENG structural documents.

Turns a (normally import-resolved) ROOT node into one complete HTML page:

* a fixed preamble (doctype, charset and viewport metadata);
* a ``<title>`` taken from the last TITLE inside a ``setup*`` function,
  falling back to the configured default;
* every IMPORT, top-level or hoisted from a ``setup*`` function, inlined
  when compiled text is attached and referenced externally otherwise;
* a ``<body>`` holding every other top-level node in document order.

Indentation is cosmetic and has no effect on meaning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from englang.ast import Node, NodeType
from englang.config import EngConfig
from englang.lang.keywords import is_setup_function

from .renderers import RenderContext, render_import, render_nodes
from .renderers.elements import escape


@dataclass
class DocumentMetadata:
    title: Optional[str] = None
    imports: List[Node] = field(default_factory=list)


def collect_metadata(root: Node) -> DocumentMetadata:
    """Gather the head contents: top-level imports plus TITLE/IMPORT hoisted from setup functions."""
    metadata = DocumentMetadata()
    for child in root.children:
        if child.is_a(NodeType.IMPORT):
            metadata.imports.append(child)
        elif child.is_a(NodeType.FUNCTION) and is_setup_function(child.name or ""):
            for node in child.children:
                if node.is_a(NodeType.TITLE):
                    metadata.title = node.get("content") or metadata.title
                elif node.is_a(NodeType.IMPORT):
                    metadata.imports.append(node)
    return metadata


def body_nodes(root: Node) -> Tuple[Node, ...]:
    return tuple(child for child in root.children if not child.is_a(NodeType.IMPORT))


class CodeGenerator:
    """Walks a ROOT node once and returns the HTML text."""

    def __init__(self, config: Optional[EngConfig] = None):
        self.config = config or EngConfig()

    def generate(self, root: Node) -> str:
        ctx = RenderContext(indent_unit=self.config.indent)
        metadata = collect_metadata(root)

        ctx.emit("<!DOCTYPE html>")
        ctx.emit("<html>")
        with ctx.nested():
            self._render_head(metadata, ctx)
            ctx.emit("<body>")
            with ctx.nested():
                render_nodes(body_nodes(root), ctx)
            ctx.emit("</body>")
        ctx.emit("</html>")
        return ctx.render()

    def _render_head(self, metadata: DocumentMetadata, ctx: RenderContext) -> None:
        ctx.emit("<head>")
        with ctx.nested():
            ctx.emit('<meta charset="UTF-8">')
            ctx.emit('<meta name="viewport" content="width=device-width, initial-scale=1.0">')
            ctx.emit(f"<title>{escape(metadata.title or self.config.default_title)}</title>")
            for node in metadata.imports:
                render_import(node, ctx)
        ctx.emit("</head>")


def generate_document(root: Node, config: Optional[EngConfig] = None) -> str:
    """Render ``root`` as a complete HTML document."""
    return CodeGenerator(config).generate(root)


__all__ = ["CodeGenerator", "DocumentMetadata", "collect_metadata", "generate_document"]
