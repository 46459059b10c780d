"""Rendering helpers for element nodes."""

from __future__ import annotations

import html
from types import MappingProxyType
from typing import Mapping, Sequence

from englang.ast import Node, NodeType

from .context import RenderContext


# Content shown when an element was added without a string.
DEFAULT_CONTENT: Mapping[str, str] = MappingProxyType({
    NodeType.HEADING.value: "Heading",
    NodeType.PARAGRAPH.value: "Paragraph",
    NodeType.BUTTON.value: "Button",
    NodeType.LINK.value: "Link",
    NodeType.LABEL.value: "Label",
    NodeType.TITLE.value: "Page Title",
})

# Elements rendered as ``<tag attrs>escaped content</tag>``.
TEXT_TAGS: Mapping[str, str] = MappingProxyType({
    "HEADING": "h1",
    "PARAGRAPH": "p",
    "BUTTON": "button",
    "LABEL": "label",
    "TITLE": "title",
    "SPAN": "span",
    "SECTION": "section",
    "ARTICLE": "article",
    "NAV": "nav",
    "HEADER": "header",
    "FOOTER": "footer",
    "CODE": "code",
    "FORM": "form",
    "TEXTAREA": "textarea",
    "SELECT": "select",
    "OPTION": "option",
    "TABLE": "table",
    "ROW": "tr",
    "CELL": "td",
    "LIST": "ul",
    "ITEM": "li",
})


def escape(text: object) -> str:
    return html.escape(str(text), quote=True)


def render_attrs(attrs: Sequence[str]) -> str:
    """Render declared attributes as ``with-*`` classes plus a ``data-with`` list."""
    if not attrs:
        return ""
    classes = " ".join(f"with-{attr}" for attr in attrs)
    data = " ".join(attrs)
    return f' class="{escape(classes)}" data-with="{escape(data)}"'


def _content(node: Node) -> str:
    return node.get("content") or DEFAULT_CONTENT.get(node.type, "")


def render_text_element(node: Node, ctx: RenderContext) -> None:
    tag = TEXT_TAGS[node.type]
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f"<{tag}{extra}>{escape(_content(node))}</{tag}>")


def render_link(node: Node, ctx: RenderContext) -> None:
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f'<a href="#"{extra}>{escape(_content(node))}</a>')


def render_image(node: Node, ctx: RenderContext) -> None:
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f'<img src="{escape(_content(node))}" alt="Image"{extra}>')


def render_input(node: Node, ctx: RenderContext) -> None:
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f'<input type="text"{extra}>')


def render_meta(node: Node, ctx: RenderContext) -> None:
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f'<meta content="{escape(_content(node))}"{extra}>')


def render_div(node: Node, ctx: RenderContext) -> None:
    content = str(node.get("content") or "")
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f"<div{extra}>")
    if content:
        with ctx.nested():
            # Content starting with '<' is pre-formed markup
            if content.strip().startswith("<"):
                ctx.emit_block(content)
            else:
                ctx.emit(escape(content))
    ctx.emit("</div>")


def render_style(node: Node, ctx: RenderContext) -> None:
    extra = render_attrs(node.get("attrs") or [])
    ctx.emit(f"<style{extra}>")
    content = str(node.get("content") or "")
    if content:
        with ctx.nested():
            ctx.emit_block(content)
    ctx.emit("</style>")


def render_script_block(node: Node, ctx: RenderContext) -> None:
    kind = node.get("kind")
    attrs = node.get("attrs") or []
    if kind == "cstyle":
        ctx.emit("<style>")
        ctx.emit("  /* custom style block */")
        ctx.emit("</style>")
    elif "ts" in attrs:
        ctx.emit('<script type="module">')
        ctx.emit("  // TypeScript (transpile required in production)")
        ctx.emit("</script>")
    else:
        ctx.emit("<script>")
        ctx.emit("  // Inline script")
        ctx.emit("</script>")
