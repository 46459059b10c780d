"""Rendering helpers for IMPORT nodes in the document head."""

from __future__ import annotations

from typing import Optional

from englang.ast import Node

from .context import RenderContext
from .elements import escape


def _embedding_tag(import_type: Optional[str], path: str) -> Optional[str]:
    if import_type == "seng" or path.endswith(".seng"):
        return "script"
    if import_type == "ceng" or path.endswith(".ceng"):
        return "style"
    return None


def render_inline_import(node: Node, ctx: RenderContext) -> bool:
    """Inline compiled text inside ``<script>``/``<style>``; False when there is nothing to inline."""
    compiled = node.get("compiled")
    if not compiled:
        return False
    tag = _embedding_tag(node.get("importType"), node.get("path") or "")
    if tag is None:
        return False
    ctx.emit(f"<{tag}>")
    # Compiled text goes in verbatim, never escaped
    ctx.emit_block(str(compiled).rstrip("\n"), extra_indent=ctx.indent_unit)
    ctx.emit(f"</{tag}>")
    return True


def render_external_import(node: Node, ctx: RenderContext) -> None:
    import_type = node.get("importType") or ""
    path = node.get("path") or ""
    src = escape(path)
    script = f'<script src="{src}"></script>'
    module = f'<script type="module" src="{src}"></script>'
    stylesheet = f'<link rel="stylesheet" href="{src}">'

    if import_type:
        if "js" in import_type:
            ctx.emit(script)
        elif "ts" in import_type:
            ctx.emit(module)
        elif "css" in import_type or "ceng" in import_type:
            ctx.emit(stylesheet)
        else:
            _emit_by_suffix(ctx, path, script, stylesheet)
    else:
        _emit_by_suffix(ctx, path, script, stylesheet)


def _emit_by_suffix(ctx: RenderContext, path: str, script: str, stylesheet: str) -> None:
    if path.endswith(".js"):
        ctx.emit(script)
    elif path.endswith((".css", ".ceng")):
        ctx.emit(stylesheet)
    else:
        ctx.emit(script)


def render_import(node: Node, ctx: RenderContext) -> None:
    if not node.get("path"):
        return
    if not render_inline_import(node, ctx):
        render_external_import(node, ctx)
