"""Static HTML frontend generation for ENG documents."""

from .document import CodeGenerator, DocumentMetadata, collect_metadata, generate_document
from .renderers import RenderContext, render_attrs

__all__ = [
    "CodeGenerator",
    "DocumentMetadata",
    "RenderContext",
    "collect_metadata",
    "generate_document",
    "render_attrs",
]
