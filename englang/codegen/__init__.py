"""Code generation for ENG documents."""

from .frontend import CodeGenerator, generate_document

__all__ = ["CodeGenerator", "generate_document"]
