"""Statement dialect (``.seng``) support."""

from .blocks import Block, BlockStack
from .transpiler import (
    StatementTranspiler,
    compile_statement_file,
    transpile_statements,
)

__all__ = [
    "Block",
    "BlockStack",
    "StatementTranspiler",
    "compile_statement_file",
    "transpile_statements",
]
