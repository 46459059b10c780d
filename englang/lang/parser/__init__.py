"""ENG structural-dialect parser package.

Public API:
    parse_document(source, path) -> Node
    EngParser - the recursive descent parser
    tokenize(source, path) -> List[Token]
"""

from englang.ast import Node
from englang.errors import EngSyntaxError

from .grammar import Lexer, Token, TokenType, tokenize
from .parse import EngParser


def parse_document(source: str, path: str = "") -> Node:
    """
    Parse ``.heng`` source text into a ROOT node.

    Args:
        source: Structural-dialect source text
        path: Optional file path for error reporting

    Returns:
        ROOT AST node

    Raises:
        EngSyntaxError: If a structurally required token is missing or wrong
    """
    return EngParser(tokenize(source, path), path=path).parse()


__all__ = [
    "parse_document",
    "EngParser",
    "EngSyntaxError",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
]
