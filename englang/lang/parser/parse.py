"""Recursive descent parser for the ENG structural dialect.

The dialect has no block terminators: ``create page`` swallows every
statement after it and ``function`` runs until the next ``function``.
Statements the parser does not recognise are skipped one token at a time;
the only hard failure is a structurally required token of the wrong kind.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from englang.ast import Node, NodeType
from englang.errors import EngSyntaxError
from englang.lang.keywords import (
    IMPORT_EXTENSIONS,
    IMPORT_SOURCE_KEYWORDS,
    SCRIPT_BLOCK_KEYWORDS,
    STATEMENT_KEYWORDS,
    TITLE_KEYWORDS,
)

from .grammar.lexer import Token, TokenType, tokenize


_WORD_TYPES = (TokenType.KEYWORD, TokenType.IDENTIFIER)


class EngParser:
    """
    Recursive descent parser for ``.heng`` token streams.

    Top-level dispatch is driven by the keyword under the cursor; each
    ``parse_*`` method returns a node or None when the statement produced
    nothing.
    """

    def __init__(self, tokens: Sequence[Token], *, path: str = ""):
        if not tokens or tokens[-1].type is not TokenType.EOF:
            last = tokens[-1] if tokens else None
            eof = Token(
                TokenType.EOF,
                '',
                last.line if last else 1,
                last.column if last else 1,
            )
            tokens = list(tokens) + [eof]
        self.tokens: List[Token] = list(tokens)
        self.path = path
        self.pos = 0

    @classmethod
    def from_source(cls, source: str, *, path: str = "") -> "EngParser":
        return cls(tokenize(source, path), path=path)

    # ====================================================================
    # Token Management
    # ====================================================================

    def current(self) -> Token:
        """Get current token; the trailing EOF is returned once exhausted."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]

    def at_end(self) -> bool:
        return self.current().type is TokenType.EOF

    def advance(self) -> Token:
        """Consume and return current token. EOF is never consumed."""
        token = self.current()
        if not self.at_end():
            self.pos += 1
        return token

    def consume(self, token_type: TokenType, value: Optional[str] = None) -> Token:
        """Consume the current token, requiring its type and optionally its value."""
        token = self.current()
        if token.type is not token_type:
            raise self.error(
                f"Expected {token_type.name}, got {token.type.name}",
                expected=[token_type.name],
                token=token,
            )
        if value is not None and token.value != value:
            raise self.error(
                f"Expected '{value}', got '{token.value}'",
                expected=[value],
                token=token,
            )
        return self.advance()

    def expect(self, *types: TokenType) -> Token:
        """Consume the current token if it is one of ``types``."""
        token = self.current()
        if token.type not in types:
            names = ' or '.join(t.name for t in types)
            raise self.error(
                f"Expected {names}, got {token.type.name}",
                expected=[t.name for t in types],
                token=token,
            )
        return self.advance()

    def error(self, message: str, *, expected: Sequence[str] = (), token: Optional[Token] = None) -> EngSyntaxError:
        token = token or self.current()
        found = token.value if token.value else token.type.name
        return EngSyntaxError(
            message,
            expected=expected,
            found=found,
            path=self.path or None,
            line=token.line,
            column=token.column,
        )

    # ====================================================================
    # Statements
    # ====================================================================

    def parse(self) -> Node:
        root = Node(NodeType.ROOT)
        while not self.at_end():
            stmt = self.parse_statement()
            if stmt is not None:
                root.add_child(stmt)
        return root

    def parse_statement(self) -> Optional[Node]:
        token = self.current()

        if token.type is TokenType.KEYWORD:
            if token.value == 'create':
                return self.parse_create()
            if token.value == 'add':
                return self.parse_add()
            if token.value == 'function':
                return self.parse_function()
            if token.value == 'import':
                return self.parse_import()
            if token.value in SCRIPT_BLOCK_KEYWORDS:
                return self.parse_script_block()
            if token.value in TITLE_KEYWORDS:
                return self.parse_title()

        # Unrecognized token - skip
        self.advance()
        return None

    def parse_create(self) -> Optional[Node]:
        self.consume(TokenType.KEYWORD, 'create')
        if self.current().value != 'page':
            return None
        self.advance()
        node = Node(NodeType.PAGE)
        self.parse_block(node)
        return node

    def parse_block(self, parent: Node) -> None:
        """Attach every remaining statement to ``parent`` (there is no closing construct)."""
        while not self.at_end():
            if self.current().type is TokenType.KEYWORD:
                stmt = self.parse_statement()
                if stmt is not None:
                    parent.add_child(stmt)
            else:
                self.advance()

    def parse_add(self) -> Node:
        """
        Parse ``add <kind> ["content"] [with ...]``.

        A missing element word after ``add`` is the one hard parse failure;
        every other unrecognised token is skipped by :meth:`parse_statement`.

        Raises:
            EngSyntaxError: If ``add`` is not followed by a KEYWORD or IDENTIFIER
        """
        self.consume(TokenType.KEYWORD, 'add')
        kind = self.expect(*_WORD_TYPES).value

        content = ''
        if self.current().type is TokenType.STRING:
            content = self.consume(TokenType.STRING).value

        attrs = self.parse_with_attributes()
        return Node(kind.upper(), {'content': content, 'attrs': attrs})

    def parse_function(self) -> Node:
        self.consume(TokenType.KEYWORD, 'function')
        name = 'anonymous'
        if self.current().type is TokenType.IDENTIFIER:
            name = self.advance().value

        node = Node(NodeType.FUNCTION, {'name': name})
        while not self.at_end() and not self.current().is_keyword('function'):
            stmt = self.parse_statement()
            if stmt is not None:
                node.add_child(stmt)
        return node

    def parse_import(self) -> Node:
        self.consume(TokenType.KEYWORD, 'import')

        import_type = None
        if self.current().type in _WORD_TYPES and not self.current().is_keyword(*IMPORT_SOURCE_KEYWORDS):
            import_type = self.advance().value

        if self.current().is_keyword(*IMPORT_SOURCE_KEYWORDS):
            self.advance()

        path = None
        if self.current().type is TokenType.PATH:
            path = self.consume(TokenType.PATH).value
            trailing = self.current()
            if trailing.type is TokenType.IDENTIFIER and trailing.value in IMPORT_EXTENSIONS:
                self.advance()
                path = f"{path}.{trailing.value}"

        return Node(NodeType.IMPORT, {'importType': import_type, 'path': path})

    def parse_script_block(self) -> Node:
        kind = self.advance().value
        attrs = self.parse_with_attributes()
        return Node(NodeType.SCRIPT_BLOCK, {'kind': kind, 'attrs': attrs})

    def parse_title(self) -> Node:
        self.advance()
        content = ''
        if self.current().type is TokenType.STRING:
            content = self.consume(TokenType.STRING).value
        return Node(NodeType.TITLE, {'content': content})

    def parse_with_attributes(self) -> List[str]:
        """Parse an optional ``with a [and b]*`` list."""
        attrs: List[str] = []
        if not self.current().is_keyword('with'):
            return attrs
        self.advance()
        while not self.at_end() and self.current().type in _WORD_TYPES:
            value = self.current().value
            if value == 'and':
                self.advance()
                continue
            if self.current().type is TokenType.KEYWORD and value in STATEMENT_KEYWORDS:
                break
            attrs.append(value)
            self.advance()
        return attrs


__all__ = ["EngParser"]
