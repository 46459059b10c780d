"""Lexical analyzer (tokenizer) for the ENG structural dialect.

Converts ``.heng`` source text into a flat stream of tokens for parsing.
The lexer never fails: characters it does not recognise are skipped.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from englang.lang.keywords import is_reserved


class TokenType(Enum):
    """Token types for the structural dialect."""

    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING = auto()
    PATH = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A single token with position information."""

    type: TokenType
    value: str
    line: int
    column: int

    def is_keyword(self, *values: str) -> bool:
        if self.type is not TokenType.KEYWORD:
            return False
        return not values or self.value in values

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


def _is_word_start(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in '_-')


class Lexer:
    """Tokenizer for ENG structural source code."""

    def __init__(self, source: str, path: str = ""):
        """Initialize lexer with source code."""
        self.source = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1

        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        """Skip spaces, tabs and carriage returns (but not newlines)."""
        while self.peek() in (' ', '\t', '\r'):
            self.advance()

    def read_string(self) -> str:
        """Read a double-quoted string; an unterminated string runs to end of input."""
        self.advance()  # opening quote
        chars = []
        while True:
            char = self.peek()
            if char is None:
                break
            if char == '"':
                self.advance()
                break
            if char == '\\' and self.peek(1) is not None:
                self.advance()
                escape = self.advance()
                chars.append('\n' if escape == 'n' else escape)
            else:
                chars.append(self.advance())
        return ''.join(chars)

    def read_path(self) -> str:
        """Read a bracketed path; the interior is taken verbatim and trimmed."""
        self.advance()  # [
        chars = []
        while self.peek() is not None and self.peek() != ']':
            chars.append(self.advance())
        if self.peek() == ']':
            self.advance()
        return ''.join(chars).strip()

    def read_word(self) -> str:
        """Read a keyword or identifier."""
        chars = []
        while self.peek() is not None and _is_word_char(self.peek()):
            chars.append(self.advance())
        return ''.join(chars)

    def add_token(self, token_type: TokenType, value: str, line: int, column: int) -> None:
        self.tokens.append(Token(type=token_type, value=value, line=line, column=column))

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source."""
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            char = self.peek()
            line, column = self.line, self.column

            if char == '\n':
                self.advance()
                continue

            if char == '"':
                self.add_token(TokenType.STRING, self.read_string(), line, column)
                continue

            if char == '[':
                self.add_token(TokenType.PATH, self.read_path(), line, column)
                continue

            if _is_word_start(char):
                value = self.read_word().lower()
                token_type = TokenType.KEYWORD if is_reserved(value) else TokenType.IDENTIFIER
                self.add_token(token_type, value, line, column)
                continue

            # Punctuation and anything else carries no meaning here
            self.advance()

        self.add_token(TokenType.EOF, '', self.line, self.column)
        return self.tokens


def tokenize(source: str, path: str = "") -> List[Token]:
    """Tokenize ENG structural source code."""
    lexer = Lexer(source, path)
    return lexer.tokenize()


__all__ = ["Token", "TokenType", "Lexer", "tokenize"]
