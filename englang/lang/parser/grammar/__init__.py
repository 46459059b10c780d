"""Lexical grammar for the ENG structural dialect."""

from .lexer import Lexer, Token, TokenType, tokenize

__all__ = ["Lexer", "Token", "TokenType", "tokenize"]
