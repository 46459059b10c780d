"""Unified error model for the ENG toolchain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        if self.path and self.line is not None and self.column is not None:
            return f"{self.path}:{self.line}:{self.column}"
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.line is not None and self.column is not None:
            return f"line {self.line}:{self.column}"
        if self.path:
            return self.path
        return "unknown location"


class EngError(Exception):
    """Base class for all compiler errors surfaced to users."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path=path, line=line, column=column)
        self.path = path
        self.line = line
        self.column = column
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        location_desc = self.location.describe()
        if location_desc != "unknown location":
            meta_parts.append(location_desc)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class EngSyntaxError(EngError):
    """Raised when the parser meets a token it structurally requires and it is wrong."""

    code = "SYNTAX_ERROR"

    def __init__(
        self,
        message: str,
        *,
        expected: Optional[Sequence[str]] = None,
        found: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.expected: List[str] = list(expected or [])
        self.found = found


class EngTranspileError(EngError):
    """Raised when a statement or styling source cannot be transpiled."""

    code = "TRANSPILE_ERROR"


class EngImportError(EngError):
    """Raised when an imported file cannot be compiled."""

    code = "IMPORT_ERROR"


class EngConfigError(EngError):
    """Raised when workspace configuration is malformed."""

    code = "CONFIG_ERROR"


__all__ = [
    "EngError",
    "EngSyntaxError",
    "EngTranspileError",
    "EngImportError",
    "EngConfigError",
    "ErrorLocation",
]
