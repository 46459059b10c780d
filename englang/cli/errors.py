"""
Error handling for the ENG CLI.

Command handlers raise :class:`CLIError` (or let an :class:`EngError`
escape); :func:`handle_cli_exception` formats it and exits with status 1.
"""

import os
import sys
import traceback
from typing import Any, Dict, NoReturn, Optional

from .output import print_error


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "CLI_ERROR",
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIFileNotFoundError(CLIError):
    """Raised when an input file does not exist."""

    def __init__(self, message: str, *, hint: Optional[str] = None):
        super().__init__(message, code="FILE_NOT_FOUND", hint=hint)


class CLICompileError(CLIError):
    """Raised when compilation reports failure."""

    def __init__(self, message: str, *, hint: Optional[str] = None):
        super().__init__(message, code="COMPILE_FAILED", hint=hint)


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    if verbose_flag:
        return True
    return os.getenv("ENGLANG_VERBOSE", "").strip().lower() in {"1", "true", "yes", "on"}


def format_cli_error(exc: BaseException, *, include_traceback: bool = False) -> str:
    """Format an exception for one-line CLI display, plus an optional hint and traceback."""
    hint = getattr(exc, "hint", None)
    message = getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
    lines = [f"Compilation failed: {message}"]
    if hint:
        lines.append(f"Hint: {hint}")
    if include_traceback:
        lines.append("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return "\n".join(lines)


def handle_cli_exception(exc: BaseException, *, verbose: bool = False, exit_code: int = 1) -> NoReturn:
    """
    Print ``exc`` to stderr and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    print_error(format_cli_error(exc, include_traceback=cli_verbose_enabled(verbose)))
    sys.exit(exit_code)


__all__ = [
    "CLIError",
    "CLIFileNotFoundError",
    "CLICompileError",
    "format_cli_error",
    "handle_cli_exception",
]
