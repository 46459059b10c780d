"""CLI command handlers."""

from .build import cmd_build
from .transpile import cmd_ceng, cmd_seng

__all__ = ["cmd_build", "cmd_ceng", "cmd_seng"]
