"""
Build command implementation.

Compiles a ``.heng`` document (and its ``.seng``/``.ceng`` imports) into an
HTML file.
"""

import argparse
from pathlib import Path

from englang.compiler import EngCompiler
from englang.errors import EngError

from ..context import get_config
from ..errors import CLICompileError, CLIError, CLIFileNotFoundError, handle_cli_exception
from ..output import print_success, print_warning


def cmd_build(args: argparse.Namespace) -> None:
    """
    Handle the 'build' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - file: Path to the .heng source file
            - out: Output .html path (optional, defaults beside the source)

    Raises:
        SystemExit: On any error during the build

    Examples:
        >>> cmd_build(argparse.Namespace(file='page.heng', out=None))  # doctest: +SKIP
        ✓ Compilation successful: page.html
    """
    try:
        source_path = Path(args.file)
        if not source_path.exists():
            raise CLIFileNotFoundError(
                f"Source file not found: {source_path}",
                hint="Check the file path and try again",
            )

        compiler = EngCompiler(get_config(args))
        result = compiler.compile_file(source_path, getattr(args, "out", None))

        for warning in result.warnings:
            print_warning(warning)
        if not result.success:
            raise CLICompileError(result.error or "unknown error")

        print_success(f"Compilation successful: {result.output_path}")
    except (CLIError, EngError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
