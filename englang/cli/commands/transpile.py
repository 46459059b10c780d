"""Standalone ``seng`` and ``ceng`` commands."""

import argparse
from pathlib import Path
from typing import Callable

from englang.ceng import compile_style_file
from englang.errors import EngError
from englang.lang.keywords import OUTPUT_SUFFIXES, STATEMENT_SUFFIX, STYLE_SUFFIX
from englang.seng import compile_statement_file

from ..errors import CLIError, CLIFileNotFoundError, handle_cli_exception
from ..output import print_success, print_text


def _run(args: argparse.Namespace, suffix: str, compile_file: Callable[..., str]) -> None:
    try:
        source_path = Path(args.file)
        if not source_path.exists():
            raise CLIFileNotFoundError(f"Source file not found: {source_path}")
        if source_path.suffix != suffix:
            raise CLIError(f"Input file must have {suffix} extension", code="BAD_EXTENSION")

        to_stdout = getattr(args, "stdout", False)
        output = compile_file(source_path, emit=not to_stdout, output_path=getattr(args, "out", None))

        if to_stdout:
            print_text(output)
            return
        target = getattr(args, "out", None) or source_path.with_suffix(OUTPUT_SUFFIXES[suffix])
        print_success(f"Compilation successful: {target}")
    except (CLIError, EngError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def cmd_seng(args: argparse.Namespace) -> None:
    """Transpile a ``.seng`` file to JavaScript."""
    _run(args, STATEMENT_SUFFIX, compile_statement_file)


def cmd_ceng(args: argparse.Namespace) -> None:
    """Rewrite a ``.ceng`` file to CSS."""
    _run(args, STYLE_SUFFIX, compile_style_file)
