"""
ENG CLI entry point.

Subcommands:
    build  compile a .heng document to HTML
    seng   transpile a .seng file to JavaScript
    ceng   rewrite a .ceng file to CSS

A bare ``englang page.heng [out.html]`` is treated as ``build``.
"""

import argparse
import sys
from typing import List, Optional

from englang import __version__
from englang.errors import EngError
from englang.lang.keywords import STRUCTURE_SUFFIX

from .commands import cmd_build, cmd_ceng, cmd_seng
from .context import configure_logging, resolve_config
from .errors import handle_cli_exception

COMMANDS = {"build", "seng", "ceng"}


def _normalize_legacy_args(argv: List[str]) -> List[str]:
    """Rewrite ``englang file.heng [out.html]`` into ``englang build file.heng [-o out.html]``."""
    if not argv or argv[0].startswith("-") or argv[0] in COMMANDS:
        return argv
    if not argv[0].endswith(STRUCTURE_SUFFIX):
        return argv
    normalized = ["build", argv[0]]
    rest = argv[1:]
    if rest and not rest[0].startswith("-"):
        normalized.extend(["--out", rest[0]])
        rest = rest[1:]
    return normalized + rest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ENG toolchain - author web pages, scripts and styles in plain English",
        prog="englang",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Path to an englang.toml or .englang.json file")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "warning", "error"],
        default=None,
        help="Logging level (or set ENGLANG_LOG_LEVEL)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print tracebacks with errors (or set ENGLANG_VERBOSE=1)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser_ = subparsers.add_parser("build", help="Compile a .heng document to HTML")
    build_parser_.add_argument("file", help="Path to the .heng source file")
    build_parser_.add_argument("--out", "-o", default=None, help="Output .html path (defaults beside the source)")
    build_parser_.set_defaults(func=cmd_build)

    seng_parser = subparsers.add_parser("seng", help="Transpile a .seng file to JavaScript")
    seng_parser.add_argument("file", help="Path to the .seng source file")
    seng_parser.add_argument("--out", "-o", default=None, help="Output .js path (defaults beside the source)")
    seng_parser.add_argument("--stdout", action="store_true", help="Print the JavaScript instead of writing it")
    seng_parser.set_defaults(func=cmd_seng)

    ceng_parser = subparsers.add_parser("ceng", help="Rewrite a .ceng file to CSS")
    ceng_parser.add_argument("file", help="Path to the .ceng source file")
    ceng_parser.add_argument("--out", "-o", default=None, help="Output .css path (defaults beside the source)")
    ceng_parser.add_argument("--stdout", action="store_true", help="Print the CSS instead of writing it")
    ceng_parser.set_defaults(func=cmd_ceng)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['build', 'page.heng'])  # doctest: +SKIP
        ✓ Compilation successful: page.html
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = _normalize_legacy_args(list(argv))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        sys.exit(1)

    try:
        config = resolve_config(args.config)
    except EngError as exc:
        handle_cli_exception(exc, verbose=args.verbose)

    configure_logging(args.log_level, config)
    args.eng_config = config
    args.func(args)


__all__ = ["main", "build_parser"]
