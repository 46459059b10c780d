"""
Statement-dialect (``.seng``) to JavaScript transpiler.

The dialect is flat and indentation-free: scopes are opened by English-like
header lines (``function draw``, ``class Ball``, ``when (x > 1)``,
``on button click``) and closed by blank lines, by a new top-level
construct, or implicitly at end of input. A :class:`BlockStack` keeps the
open scopes so every opener gets exactly one closer, innermost first.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Pattern, Tuple, Union

from englang.errors import EngTranspileError
from englang.lang.keywords import OUTPUT_SUFFIXES, STATEMENT_SUFFIX, strip_raw_marker

from .blocks import Block, BlockStack

logger = logging.getLogger(__name__)


# Whole-phrase macros rewritten before line translation.
MACROS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"get element by id\s+[\"']([^\"']+)[\"']", re.I), r'document.getElementById("\g<1>")'),
    (re.compile(r"get element by selector\s+[\"']([^\"']+)[\"']", re.I), r'document.querySelector("\g<1>")'),
    (re.compile(r"requestAnimationFrame\s+(\w+)", re.I), r"requestAnimationFrame(\g<1>)"),
    (re.compile(r"request animation frame\s+(\w+)", re.I), r"requestAnimationFrame(\g<1>)"),
    (
        re.compile(r"for\s+(\w+)\s+from\s+(\d+)\s+to\s+(\d+)", re.I),
        r"for (let \g<1> = \g<2>; \g<1> <= \g<3>; \g<1>++) {",
    ),
)

COMMENT_RE = re.compile(r"(?:^|(?<=\s))--")
TOP_LEVEL_RE = re.compile(
    r"^(function\b|class\b|for\s+|on\s+|import\s+|add\s+|create\s+"
    r"|requestAnimationFrame\b|request animation frame\b)",
    re.I,
)
FUNCTION_RE = re.compile(r"^function\s+(\w+)(?:\s*\(([^)]*)\))?", re.I)
METHOD_RE = re.compile(r"^(static\s+)?(\w+)\s*\(([^)]*)\)\s*$", re.I)
CLASS_RE = re.compile(r"^class\s+(\w+)", re.I)
EVENT_RE = re.compile(r"^on\s+(\w+)\s+(\w+)(?:\s*\(([^)]*)\))?", re.I)
WHEN_RE = re.compile(r"^when\s*\((.+)\)", re.I)
ELSE_RE = re.compile(r"^else$", re.I)
LOOP_RE = re.compile(r"^loop\s*\((.+)\)", re.I)
VAR_RE = re.compile(r"^(?:var|varibal)\s+(\w+)(?:\s*=\s*(.+))?", re.I)
LOG_RE = re.compile(r"^(?:log|print)\s*\((.+)\)\s*;?$", re.I)
CALL_RE = re.compile(r"^(?:call\s+)?(\w+)\s*\((.*)\)\s*;?$", re.I)
RETURN_RE = re.compile(r"^return\s+(.+)$", re.I)

# Words that look like ``name(...)`` but are statements, never method headers.
STATEMENT_WORDS = frozenset({
    "when", "loop", "log", "print", "call", "return", "on", "else",
    "if", "while", "for", "function", "class",
})

EXPLICIT_CLOSERS = frozenset({"}", "});"})


def expand_macros(source: str) -> str:
    """Rewrite English idioms into direct call/loop syntax."""
    for pattern, replacement in MACROS:
        source = pattern.sub(replacement, source)
    return source


def strip_comment(line: str) -> str:
    match = COMMENT_RE.search(line)
    if match:
        return line[:match.start()]
    return line


class StatementTranspiler:
    """Line-by-line translator driven by a stack of open blocks."""

    def __init__(self) -> None:
        self.stack = BlockStack()
        self.output: List[str] = []

    def emit(self, *lines: str) -> None:
        self.output.extend(lines)

    def open(self, header: str, block: Block) -> None:
        self.emit(header)
        self.stack.push(block)

    def transpile(self, source: str) -> str:
        raw = strip_raw_marker(source)
        if raw is not None:
            return raw

        for raw_line in expand_macros(source).split("\n"):
            self.translate_line(strip_comment(raw_line).strip())

        self.emit(*self.stack.close_all())
        if not self.output:
            return ""
        return "\n".join(self.output) + "\n"

    def translate_line(self, line: str) -> None:
        stack = self.stack

        # A class body cannot stay open across a new top-level construct
        if Block.CLASS in stack and TOP_LEVEL_RE.match(line):
            self.emit(*stack.close_all())

        if not line:
            if stack:
                self.emit(stack.pop())
            return

        if line in EXPLICIT_CLOSERS:
            # A closer with nothing open is dropped
            if stack:
                self.emit(stack.pop())
            return

        match = FUNCTION_RE.match(line)
        if match:
            name, params = match.group(1), (match.group(2) or "").strip()
            self.emit(*stack.close_all())
            self.open(f"function {name}({params}) {{", Block.FUNCTION)
            return

        match = METHOD_RE.match(line)
        if match and self._in_class_body() and match.group(2).lower() not in STATEMENT_WORDS:
            self.emit(*stack.pop_while(Block.METHOD))
            prefix = "static " if match.group(1) else ""
            params = (match.group(3) or "").strip()
            self.open(f"{prefix}{match.group(2)}({params}) {{", Block.METHOD)
            return

        if line.endswith("{"):
            self.open(line, Block.BLOCK)
            return

        match = CLASS_RE.match(line)
        if match:
            self.emit(*stack.close_all())
            self.open(f"class {match.group(1)} {{", Block.CLASS)
            return

        match = EVENT_RE.match(line)
        if match:
            target, event = match.group(1), match.group(2)
            args = (match.group(3) or "").strip()
            self.open(f"{target}.addEventListener('{event}', ({args}) => {{", Block.EVENT)
            return

        match = WHEN_RE.match(line)
        if match:
            self.open(f"if ({match.group(1).strip()}) {{", Block.IF)
            return

        if ELSE_RE.match(line):
            if stack.top is Block.IF:
                stack.discard_top()
                self.open("} else {", Block.ELSE)
            else:
                self.open("else {", Block.ELSE)
            return

        match = LOOP_RE.match(line)
        if match:
            self.open(f"while ({match.group(1).strip()}) {{", Block.LOOP)
            return

        match = VAR_RE.match(line)
        if match:
            name = match.group(1)
            value = (match.group(2) or "").strip().rstrip(";").strip()
            self.emit(f"let {name} = {value};" if value else f"let {name};")
            return

        match = LOG_RE.match(line)
        if match:
            self.emit(f"console.log({match.group(1).strip()});")
            return

        match = CALL_RE.match(line)
        if match:
            self.emit(f"{match.group(1)}({match.group(2)});")
            return

        match = RETURN_RE.match(line)
        if match:
            self.emit(f"return {match.group(1).strip().rstrip(';')};")
            return

        if not line.endswith((";", "{", "}")):
            line += ";"
        self.emit(line)

    def _in_class_body(self) -> bool:
        return Block.CLASS in self.stack and self.stack.top in (Block.CLASS, Block.METHOD)


def transpile_statements(source: str) -> str:
    """Translate statement-dialect source into JavaScript source."""
    return StatementTranspiler().transpile(source)


def compile_statement_file(
    input_path: Union[str, Path],
    *,
    emit: bool = True,
    output_path: Optional[Union[str, Path]] = None,
) -> str:
    """
    Transpile a ``.seng`` file and return the JavaScript text.

    When ``emit`` is true the result is also written beside the source
    (``app.seng`` -> ``app.js``) or to ``output_path``.

    Raises:
        EngTranspileError: If the source cannot be read or the output written
    """
    path = Path(input_path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EngTranspileError(f"Cannot read {path}: {getattr(exc, 'strerror', None) or exc}", path=str(path)) from exc

    is_raw = strip_raw_marker(source) is not None
    result = transpile_statements(source)

    if emit:
        target = Path(output_path) if output_path else _default_output(path)
        try:
            target.write_text(result, encoding="utf-8")
        except OSError as exc:
            raise EngTranspileError(f"Cannot write {target}: {exc.strerror or exc}", path=str(target)) from exc
        if is_raw:
            logger.info("Seng (raw) passthrough: %s", target)
        else:
            logger.info("Seng compilation successful: %s", target)
    return result


def _default_output(path: Path) -> Path:
    if path.suffix == STATEMENT_SUFFIX:
        return path.with_suffix(OUTPUT_SUFFIXES[STATEMENT_SUFFIX])
    return path.with_name(path.name + OUTPUT_SUFFIXES[STATEMENT_SUFFIX])


__all__ = [
    "MACROS",
    "StatementTranspiler",
    "transpile_statements",
    "compile_statement_file",
    "expand_macros",
    "strip_comment",
]
