"""Rendering context passed between node renderers."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class RenderContext:
    lines: List[str] = field(default_factory=list)
    indent_unit: str = "  "
    indent_level: int = 0

    def emit(self, text: str) -> None:
        self.lines.append(f"{self.indent_unit * self.indent_level}{text}")

    def emit_block(self, text: str, extra_indent: str = "") -> None:
        """Emit multi-line ``text`` one line at a time at the current indentation."""
        for line in text.split("\n"):
            self.emit(f"{extra_indent}{line}")

    def indent(self) -> None:
        self.indent_level += 1

    def dedent(self) -> None:
        if self.indent_level > 0:
            self.indent_level -= 1

    @contextmanager
    def nested(self) -> Iterator["RenderContext"]:
        """Indent everything emitted inside the ``with`` block."""
        self.indent()
        try:
            yield self
        finally:
            self.dedent()

    def render(self) -> str:
        return "\n".join(self.lines)
