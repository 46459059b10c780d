"""Styling-dialect (``.ceng``) to CSS rewriter.

Purely line oriented: selectors are rewritten (``class card`` -> ``.card``,
``id main`` -> ``#main``, ``button when hover {`` -> ``button:hover {``)
and shorthand property names are expanded through :data:`PROPERTY_NAMES`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from englang.errors import EngTranspileError
from englang.lang.keywords import OUTPUT_SUFFIXES, STYLE_SUFFIX, strip_raw_marker

logger = logging.getLogger(__name__)

PROPERTY_NAMES: Mapping[str, str] = MappingProxyType({
    "background": "background-color",
    "bg": "background-color",
    "size": "font-size",
    "color": "color",
    "padding": "padding",
    "margin": "margin",
    "border": "border",
    "font": "font-family",
    "width": "width",
    "height": "height",
    "display": "display",
    "flex": "flex-direction",
})

FOR_PREFIX_RE = re.compile(r"^for\s+", re.I)
CLASS_SELECTOR_RE = re.compile(r"^class\s+(\w+)(?=\s*\{|$)", re.I)
ID_SELECTOR_RE = re.compile(r"^id\s+(\w+)(?=\s*\{|$)", re.I)
WHEN_WORD_RE = re.compile(r"\bwhen\b", re.I)
WHEN_STATE_RE = re.compile(r"^(.+?)\s+when\s+(\w+)\s*\{", re.I)
PROPERTY_RE = re.compile(r"^([a-z]+):\s*", re.I)


def rewrite_line(line: str) -> Optional[str]:
    """Rewrite one trimmed line; returns None for lines that produce no output."""
    if not line or line.startswith("--"):
        return None

    line = FOR_PREFIX_RE.sub("", line, count=1)
    line = CLASS_SELECTOR_RE.sub(r".\g<1>", line, count=1)
    line = ID_SELECTOR_RE.sub(r"#\g<1>", line, count=1)

    if WHEN_WORD_RE.search(line):
        match = WHEN_STATE_RE.match(line)
        if match:
            line = f"{match.group(1)}:{match.group(2)} {{"

    match = PROPERTY_RE.match(line)
    if match and match.group(1).lower() in PROPERTY_NAMES:
        line = f"{PROPERTY_NAMES[match.group(1).lower()]}: {line[match.end():]}"

    if not line.endswith(("{", "}", ";")):
        line += ";"
    return line


def rewrite_styles(source: str) -> str:
    """Translate styling-dialect source into stylesheet text."""
    raw = strip_raw_marker(source)
    if raw is not None:
        return raw

    output: List[str] = []
    for raw_line in source.split("\n"):
        line = rewrite_line(raw_line.strip())
        if line is not None:
            output.append(line)
    if not output:
        return ""
    return "\n".join(output) + "\n"


def compile_style_file(
    input_path: Union[str, Path],
    *,
    emit: bool = True,
    output_path: Optional[Union[str, Path]] = None,
) -> str:
    """
    Rewrite a ``.ceng`` file and return the CSS text, writing ``<stem>.css`` when ``emit``.

    Raises:
        EngTranspileError: If the source cannot be read or the output written
    """
    path = Path(input_path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EngTranspileError(f"Cannot read {path}: {getattr(exc, 'strerror', None) or exc}", path=str(path)) from exc

    is_raw = strip_raw_marker(source) is not None
    result = rewrite_styles(source)

    if emit:
        if output_path:
            target = Path(output_path)
        elif path.suffix == STYLE_SUFFIX:
            target = path.with_suffix(OUTPUT_SUFFIXES[STYLE_SUFFIX])
        else:
            target = path.with_name(path.name + OUTPUT_SUFFIXES[STYLE_SUFFIX])
        try:
            target.write_text(result, encoding="utf-8")
        except OSError as exc:
            raise EngTranspileError(f"Cannot write {target}: {exc.strerror or exc}", path=str(target)) from exc
        logger.info("Ceng %s: %s", "(raw) passthrough" if is_raw else "compilation successful", target)
    return result


__all__ = ["PROPERTY_NAMES", "rewrite_line", "rewrite_styles", "compile_style_file"]
