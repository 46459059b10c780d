"""
Main compiler for ENG structural documents.

Orchestrates tokenizing, parsing, import resolution and HTML generation.
Only a parse error makes a compile fail; import problems are reported as
warnings and the affected imports fall back to external references.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from englang.codegen import CodeGenerator
from englang.config import EngConfig
from englang.errors import EngError
from englang.lang.keywords import OUTPUT_SUFFIXES, STRUCTURE_SUFFIX
from englang.lang.parser import EngParser, tokenize
from englang.resolver import resolve_imports

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    success: bool
    html: Optional[str] = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)


@dataclass
class FileCompileResult:
    success: bool
    output_path: Optional[Path] = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)


class EngCompiler:
    """Compiles ``.heng`` source into an HTML document."""

    def __init__(self, config: Optional[EngConfig] = None):
        self.config = config or EngConfig()

    def compile(self, source: str, base_path: Union[str, Path] = ".", *, path: str = "") -> CompileResult:
        """
        Compile structural-dialect source text.

        Args:
            source: ``.heng`` source text
            base_path: Directory that import paths are relative to
            path: Source file name used in error locations

        Returns:
            CompileResult with ``html`` on success or ``error`` on failure
        """
        try:
            tokens = tokenize(source, path)
            document = EngParser(tokens, path=path).parse()
            resolved = resolve_imports(document, base_path, self.config)
            html = CodeGenerator(self.config).generate(resolved.root)
        except EngError as exc:
            logger.debug("Compilation failed: %s", exc.format())
            return CompileResult(success=False, error=str(exc))

        return CompileResult(success=True, html=html, warnings=resolved.warnings)

    def compile_file(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
    ) -> FileCompileResult:
        """Compile a ``.heng`` file and write the HTML; nothing is written on failure."""
        source_path = Path(input_path)
        if source_path.suffix != STRUCTURE_SUFFIX:
            return FileCompileResult(success=False, error=f"Input file must have {STRUCTURE_SUFFIX} extension")

        try:
            source = source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or exc
            return FileCompileResult(success=False, error=f"Cannot read {source_path}: {reason}")

        result = self.compile(source, source_path.parent, path=str(source_path))
        if not result.success:
            return FileCompileResult(success=False, error=result.error, warnings=result.warnings)

        target = Path(output_path) if output_path else source_path.with_suffix(OUTPUT_SUFFIXES[STRUCTURE_SUFFIX])
        try:
            target.write_text(result.html or "", encoding="utf-8")
        except OSError as exc:
            return FileCompileResult(success=False, error=f"Cannot write {target}: {exc.strerror or exc}")

        logger.info("Compiled %s -> %s", source_path, target)
        return FileCompileResult(success=True, output_path=target, warnings=result.warnings)


def compile_source(
    source: str,
    base_path: Union[str, Path] = ".",
    config: Optional[EngConfig] = None,
) -> str:
    """
    Compile ``source`` and return the HTML text.

    Raises:
        ValueError: If compilation fails
    """
    result = EngCompiler(config).compile(source, base_path)
    if not result.success:
        raise ValueError(f"Compilation failed: {result.error}")
    return result.html or ""


__all__ = ["EngCompiler", "CompileResult", "FileCompileResult", "compile_source"]
