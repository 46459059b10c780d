"""Import resolution for ENG documents.

Walks a parsed document, compiles every ``.seng``/``.ceng`` import it finds
and returns a new tree whose IMPORT nodes carry the compiled text. The input
tree is left untouched; unchanged subtrees are shared between the two.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from englang.ast import Node, NodeType
from englang.ceng import compile_style_file
from englang.config import EngConfig
from englang.errors import EngError, EngImportError
from englang.lang.keywords import STATEMENT_SUFFIX, STYLE_SUFFIX
from englang.seng import compile_statement_file

logger = logging.getLogger(__name__)

ImportCompiler = Callable[..., str]

# suffix -> (normalized importType, compiler)
IMPORT_COMPILERS: Dict[str, Tuple[str, ImportCompiler]] = {
    STATEMENT_SUFFIX: ("seng", compile_statement_file),
    STYLE_SUFFIX: ("ceng", compile_style_file),
}


@dataclass
class ResolvedDocument:
    """A document whose imports have been compiled where possible."""

    root: Node
    warnings: List[str] = field(default_factory=list)

    @property
    def imports(self) -> List[Node]:
        return self.root.find_all(NodeType.IMPORT)


class ImportResolver:
    """Compiles imports in document order; one failure never blocks the next."""

    def __init__(self, base_dir: Union[str, Path] = ".", config: Optional[EngConfig] = None):
        self.base_dir = Path(base_dir)
        self.config = config or EngConfig()
        self.warnings: List[str] = []

    def resolve(self, root: Node) -> ResolvedDocument:
        self.warnings = []
        children = [self._resolve_top_level(child) for child in root.children]
        return ResolvedDocument(root=root.with_children(children), warnings=list(self.warnings))

    def _resolve_top_level(self, node: Node) -> Node:
        if node.is_a(NodeType.IMPORT):
            return self.resolve_import(node)
        if node.is_a(NodeType.FUNCTION):
            return node.with_children([self._resolve_function_child(child) for child in node.children])
        return node

    def _resolve_function_child(self, node: Node) -> Node:
        if node.is_a(NodeType.IMPORT):
            return self.resolve_import(node)
        if node.is_a(NodeType.BLOCK):
            return node.with_children(
                [self.resolve_import(child) if child.is_a(NodeType.IMPORT) else child for child in node.children]
            )
        return node

    def resolve_import(self, node: Node) -> Node:
        """Return ``node`` with ``compiled``/``importType`` set, or ``node`` itself when not compiled."""
        import_path = node.get("path")
        if not import_path:
            return node

        handler = _compiler_for(import_path)
        if handler is None:
            return node
        import_type, compile_file = handler

        full_path = self.base_dir / import_path
        try:
            compiled = self._compile(compile_file, full_path, import_path)
        except EngImportError as exc:
            message = f"Could not compile {import_path}: {exc}"
            logger.warning(message)
            self.warnings.append(message)
            return node

        logger.debug("Compiled import %s (%s)", import_path, import_type)
        return node.with_attributes(compiled=compiled, importType=import_type)

    def _compile(self, compile_file: ImportCompiler, full_path: Path, import_path: str) -> str:
        if not full_path.is_file():
            raise EngImportError(f"file not found: {full_path}", path=import_path)
        try:
            return compile_file(full_path, emit=self.config.emit_assets)
        except EngError as exc:
            raise EngImportError(exc.message, path=import_path) from exc


def _compiler_for(import_path: str) -> Optional[Tuple[str, ImportCompiler]]:
    for suffix, handler in IMPORT_COMPILERS.items():
        if import_path.endswith(suffix):
            return handler
    return None


def resolve_imports(
    root: Node,
    base_dir: Union[str, Path] = ".",
    config: Optional[EngConfig] = None,
) -> ResolvedDocument:
    """Compile the imports of ``root`` relative to ``base_dir``."""
    return ImportResolver(base_dir, config).resolve(root)


__all__ = ["ImportResolver", "ResolvedDocument", "resolve_imports", "IMPORT_COMPILERS"]
