"""
ENG (English-like web authoring) toolchain.

This package compiles three small English-like dialects into standard web
artefacts:

* ``.heng`` – structural documents (``create page``, ``add heading "Hi"``)
  compiled to a complete HTML page;
* ``.seng`` – flat, indentation-free statements (``function draw``,
  ``when (x > 1)``, ``on button click``) transpiled to JavaScript;
* ``.ceng`` – styling rules (``class card {``, ``bg: navy``) rewritten to CSS.

The code is organised into several modules:

* ``lang`` – keyword tables, the tokenizer and the recursive descent parser
  for ``.heng`` sources.
* ``ast`` – the node type shared by parser, resolver and generator.
* ``seng`` / ``ceng`` – the statement transpiler and the style rewriter.
* ``resolver`` – compiles ``.seng``/``.ceng`` imports and attaches the
  results to a new tree.
* ``codegen`` – renders the resolved tree as HTML.
* ``cli`` – the ``englang`` command line interface.

Usage
-----

.. code-block:: python

    from englang import EngCompiler

    result = EngCompiler().compile('create page add heading "Hello"')
    if result.success:
        print(result.html)
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("englang")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

from englang.compiler import CompileResult, EngCompiler, FileCompileResult, compile_source
from englang.config import EngConfig, load_config
from englang.errors import EngError, EngSyntaxError
from englang.seng import transpile_statements
from englang.ceng import rewrite_styles

__all__ = [
    "__version__",
    "CompileResult",
    "EngCompiler",
    "EngConfig",
    "EngError",
    "EngSyntaxError",
    "FileCompileResult",
    "compile_source",
    "load_config",
    "rewrite_styles",
    "transpile_statements",
]
