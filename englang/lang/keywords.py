"""
ENG language keywords and grammar constants.

Single source of truth for the reserved words of the structural dialect
(``.heng``) and the lookup tables shared by the parser and code generator.

**Usage:**
    from englang.lang import RESERVED_WORDS, is_reserved

    kind = "KEYWORD" if is_reserved(word) else "IDENTIFIER"
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional


# ============================================================================
# Reserved words (structural dialect)
# ============================================================================

ELEMENT_KEYWORDS: FrozenSet[str] = frozenset({
    'page',
    'heading',
    'paragraph',
    'button',
    'link',
    'image',
    'div',
    'span',
    'style',
    'script',
    'form',
    'input',
    'label',
    'select',
    'option',
    'textarea',
    'table',
    'row',
    'cell',
    'list',
    'item',
    'code',
    'section',
    'article',
    'nav',
    'footer',
    'header',
    'title',
    'meta',
})

CONTROL_KEYWORDS: FrozenSet[str] = frozenset({
    'create',
    'add',
    'function',
    'import',
    'from',
    'with',
    'and',
    'cscript',
    'cstyle',
    # Document version markers
    'heng_verson',
    'html_verson',
    # Accepted misspelling of 'title'
    'tite',
})

RESERVED_WORDS: FrozenSet[str] = ELEMENT_KEYWORDS | CONTROL_KEYWORDS

# Keywords that begin a statement; attribute lists stop when they reach one.
STATEMENT_KEYWORDS: FrozenSet[str] = frozenset({
    'create',
    'add',
    'function',
    'import',
    'script',
    'cscript',
    'cstyle',
    'title',
    'tite',
})

SCRIPT_BLOCK_KEYWORDS: FrozenSet[str] = frozenset({'script', 'cscript', 'cstyle'})
TITLE_KEYWORDS: FrozenSet[str] = frozenset({'title', 'tite'})

# 'form' is accepted as a misspelling of 'from' in import statements.
IMPORT_SOURCE_KEYWORDS: FrozenSet[str] = frozenset({'from', 'form'})

# Bare words allowed after an import path to supply its extension.
IMPORT_EXTENSIONS: FrozenSet[str] = frozenset({'js', 'ts', 'css', 'ceng', 'seng'})

SETUP_FUNCTION_PREFIX = 'setup'


# ============================================================================
# File suffixes
# ============================================================================

STRUCTURE_SUFFIX = '.heng'
STATEMENT_SUFFIX = '.seng'
STYLE_SUFFIX = '.ceng'

OUTPUT_SUFFIXES: Mapping[str, str] = MappingProxyType({
    STRUCTURE_SUFFIX: '.html',
    STATEMENT_SUFFIX: '.js',
    STYLE_SUFFIX: '.css',
})

RAW_MARKER = '@raw'


def is_reserved(word: str) -> bool:
    """Return True when ``word`` (already lower-cased) is a reserved word."""
    return word in RESERVED_WORDS


def is_setup_function(name: str) -> bool:
    return bool(name) and name.startswith(SETUP_FUNCTION_PREFIX)


def strip_raw_marker(source: str) -> Optional[str]:
    """
    Return the text following a leading ``@raw`` marker line, or None.

    Leading blank lines before the marker are allowed. Nothing after the
    marker line is altered.
    """
    if not source.strip().startswith(RAW_MARKER):
        return None
    lines = source.split('\n')
    for index, line in enumerate(lines):
        if line.strip().startswith(RAW_MARKER):
            return '\n'.join(lines[index + 1:])
    return None


__all__ = [
    "ELEMENT_KEYWORDS",
    "CONTROL_KEYWORDS",
    "RESERVED_WORDS",
    "STATEMENT_KEYWORDS",
    "SCRIPT_BLOCK_KEYWORDS",
    "TITLE_KEYWORDS",
    "IMPORT_SOURCE_KEYWORDS",
    "IMPORT_EXTENSIONS",
    "SETUP_FUNCTION_PREFIX",
    "STRUCTURE_SUFFIX",
    "STATEMENT_SUFFIX",
    "STYLE_SUFFIX",
    "OUTPUT_SUFFIXES",
    "RAW_MARKER",
    "is_reserved",
    "is_setup_function",
    "strip_raw_marker",
]
