"""ENG language keyword tables and file conventions."""

from .keywords import (
    ELEMENT_KEYWORDS,
    CONTROL_KEYWORDS,
    RESERVED_WORDS,
    STATEMENT_KEYWORDS,
    SCRIPT_BLOCK_KEYWORDS,
    TITLE_KEYWORDS,
    IMPORT_SOURCE_KEYWORDS,
    IMPORT_EXTENSIONS,
    SETUP_FUNCTION_PREFIX,
    STRUCTURE_SUFFIX,
    STATEMENT_SUFFIX,
    STYLE_SUFFIX,
    OUTPUT_SUFFIXES,
    RAW_MARKER,
    is_reserved,
    is_setup_function,
    strip_raw_marker,
)

__all__ = [
    # Keyword sets
    "ELEMENT_KEYWORDS",
    "CONTROL_KEYWORDS",
    "RESERVED_WORDS",
    "STATEMENT_KEYWORDS",
    "SCRIPT_BLOCK_KEYWORDS",
    "TITLE_KEYWORDS",
    "IMPORT_SOURCE_KEYWORDS",
    "IMPORT_EXTENSIONS",
    "SETUP_FUNCTION_PREFIX",
    # File conventions
    "STRUCTURE_SUFFIX",
    "STATEMENT_SUFFIX",
    "STYLE_SUFFIX",
    "OUTPUT_SUFFIXES",
    "RAW_MARKER",
    # Helpers
    "is_reserved",
    "is_setup_function",
    "strip_raw_marker",
]
