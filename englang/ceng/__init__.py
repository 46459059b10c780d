"""Styling dialect (``.ceng``) support."""

from .rewriter import PROPERTY_NAMES, compile_style_file, rewrite_line, rewrite_styles

__all__ = ["PROPERTY_NAMES", "compile_style_file", "rewrite_line", "rewrite_styles"]
