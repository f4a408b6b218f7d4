"""Rendering of value trees as terminal, Markdown, HTML and SVG tables."""

from .cells import RenderedCell, escape_html, format_cell, truncate
from .document import HTML_STYLESHEET, render_document
from .styles import apply_style, style_for, style_name
from .tables import TableData, build_table, render_table

__all__ = [
    "HTML_STYLESHEET",
    "RenderedCell",
    "TableData",
    "apply_style",
    "build_table",
    "escape_html",
    "format_cell",
    "render_document",
    "render_table",
    "style_for",
    "style_name",
    "truncate",
]
