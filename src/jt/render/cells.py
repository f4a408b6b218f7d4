"""Cell formatting: one value tree node to one display string."""

import re
from dataclasses import dataclass
from typing import Any

from ..options import RenderOptions
from ..values import ValueKind, kind_of, scalar_text
from .styles import apply_style

ELLIPSIS = "..."

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_SPACE_RUN = re.compile(r" {2,}")


@dataclass(frozen=True)
class RenderedCell:
    """Formatted cell text plus the kind of value it came from."""

    text: str
    kind: ValueKind

    def styled(self, options: RenderOptions) -> str:
        return apply_style(self.text, self.kind, options)


def escape_html(text: str) -> str:
    # "&" goes first so the entities added below are not escaped again
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def truncate(text: str, max_width: int) -> str:
    """Normalise whitespace to one line and cut to ``max_width`` characters.

    Newlines become spaces, carriage returns are dropped, runs of spaces
    collapse to one and the result is stripped. Text longer than
    ``max_width`` keeps ``max_width - 3`` characters followed by ``...``.
    Widths below 4 leave no room for the ellipsis, so the text is hard-cut.
    """
    text = text.replace("\n", " ").replace("\r", "")
    text = _SPACE_RUN.sub(" ", text).strip()

    if len(text) <= max_width:
        return text
    if max_width < len(ELLIPSIS) + 1:
        return text[: max(max_width, 0)]
    return text[: max_width - len(ELLIPSIS)] + ELLIPSIS


def format_cell(value: Any, options: RenderOptions) -> str:
    """Format any value for a single table cell.

    Containers become a complete nested table; scalars are escaped for HTML
    and truncated to ``options.max_width``.
    """
    if kind_of(value).is_container:
        # Nested values recurse back into the table renderer
        from .tables import render_table

        nested = render_table(value, options)
        if options.is_html:
            # Keep the nested table inside one cell
            nested = nested.replace("\n", "")
        return nested

    text = scalar_text(value)
    if options.is_html:
        text = escape_html(text)
    return truncate(text, options.max_width)


def render_cell(value: Any, options: RenderOptions) -> RenderedCell:
    return RenderedCell(format_cell(value, options), kind_of(value))


def key_cell(key: Any, options: RenderOptions) -> RenderedCell:
    """A row label (mapping key or sequence position), styled as a key."""
    text = str(key)
    if options.is_html:
        text = escape_html(text)
    return RenderedCell(text, ValueKind.OTHER)


EMPTY_CELL = RenderedCell("", ValueKind.NULL)
