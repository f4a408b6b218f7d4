"""Cell styling: ANSI colours for terminals, CSS classes for HTML."""

from typing import Optional

from rich.color import ColorSystem
from rich.style import Style

from ..options import OutputFormat, RenderOptions
from ..values import ValueKind

HTML_CLASS_PREFIX = "jt-"

_STYLE_NAMES = {
    ValueKind.BOOL: "bool",
    ValueKind.STRING: "string",
    ValueKind.NUMBER: "number",
    ValueKind.MAPPING: "nested",
    ValueKind.SEQUENCE: "nested",
}

TERMINAL_STYLES = {
    "key": Style(color="#c6d0f5"),
    "string": Style(color="#a6d189"),
    "bool": Style(color="#ea999c"),
    "number": Style(color="bright_white"),
    "nested": Style(color="#c6d0f5"),
}


def style_name(kind: ValueKind) -> str:
    """Style/class name for a value kind; anything unlisted uses ``key``."""
    return _STYLE_NAMES.get(kind, "key")


def html_class(kind: ValueKind) -> str:
    return HTML_CLASS_PREFIX + style_name(kind)


def paint(text: str, style: Style) -> str:
    """Wrap every non-empty line of ``text`` in the ANSI codes for ``style``.

    Lines are styled separately so multi-line cells keep their colour after
    the table backend splits them across rows.
    """
    return "\n".join(
        style.render(line, color_system=ColorSystem.TRUECOLOR) if line else line
        for line in text.split("\n")
    )


def style_for(
    kind: ValueKind, output_format: OutputFormat, color: bool
) -> Optional[Style]:
    """Terminal style for a cell, or None when the output is not coloured."""
    if color and output_format is OutputFormat.TABLE:
        return TERMINAL_STYLES[style_name(kind)]
    return None


def apply_style(text: str, kind: ValueKind, options: RenderOptions) -> str:
    if options.output_format is OutputFormat.HTML:
        return f'<span class="{html_class(kind)}">{text}</span>'
    style = style_for(kind, options.output_format, options.color)
    if style is None:
        return text
    return paint(text, style)
