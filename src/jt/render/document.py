"""Whole-document output: multi-document joining, HTML prelude, SVG export."""

import io

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from ..options import OutputFormat, RenderOptions
from ..values import ParsedInput, ValueKind, kind_of
from .tables import render_table

HTML_STYLESHEET = """<style>
.jt-table {
	border-collapse: collapse;
	background-color: #303446;
	border: 1px solid #414559;
	margin: 2px;
}
.jt-table th {
	text-align: center;
	color: #ca9ee6;
	font-weight: bold;
}
.jt-table td {
	border: 1px solid #414559;
	padding: 8px;
	text-align: left;
}
.jt-key { color: #c6d0f5; }
.jt-string { color: #a6d189; }
.jt-bool { color: #ea999c; }
.jt-number { color: #ffffff; }
.jt-nested { color: #c6d0f5; }
</style>"""

SVG_TITLE = "jt"


def render_document(parsed: ParsedInput, options: RenderOptions) -> str:
    """Render a parsed (and selected) input as the final output text."""
    value = parsed.value
    if parsed.multi_document and kind_of(value) is ValueKind.SEQUENCE:
        body = "\n".join(render_table(doc, options) for doc in value)
    else:
        body = render_table(value, options)

    if options.output_format is OutputFormat.HTML:
        return f"{HTML_STYLESHEET}\n{body}"
    if options.output_format is OutputFormat.SVG:
        return text_to_svg(body)
    return body


def text_to_svg(text: str, title: str = SVG_TITLE) -> str:
    """Draw plain table text into an SVG terminal frame."""
    width = max((cell_len(line) for line in text.splitlines()), default=1)
    console = Console(
        record=True,
        width=max(width, 1),
        file=io.StringIO(),
        force_terminal=True,
        color_system="truecolor",
    )
    console.print(Text(text, no_wrap=True, overflow="ignore"))
    return console.export_svg(title=title)
