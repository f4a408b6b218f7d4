"""Table drawing on top of tabulate."""

from typing import TYPE_CHECKING

from tabulate import tabulate

from ..options import OutputFormat

if TYPE_CHECKING:
    from .tables import TableData

TABLE_CLASS = "jt-table"

TABULATE_FORMATS = {
    OutputFormat.TABLE: "grid",
    OutputFormat.SVG: "grid",
    OutputFormat.MARKDOWN: "github",
    OutputFormat.HTML: "unsafehtml",
}


def emit_table(table: "TableData", output_format: OutputFormat) -> str:
    """Draw a table; the caption goes below text tables and into <caption> for HTML."""
    if output_format is OutputFormat.HTML:
        return _emit_html(table)

    if table.rows:
        headers = table.headers
        if output_format is OutputFormat.MARKDOWN and not headers:
            # Markdown tables need a header row
            headers = [""] * len(table.rows[0])
        text = str(
            tabulate(
                table.rows,
                headers=headers or (),
                tablefmt=TABULATE_FORMATS[output_format],
                disable_numparse=True,
                stralign="left",
            )
        )
    else:
        text = ""

    if table.caption:
        return f"{text}\n{table.caption}" if text else table.caption
    return text


def _emit_html(table: "TableData") -> str:
    opening = f'<table class="{TABLE_CLASS}">'
    if table.caption:
        opening += f"\n<caption>{table.caption}</caption>"

    if not table.rows:
        return f"{opening}\n</table>"

    # unsafehtml leaves cell content alone; values were escaped by the formatter
    markup = str(
        tabulate(
            table.rows,
            headers=table.headers or (),
            tablefmt="unsafehtml",
            disable_numparse=True,
            stralign=None,
        )
    )
    return markup.replace("<table>", opening, 1)
