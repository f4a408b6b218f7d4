"""jt CLI entry point."""

import logging
import signal
import sys

import click

from . import __version__
from .errors import JTError, PagerError
from .inputs import read_input, resolve_arguments
from .options import DEFAULT_MAX_WIDTH, MIN_MAX_WIDTH, OutputFormat, RenderOptions
from .pager import run_pager, should_page
from .parsing import parse_input
from .render import render_document
from .selector import select
from .terminal import stdin_has_data, stdout_is_tty, terminal_width

logger = logging.getLogger(__name__)

# Handle SIGPIPE gracefully (e.g., when piped to `head`)
if hasattr(signal, "SIGPIPE"):
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("args", nargs=-1)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TABLE.value,
    envvar="JT_FORMAT",
    show_default=True,
    help="Output format.",
)
@click.option(
    "-d",
    "--details",
    "show_details",
    is_flag=True,
    help="Show item/property counts as table captions.",
)
@click.option(
    "-w",
    "--width",
    "max_width",
    type=click.IntRange(min=MIN_MAX_WIDTH),
    default=DEFAULT_MAX_WIDTH,
    envvar="JT_MAX_WIDTH",
    show_default=True,
    help="Maximum width of a value cell before it is truncated.",
)
@click.option(
    "--no-pager",
    is_flag=True,
    help="Never start the interactive viewer.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="jt")
def cli(args, output_format, show_details, max_width, no_pager, verbose):
    """Render JSON, YAML or XML as a table.

    \b
    Usage:
        cat data.json | jt [SELECTOR]
        jt FILE [SELECTOR]

    \b
    Selectors:
        .                  whole document (default)
        .users             key access
        .users[0].name     index, then key
        .[1]               second document of a multi-document YAML stream

    \b
    Examples:
        jt config.yaml .services
        curl -s https://api.example.com/items | jt .items[0]
        jt data.json --format html > table.html
        jt data.json --format markdown -w 40

    Output wider than the terminal opens a pager: arrows or hjkl scroll,
    / searches, n/p cycle matches, q quits.
    """
    setup_logging(verbose)
    fmt = OutputFormat(output_format)
    is_tty = stdout_is_tty()

    try:
        request = resolve_arguments(args, stdin_has_data())
        data = read_input(request, click.get_binary_stream("stdin"))
        parsed = select(parse_input(data), request.selector)

        options = RenderOptions(
            output_format=fmt,
            max_width=max_width,
            show_details=show_details,
            color=is_tty and fmt is OutputFormat.TABLE,
        )
        output = render_document(parsed, options)
    except JTError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not no_pager and should_page(output, fmt, is_tty, terminal_width()):
        try:
            run_pager(output)
            return
        except PagerError as e:
            logger.debug("pager failed", exc_info=True)
            click.echo(f"Error running interactive viewer: {e}", err=True)

    try:
        click.echo(output)
    except BrokenPipeError:
        # Gracefully handle broken pipe (e.g., piping to `head`)
        try:
            sys.stdout.close()
        except BrokenPipeError:
            pass
        sys.exit(0)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
