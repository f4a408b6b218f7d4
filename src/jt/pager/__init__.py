"""Interactive pager for table output wider than the terminal."""

import logging
import os
import sys

from ..errors import PagerError
from ..options import OutputFormat
from .ansi import max_visible_width, slice_ansi, strip_ansi
from .state import PagerState, reduce

logger = logging.getLogger(__name__)

__all__ = [
    "PagerState",
    "reduce",
    "run_pager",
    "should_page",
    "slice_ansi",
    "strip_ansi",
]


def should_page(
    text: str, output_format: OutputFormat, is_tty: bool, terminal_width: int
) -> bool:
    """Page only terminal tables on a tty whose widest line overflows the screen."""
    if output_format is not OutputFormat.TABLE or not is_tty:
        return False
    width = max_visible_width(text.split("\n"))
    logger.debug("content width %d, terminal width %d", width, terminal_width)
    return width > terminal_width


def _attach_tty_stdin() -> None:
    """Point stdin at the controlling terminal when input came from a pipe."""
    if sys.stdin.isatty():
        return
    try:
        tty_fd = os.open("/dev/tty", os.O_RDONLY)
        os.dup2(tty_fd, 0)
        os.close(tty_fd)
        # fd 0 stays owned by sys.__stdin__
        sys.stdin = open(0, "r", closefd=False)
    except OSError as e:
        raise PagerError(f"no terminal available for input: {e}") from e


def run_pager(text: str) -> None:
    """Show text in the full-screen pager until the user quits.

    Raises:
        PagerError: the viewer could not start or exited abnormally.
    """
    from .app import PagerApp

    _attach_tty_stdin()
    app = PagerApp(text)
    try:
        app.run()
    except Exception as e:
        raise PagerError(f"running interactive viewer: {e}") from e
    if app.return_code:
        raise PagerError(f"interactive viewer exited with code {app.return_code}")
