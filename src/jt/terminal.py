"""Terminal capability checks."""

import shutil
import sys

DEFAULT_TERMINAL_WIDTH = 80


def stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def stdin_has_data() -> bool:
    """True when stdin is a pipe or file rather than an interactive terminal."""
    try:
        return not sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def terminal_width() -> int:
    return shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
