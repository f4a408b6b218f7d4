"""ANSI-aware text operations for the pager.

An escape run starts with ESC and ends at the first alphabetic character
after it. Escape runs are never counted as visible columns.
"""

from typing import Iterator, List, Sequence, Tuple

from rich.color import ColorSystem
from rich.style import Style

ESC = "\x1b"
RESET = "\x1b[0m"

HighlightRange = Tuple[int, int, Style]


def _escape_end(text: str, start: int) -> int:
    """Index just past the escape run beginning at ``start``."""
    for i in range(start + 1, len(text)):
        if text[i].isascii() and text[i].isalpha():
            return i + 1
    return len(text)


def _runs(text: str) -> Iterator[Tuple[bool, str]]:
    """Yield ``(is_escape, chunk)``: whole escape runs or single visible characters."""
    i = 0
    while i < len(text):
        if text[i] == ESC:
            end = _escape_end(text, i)
            yield True, text[i:end]
            i = end
        else:
            yield False, text[i]
            i += 1


def _is_reset(sequence: str) -> bool:
    return sequence in ("\x1b[0m", "\x1b[m")


def strip_ansi(text: str) -> str:
    return "".join(chunk for is_escape, chunk in _runs(text) if not is_escape)


def visible_width(text: str) -> int:
    return len(strip_ansi(text))


def max_visible_width(lines: Sequence[str]) -> int:
    return max((visible_width(line) for line in lines), default=0)


def slice_ansi(text: str, offset: int, width: int) -> str:
    """Visible columns ``[offset, offset + width)`` of a styled line.

    Escape runs are copied through wherever they occur, so the styling in
    effect at the cut point carries over; a reset is appended when any were
    copied so the style does not leak past the slice.
    """
    out: List[str] = []
    column = 0
    styled = False
    for is_escape, chunk in _runs(text):
        if is_escape:
            out.append(chunk)
            styled = True
            continue
        if offset <= column < offset + width:
            out.append(chunk)
        column += 1
    if styled:
        out.append(RESET)
    return "".join(out)


def highlight_ranges(text: str, ranges: Sequence[HighlightRange]) -> str:
    """Wrap visible column ranges of a styled line in highlight styles.

    ``ranges`` are ``(start, end, style)`` in unstyled columns, sorted and
    non-overlapping. Existing escape runs inside a range are held back and
    the styling active at the end of the range is restored after it.
    """
    if not ranges:
        return text

    out: List[str] = []
    active: List[str] = []
    pending = list(ranges)
    current = None
    buffer: List[str] = []
    column = 0

    def close() -> None:
        style = current[2]
        out.append(style.render("".join(buffer), color_system=ColorSystem.TRUECOLOR))
        out.append("".join(active))
        buffer.clear()

    for is_escape, chunk in _runs(text):
        if is_escape:
            if _is_reset(chunk):
                active.clear()
            else:
                active.append(chunk)
            if current is None:
                out.append(chunk)
            continue

        if current is not None and column >= current[1]:
            close()
            current = None
        if current is None and pending and column == pending[0][0]:
            current = pending.pop(0)

        if current is None:
            out.append(chunk)
        else:
            buffer.append(chunk)
        column += 1

    if current is not None:
        close()
    return "".join(out)
