"""Pager state and its transition function.

``reduce(state, event)`` is pure: it returns a new PagerState and never
touches the terminal. The textual application in ``jt.pager.app`` owns the
single live instance and feeds it key and resize events.
"""

import re
from collections import defaultdict
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from rich.style import Style

from .ansi import highlight_ranges, max_visible_width, slice_ansi, strip_ansi

HORIZONTAL_STEP = 5

MATCH_STYLE = Style(color="#232634", bgcolor="#e5c890")
CURRENT_MATCH_STYLE = Style(color="#232634", bgcolor="#ef9f76")


class Mode(Enum):
    NORMAL = "normal"
    SEARCH = "search"


@dataclass(frozen=True)
class Match:
    line: int
    column: int


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class ScrollLines:
    delta: int


@dataclass(frozen=True)
class ScrollPages:
    """Scroll by whole (``half=False``) or half viewport heights."""

    delta: int
    half: bool = False


@dataclass(frozen=True)
class GotoTop:
    pass


@dataclass(frozen=True)
class GotoBottom:
    pass


@dataclass(frozen=True)
class ScrollHorizontal:
    """Shift the horizontal offset by ``steps`` * HORIZONTAL_STEP columns."""

    steps: int


@dataclass(frozen=True)
class GotoLeftEdge:
    pass


@dataclass(frozen=True)
class GotoRightEdge:
    pass


@dataclass(frozen=True)
class StartSearch:
    pass


@dataclass(frozen=True)
class EditSearch:
    text: str


@dataclass(frozen=True)
class CommitSearch:
    pass


@dataclass(frozen=True)
class CancelSearch:
    pass


@dataclass(frozen=True)
class NextMatch:
    pass


@dataclass(frozen=True)
class PrevMatch:
    pass


@dataclass(frozen=True)
class Quit:
    pass


# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class PagerState:
    """Everything the pager shows, as an immutable snapshot."""

    lines: Tuple[str, ...]
    plain_lines: Tuple[str, ...]
    content_width: int
    viewport_width: int = 80
    viewport_height: int = 23
    vertical_offset: int = 0
    horizontal_offset: int = 0
    mode: Mode = Mode.NORMAL
    search_buffer: str = ""
    search_term: str = ""
    matches: Tuple[Match, ...] = ()
    current_match: int = 0
    quitting: bool = False

    @classmethod
    def from_text(cls, text: str, width: int = 80, height: int = 23) -> "PagerState":
        lines = tuple(text.split("\n"))
        return cls(
            lines=lines,
            plain_lines=tuple(strip_ansi(line) for line in lines),
            content_width=max_visible_width(lines),
            viewport_width=max(width, 1),
            viewport_height=max(height, 1),
        )

    @property
    def max_vertical_offset(self) -> int:
        return max(0, len(self.lines) - self.viewport_height)

    @property
    def max_horizontal_offset(self) -> int:
        return max(0, self.content_width - self.viewport_width)

    @property
    def current(self) -> Optional[Match]:
        if not self.matches:
            return None
        return self.matches[self.current_match]


def find_matches(plain_lines: Sequence[str], term: str) -> Tuple[Match, ...]:
    """Case-insensitive, non-overlapping occurrences ordered by (line, column)."""
    if not term:
        return ()
    # Columns index the original line; lower() can change its length
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return tuple(
        Match(number, found.start())
        for number, line in enumerate(plain_lines)
        for found in pattern.finditer(line)
    )


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


def _scroll_to(state: PagerState, line: int) -> PagerState:
    return replace(state, vertical_offset=_clamp(line, state.max_vertical_offset))


def _shift(state: PagerState, offset: int) -> PagerState:
    return replace(state, horizontal_offset=_clamp(offset, state.max_horizontal_offset))


def _jump_to_match(state: PagerState, index: int) -> PagerState:
    state = replace(state, current_match=index)
    return _scroll_to(state, state.matches[index].line)


def reduce(state: PagerState, event) -> PagerState:
    """Apply one event to the pager state."""
    if isinstance(event, Resize):
        resized = replace(
            state,
            viewport_width=max(event.width, 1),
            viewport_height=max(event.height, 1),
        )
        resized = _scroll_to(resized, resized.vertical_offset)
        return _shift(resized, resized.horizontal_offset)

    if isinstance(event, Quit):
        return replace(state, quitting=True)

    if state.mode is Mode.SEARCH:
        return _reduce_search(state, event)
    return _reduce_normal(state, event)


def _reduce_search(state: PagerState, event) -> PagerState:
    if isinstance(event, EditSearch):
        return replace(state, search_buffer=event.text)

    if isinstance(event, CommitSearch):
        term = state.search_buffer
        matches = find_matches(state.plain_lines, term)
        state = replace(
            state,
            mode=Mode.NORMAL,
            search_term=term,
            matches=matches,
            current_match=0,
        )
        if matches:
            state = _jump_to_match(state, 0)
        return state

    if isinstance(event, CancelSearch):
        return replace(state, mode=Mode.NORMAL)

    return state


def _reduce_normal(state: PagerState, event) -> PagerState:
    if isinstance(event, ScrollLines):
        return _scroll_to(state, state.vertical_offset + event.delta)

    if isinstance(event, ScrollPages):
        page = state.viewport_height // 2 if event.half else state.viewport_height
        return _scroll_to(state, state.vertical_offset + event.delta * max(page, 1))

    if isinstance(event, GotoTop):
        return _scroll_to(state, 0)

    if isinstance(event, GotoBottom):
        return _scroll_to(state, state.max_vertical_offset)

    if isinstance(event, ScrollHorizontal):
        return _shift(state, state.horizontal_offset + event.steps * HORIZONTAL_STEP)

    if isinstance(event, GotoLeftEdge):
        return _shift(state, 0)

    if isinstance(event, GotoRightEdge):
        return _shift(state, state.max_horizontal_offset)

    if isinstance(event, StartSearch):
        return replace(state, mode=Mode.SEARCH, search_buffer="")

    if isinstance(event, NextMatch) and state.matches:
        return _jump_to_match(state, (state.current_match + 1) % len(state.matches))

    if isinstance(event, PrevMatch) and state.matches:
        return _jump_to_match(state, (state.current_match - 1) % len(state.matches))

    return state


# =============================================================================
# Frame
# =============================================================================


def visible_lines(state: PagerState) -> List[str]:
    """The viewport's lines: matches highlighted, then sliced horizontally."""
    by_line: Dict[int, List[Tuple[int, Match]]] = defaultdict(list)
    for index, match in enumerate(state.matches):
        by_line[match.line].append((index, match))

    length = len(state.search_term)
    top = state.vertical_offset
    bottom = min(top + state.viewport_height, len(state.lines))

    frame = []
    for number in range(top, bottom):
        line = state.lines[number]
        if number in by_line:
            ranges = [
                (
                    match.column,
                    match.column + length,
                    CURRENT_MATCH_STYLE if index == state.current_match else MATCH_STYLE,
                )
                for index, match in by_line[number]
            ]
            line = highlight_ranges(line, ranges)
        frame.append(slice_ansi(line, state.horizontal_offset, state.viewport_width))
    return frame


def status_line(state: PagerState) -> str:
    parts = ["↑↓/kj: vertical", "←→/hl: horizontal", "g/G: jump"]
    if state.matches:
        parts.append("n/p: next/prev match")
    parts += ["/: search", "q: quit"]

    if state.search_term:
        if state.matches:
            parts.append(f"Match: {state.current_match + 1}/{len(state.matches)}")
        else:
            parts.append("No matches")

    parts.append(f"Line: {state.vertical_offset + 1}/{len(state.lines)}")
    return " | ".join(parts)
