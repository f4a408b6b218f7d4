"""Textual driver for the pager.

The app owns one PagerState, translates key bindings and resizes into pager
events, and redraws the body and status line after each one.
"""

from typing import Callable, Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from .state import (
    CancelSearch,
    CommitSearch,
    EditSearch,
    GotoBottom,
    GotoLeftEdge,
    GotoRightEdge,
    GotoTop,
    NextMatch,
    PagerState,
    PrevMatch,
    Quit,
    Resize,
    ScrollHorizontal,
    ScrollLines,
    ScrollPages,
    StartSearch,
    reduce,
    status_line,
    visible_lines,
)

SEARCH_CHAR_LIMIT = 100


class SearchDialog(ModalScreen[Optional[str]]):
    """Centred search box; dismisses with the committed text or None."""

    CSS = """
    SearchDialog { align: center middle; }
    #search-container { width: 54; height: 5; border: round #ca9ee6; background: $surface; padding: 0 1; }
    #search-input { border: none; height: 1; margin: 1 0; }
    """

    def __init__(self, on_edit: Callable[[str], None]):
        super().__init__()
        self._on_edit = on_edit

    def compose(self) -> ComposeResult:
        with Container(id="search-container"):
            yield Input(
                placeholder="Type to search...",
                max_length=SEARCH_CHAR_LIMIT,
                id="search-input",
            )

    def on_mount(self) -> None:
        self.query_one(Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._on_edit(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def key_escape(self) -> None:
        self.dismiss(None)


class PagerApp(App[None]):
    """Scrollable, searchable view over pre-rendered table text."""

    CSS = """
    Screen { background: $surface; }
    #body { height: 1fr; width: 100%; }
    #status { dock: bottom; height: 1; width: 100%; color: #c6d0f5; background: #414559; padding: 0 1; }
    """

    BINDINGS = [
        Binding("q", "quit_pager", "Quit", show=False),
        Binding("ctrl+c", "quit_pager", "Quit", show=False, priority=True),
        Binding("j", "scroll_lines(1)", "Down", show=False),
        Binding("down", "scroll_lines(1)", "Down", show=False),
        Binding("k", "scroll_lines(-1)", "Up", show=False),
        Binding("up", "scroll_lines(-1)", "Up", show=False),
        Binding("pagedown", "scroll_pages(1)", "Page down", show=False),
        Binding("space", "scroll_pages(1)", "Page down", show=False),
        Binding("f", "scroll_pages(1)", "Page down", show=False),
        Binding("pageup", "scroll_pages(-1)", "Page up", show=False),
        Binding("b", "scroll_pages(-1)", "Page up", show=False),
        Binding("ctrl+d", "scroll_half_pages(1)", "Half page down", show=False),
        Binding("ctrl+u", "scroll_half_pages(-1)", "Half page up", show=False),
        Binding("g", "top", "Top", show=False),
        Binding("home", "top", "Top", show=False),
        Binding("G", "bottom", "Bottom", show=False),
        Binding("end", "bottom", "Bottom", show=False),
        Binding("l", "scroll_horizontal(1)", "Right", show=False),
        Binding("right", "scroll_horizontal(1)", "Right", show=False),
        Binding("h", "scroll_horizontal(-1)", "Left", show=False),
        Binding("left", "scroll_horizontal(-1)", "Left", show=False),
        Binding("0", "left_edge", "Leftmost", show=False),
        Binding("dollar_sign", "right_edge", "Rightmost", show=False),
        Binding("slash", "search", "Search", show=False),
        Binding("n", "next_match", "Next match", show=False),
        Binding("N", "prev_match", "Prev match", show=False),
        Binding("p", "prev_match", "Prev match", show=False),
    ]

    def __init__(self, text: str):
        super().__init__()
        self.state = PagerState.from_text(text)
        self._body = Static(id="body")
        self._status = Static(id="status")

    def compose(self) -> ComposeResult:
        yield self._body
        yield self._status

    def on_mount(self) -> None:
        self.apply_event(Resize(self.size.width, self.size.height - 1))

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(Resize(event.size.width, event.size.height - 1))

    def apply_event(self, event) -> None:
        self.state = reduce(self.state, event)
        if self.state.quitting:
            self.exit()
            return
        self._redraw()

    def _redraw(self) -> None:
        body = Text.from_ansi(
            "\n".join(visible_lines(self.state)), no_wrap=True, overflow="crop"
        )
        # query_one searches the active screen, which may be the search dialog
        self._body.update(body)
        self._status.update(Text(status_line(self.state)))

    def action_quit_pager(self) -> None:
        self.apply_event(Quit())

    def action_scroll_lines(self, delta: int) -> None:
        self.apply_event(ScrollLines(delta))

    def action_scroll_pages(self, delta: int) -> None:
        self.apply_event(ScrollPages(delta))

    def action_scroll_half_pages(self, delta: int) -> None:
        self.apply_event(ScrollPages(delta, half=True))

    def action_top(self) -> None:
        self.apply_event(GotoTop())

    def action_bottom(self) -> None:
        self.apply_event(GotoBottom())

    def action_scroll_horizontal(self, steps: int) -> None:
        self.apply_event(ScrollHorizontal(steps))

    def action_left_edge(self) -> None:
        self.apply_event(GotoLeftEdge())

    def action_right_edge(self) -> None:
        self.apply_event(GotoRightEdge())

    def action_next_match(self) -> None:
        self.apply_event(NextMatch())

    def action_prev_match(self) -> None:
        self.apply_event(PrevMatch())

    def action_search(self) -> None:
        def handle_search(term: Optional[str]) -> None:
            if term is None:
                self.apply_event(CancelSearch())
            else:
                self.apply_event(EditSearch(term))
                self.apply_event(CommitSearch())

        self.apply_event(StartSearch())
        self.push_screen(
            SearchDialog(on_edit=lambda text: self.apply_event(EditSearch(text))),
            handle_search,
        )
