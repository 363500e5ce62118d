"""Scrollable scripture text panel."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static


class ContentView(VerticalScroll):
    """Scripture panel; scrolled by the app, never focused."""

    DEFAULT_CSS = """
    ContentView {
        width: 1fr;
        height: 100%;
        border: round white;
        border-title-align: left;
        padding: 0 1;
        scrollbar-size-vertical: 1;
    }

    ContentView > #content-text {
        width: 100%;
    }
    """

    can_focus = False

    def compose(self) -> ComposeResult:
        yield Static("", id="content-text")

    def set_text(self, text: Text) -> None:
        """Show new text from the top."""
        self.query_one("#content-text", Static).update(text)
        self.scroll_home(animate=False)

    def scroll_lines(self, lines: int) -> None:
        """Scroll by ``lines``; negative scrolls up."""
        self.scroll_relative(y=lines, animate=False)
