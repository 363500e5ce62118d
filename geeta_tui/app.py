"""Main Textual application for geeta-tui."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widget import Widget

from geeta_tui.backend import SearchIndex
from geeta_tui.bookmarks import BookmarkStore
from geeta_tui.config import ConfigStore, get_config
from geeta_tui.data.types import Chapter
from geeta_tui.overlays import OverlayState
from geeta_tui.reader import Reader
from geeta_tui.surface import PanelId
from geeta_tui.themes import Palette
from geeta_tui.widgets import ContentView, OverlayBox, PanelList, StatusBar

logger = logging.getLogger(__name__)


class GeetaApp(App):
    """Bhagavad-Gītā reader with chapter, verse and scripture panels."""

    TITLE = "Geeta-TUI"
    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"
    # Keys reach on_key until an overlay prompt takes focus
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        chapters: Sequence[Chapter],
        config: Optional[ConfigStore] = None,
    ) -> None:
        super().__init__()
        self._config = config or get_config()
        self._reader = Reader(
            chapters,
            self,
            self.set_timer,
            self._config,
            search=SearchIndex(list(chapters)),
            bookmarks=BookmarkStore(self._config),
        )

    @property
    def reader(self) -> Reader:
        """Return the interaction core."""
        return self._reader

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        with Horizontal(id="main"):
            with Vertical(id="sidebar"):
                yield PanelList(PanelId.CHAPTERS, id="chapters")
                yield PanelList(PanelId.VERSES, id="verses")
            yield ContentView(id="content")
        yield OverlayBox(id="overlay")
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Start reading once the panels have a size."""
        self.query_one("#overlay", OverlayBox).display = False
        self.screen.set_focus(None)
        self.call_after_refresh(self._reader.start)

    def on_resize(self, event) -> None:
        """Re-center content once the new layout is in place."""
        self.call_after_refresh(self._reader.relayout)

    def on_unmount(self) -> None:
        """Stop pending timers."""
        self._reader.shutdown()

    def on_key(self, event) -> None:
        """Handle key events centrally."""
        if self._reader.overlays.state.prompt is not None:
            return
        key = event.key
        # Letters by character so "K" is not reported as "shift+k"
        if event.character and event.character.isalpha():
            key = event.character
        if self._reader.handle_key(key):
            event.prevent_default()
            event.stop()

    def on_panel_list_entry_selected(self, event: PanelList.EntrySelected) -> None:
        """Handle a click in the chapter or verse list."""
        event.stop()
        self._reader.handle_select(event.panel, event.index)

    def on_overlay_box_item_selected(self, event: OverlayBox.ItemSelected) -> None:
        """Handle a click in an overlay list."""
        event.stop()
        self._reader.handle_overlay_select(event.index)

    def on_prompt_input_submitted(self, event) -> None:
        """Handle a submitted prompt."""
        event.stop()
        self._reader.submit_prompt(event.value)

    def on_prompt_input_cancelled(self, event) -> None:
        """Handle a cancelled prompt."""
        event.stop()
        self._reader.cancel_prompt()

    # ==================== Surface ====================

    def set_panel_chrome(self, panel: PanelId, label: str, color: str, bold: bool) -> None:
        widget = self._panels()[panel]
        widget.border_title = label
        widget.styles.border = ("round", color)
        widget.styles.border_title_color = color
        widget.styles.border_title_style = "bold" if bold else "none"

    def set_items(self, panel: PanelId, items: List[str]) -> None:
        widget = self._panels()[panel]
        if isinstance(widget, PanelList):
            widget.set_entries(items)

    def set_item_text(self, panel: PanelId, index: int, text: str) -> None:
        widget = self._panels()[panel]
        if isinstance(widget, PanelList):
            widget.set_entry_text(index, text)

    def set_cursor(self, panel: PanelId, index: int) -> None:
        widget = self._panels()[panel]
        if isinstance(widget, PanelList):
            widget.set_cursor(index)

    def set_content(self, text: Text) -> None:
        self.query_one("#content", ContentView).set_text(text)

    def scroll_content(self, lines: int) -> None:
        self.query_one("#content", ContentView).scroll_lines(lines)

    def set_status(self, message: str) -> None:
        self.query_one("#status-bar", StatusBar).show_message(message)

    def set_chrome_colors(self, palette: Palette) -> None:
        self.screen.styles.background = palette.bg
        self.query_one("#content", ContentView).styles.color = palette.fg
        self.query_one("#status-bar", StatusBar).set_palette(palette)
        self.query_one("#overlay", OverlayBox).set_palette(palette)

    def show_overlay(self, state: OverlayState) -> None:
        self.query_one("#overlay", OverlayBox).show_state(state)

    def hide_overlay(self) -> None:
        self.query_one("#overlay", OverlayBox).hide_state()

    def panel_width(self, panel: PanelId) -> int:
        return self._panels()[panel].outer_size.width

    def flush(self) -> None:
        self.refresh()

    def _panels(self) -> Dict[PanelId, Widget]:
        return {
            PanelId.CHAPTERS: self.query_one("#chapters", PanelList),
            PanelId.VERSES: self.query_one("#verses", PanelList),
            PanelId.CONTENT: self.query_one("#content", ContentView),
        }
