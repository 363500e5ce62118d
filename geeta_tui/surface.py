"""Rendering/input substrate the reader core draws on."""

from enum import Enum
from typing import TYPE_CHECKING, List, Protocol

from rich.text import Text

if TYPE_CHECKING:
    from geeta_tui.overlays import OverlayState
    from geeta_tui.themes import Palette


class PanelId(Enum):
    """The three main panels, in focus ring order."""

    CHAPTERS = "chapters"
    VERSES = "verses"
    CONTENT = "content"

    @property
    def title(self) -> str:
        """Return the panel name shown in its label."""
        return PANEL_TITLES[self]


PANEL_TITLES = {
    PanelId.CHAPTERS: "Chapters",
    PanelId.VERSES: "Verses",
    PanelId.CONTENT: "Scripture",
}


class Surface(Protocol):
    """Everything the reader core needs from the screen.

    Implementations apply each call to their widgets; nothing is guaranteed
    to be visible until ``flush`` is called.
    """

    def set_panel_chrome(self, panel: PanelId, label: str, color: str, bold: bool) -> None:
        """Set a panel's border label and border/label color."""

    def set_items(self, panel: PanelId, items: List[str]) -> None:
        """Replace the entries of a list panel."""

    def set_item_text(self, panel: PanelId, index: int, text: str) -> None:
        """Replace the displayed text of one list entry."""

    def set_cursor(self, panel: PanelId, index: int) -> None:
        """Highlight one entry of a list panel."""

    def set_content(self, text: Text) -> None:
        """Replace the scripture panel text and scroll to the top."""

    def scroll_content(self, lines: int) -> None:
        """Scroll the scripture panel by ``lines`` (negative is up)."""

    def set_status(self, message: str) -> None:
        """Show a message in the status bar."""

    def set_chrome_colors(self, palette: "Palette") -> None:
        """Recolor status bar, help box and overlays."""

    def show_overlay(self, state: "OverlayState") -> None:
        """Show or refresh the overlay described by ``state``."""

    def hide_overlay(self) -> None:
        """Remove the overlay."""

    def panel_width(self, panel: PanelId) -> int:
        """Return the outer width of a panel in cells."""

    def flush(self) -> None:
        """Push a complete frame to the terminal."""
