"""Status bar widget."""

from typing import Optional, TYPE_CHECKING

from rich.text import Text
from textual.widgets import Static

if TYPE_CHECKING:
    from geeta_tui.themes import Palette


class StatusBar(Static):
    """Status bar showing the last message and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._message: Optional[str] = None
        self._accent = "yellow"

    @property
    def message(self) -> Optional[str]:
        """Return the message on display."""
        return self._message

    def show_message(self, message: str) -> None:
        """Show a message until the next one."""
        self._message = message
        self._update()

    def set_palette(self, palette: "Palette") -> None:
        """Recolor the bar."""
        self.styles.background = palette.status_bg
        self.styles.color = palette.fg
        self._accent = palette.highlight
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()

        if self._message:
            text.append(self._message, style=self._accent)
            text.append("  ")

        for i, (key, desc) in enumerate(self._get_hints()):
            if i > 0:
                text.append(" ", style="dim")
            text.append(key, style=f"bold {self._accent}")
            text.append(f" {desc}", style="dim")

        self.update(text)

    def _get_hints(self) -> list[tuple[str, str]]:
        """Get keybinding hints for the main view."""
        return [
            ("Tab", "panel"),
            ("s", "search"),
            ("b", "bookmarks"),
            ("h", "help"),
        ]
