"""Color palettes and theme application."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from geeta_tui.focus import FocusController
    from geeta_tui.selection import SelectionModel
    from geeta_tui.surface import Surface

THEME_KEY = "theme"
DEFAULT_THEME = "arjuna"
NEUTRAL_COLOR = "white"


@dataclass(frozen=True)
class Palette:
    """The eight color roles of a theme."""

    highlight: str
    border: str
    book: str
    chapter: str
    verse: str
    fg: str
    bg: str
    status_bg: str


# Named after the five Pandavas, in picker order
PALETTES: Dict[str, Palette] = {
    "yudhisthira": Palette(
        highlight="#FFD700",
        border="#9A8C6A",
        book="#E6C07B",
        chapter="#C6D68F",
        verse="#61AFEF",
        fg="#ECEFF4",
        bg="#16161A",
        status_bg="#2B2B2F",
    ),
    "bhima": Palette(
        highlight="#FF5555",
        border="#884444",
        book="#FFB86C",
        chapter="#F1FA8C",
        verse="#FF79C6",
        fg="#F8F8F2",
        bg="#282A36",
        status_bg="#23242A",
    ),
    "arjuna": Palette(
        highlight="#61AFEF",
        border="#3B6F9A",
        book="#8BE9FD",
        chapter="#50FA7B",
        verse="#F1FA8C",
        fg="#EDF6FF",
        bg="#071425",
        status_bg="#082235",
    ),
    "nakula": Palette(
        highlight="#50FA7B",
        border="#2F7A3A",
        book="#3BE38A",
        chapter="#B2FF59",
        verse="#C3E88D",
        fg="#F7FFF7",
        bg="#07130A",
        status_bg="#072917",
    ),
    "sahadeva": Palette(
        highlight="#BD93F9",
        border="#6E4BAF",
        book="#8BE9FD",
        chapter="#50FA7B",
        verse="#F8F8F2",
        fg="#F8F8F2",
        bg="#1E1B2F",
        status_bg="#2A2540",
    ),
}

THEME_NAMES = list(PALETTES)


def resolve_theme(name) -> str:
    """Return ``name`` if it is a known theme, else the default theme."""
    return name if name in PALETTES else DEFAULT_THEME


def get_palette(name) -> Palette:
    """Return the palette for ``name``, falling back to the default."""
    return PALETTES[resolve_theme(name)]


class ThemeApplier:
    """Pushes a palette to every live panel and re-renders the content."""

    def __init__(
        self,
        surface: "Surface",
        focus: "FocusController",
        selection: "SelectionModel",
    ) -> None:
        self._surface = surface
        self._focus = focus
        self._selection = selection
        self.theme = DEFAULT_THEME

    @property
    def palette(self) -> Palette:
        """Return the active palette."""
        return PALETTES[self.theme]

    def apply(self, theme: str) -> None:
        """Apply the named theme.

        Applying the same theme again produces the same visual state.
        """
        self.theme = resolve_theme(theme)
        palette = self.palette

        self._focus.palette = palette
        self._focus.restyle()
        self._surface.set_chrome_colors(palette)

        self._selection.palette = palette
        self._selection.rerender()
