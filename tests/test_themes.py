"""Tests for palettes and theme application."""

from geeta_tui.surface import PanelId
from geeta_tui.themes import DEFAULT_THEME, PALETTES, THEME_NAMES, get_palette, resolve_theme


class TestPalettes:
    """Test palette lookup."""

    def test_five_themes_in_order(self):
        """The picker order is fixed."""
        assert THEME_NAMES == ["yudhisthira", "bhima", "arjuna", "nakula", "sahadeva"]

    def test_unknown_falls_back(self):
        """Unknown or missing names use the default."""
        assert resolve_theme("krishna") == DEFAULT_THEME
        assert resolve_theme(None) == DEFAULT_THEME
        assert get_palette("krishna") == PALETTES["arjuna"]


class TestThemeApplier:
    """Test applying a theme to a running reader."""

    def snapshot(self, surface):
        return (
            dict(surface.chrome),
            surface.palette,
            surface.content.plain,
            [(span.start, span.end, str(span.style)) for span in surface.content.spans],
        )

    def test_idempotent(self, reader, surface):
        """Applying the same theme twice gives the same state."""
        reader.themes.apply("sahadeva")
        first = self.snapshot(surface)
        reader.themes.apply("sahadeva")
        assert self.snapshot(surface) == first

    def test_recolors_everything(self, reader, surface):
        """Labels, chrome and content all take the new palette."""
        reader.themes.apply("bhima")
        palette = PALETTES["bhima"]
        assert surface.palette == palette
        assert surface.chrome[PanelId.CHAPTERS][1] == palette.highlight
        styles = {str(span.style) for span in surface.content.spans}
        assert f"bold {palette.verse}" in styles

    def test_keeps_shown_verse(self, reader, surface):
        """Re-rendering keeps a single-verse view."""
        reader.selection.navigate(2, 2)
        reader.themes.apply("nakula")
        assert "Verse 2\n" in surface.content.plain
        assert "Verse 3\n" not in surface.content.plain

    def test_unknown_name(self, reader):
        """Unknown names apply the default theme."""
        reader.themes.apply("bogus")
        assert reader.themes.theme == "arjuna"
