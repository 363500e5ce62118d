"""Panel focus and label styling."""

from typing import Callable, Optional

from geeta_tui.surface import PanelId, Surface
from geeta_tui.themes import NEUTRAL_COLOR, Palette

FOCUS_RING = (PanelId.CHAPTERS, PanelId.VERSES, PanelId.CONTENT)


class FocusController:
    """Tracks which panel receives input.

    Exactly one panel is focused at a time, or none while an overlay has
    captured input. Focus requests made during capture are rejected.
    """

    def __init__(
        self,
        surface: Surface,
        palette: Palette,
        on_change: Optional[Callable[[Optional[PanelId]], None]] = None,
    ) -> None:
        self._surface = surface
        self.palette = palette
        self._on_change = on_change
        self._focused: Optional[PanelId] = None
        self._captured = False

    @property
    def focused(self) -> Optional[PanelId]:
        """Return the focused panel, or None."""
        return self._focused

    @property
    def captured(self) -> bool:
        """Check if an overlay holds input capture."""
        return self._captured

    def focus(self, panel: PanelId) -> bool:
        """Focus ``panel``. Returns False if rejected by capture."""
        if self._captured:
            return False
        self._set_focused(panel)
        return True

    def cycle_forward(self) -> bool:
        """Move focus to the next panel in the ring."""
        return self._cycle(1)

    def cycle_backward(self) -> bool:
        """Move focus to the previous panel in the ring."""
        return self._cycle(-1)

    def capture(self) -> Optional[PanelId]:
        """Blur every panel for an overlay.

        Returns:
            The panel that was focused before capture
        """
        previous = self._focused
        self._captured = True
        self._set_focused(None)
        return previous

    def release(self, panel: Optional[PanelId] = None) -> None:
        """End capture and focus ``panel`` (Chapters if None)."""
        self._captured = False
        self._set_focused(panel or PanelId.CHAPTERS)

    def restyle(self) -> None:
        """Reapply every panel label with the current palette."""
        for panel in FOCUS_RING:
            if panel == self._focused:
                self._surface.set_panel_chrome(
                    panel, f"[*] {panel.title}", self.palette.highlight, True
                )
            else:
                self._surface.set_panel_chrome(
                    panel, f"[ ] {panel.title}", NEUTRAL_COLOR, False
                )

    def _cycle(self, step: int) -> bool:
        if self._captured:
            return False
        if self._focused is None:
            target = FOCUS_RING[0]
        else:
            idx = FOCUS_RING.index(self._focused)
            target = FOCUS_RING[(idx + step) % len(FOCUS_RING)]
        self._set_focused(target)
        return True

    def _set_focused(self, panel: Optional[PanelId]) -> None:
        self._focused = panel
        self.restyle()
        if self._on_change:
            self._on_change(panel)
