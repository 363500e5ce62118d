"""Tests for panel focus and label styling."""

from geeta_tui.focus import FOCUS_RING, FocusController
from geeta_tui.surface import PanelId
from geeta_tui.themes import NEUTRAL_COLOR, get_palette


def make_controller(surface, changes=None):
    on_change = changes.append if changes is not None else None
    return FocusController(surface, get_palette("arjuna"), on_change=on_change)


class TestFocusRing:
    """Test cycling through the panels."""

    def test_ring_order(self):
        """Chapters, Verses, Scripture."""
        assert FOCUS_RING == (PanelId.CHAPTERS, PanelId.VERSES, PanelId.CONTENT)

    def test_cycle_forward_wraps(self, surface):
        """Forward cycling visits every panel and wraps."""
        focus = make_controller(surface)
        focus.focus(PanelId.CHAPTERS)
        seen = []
        for _ in range(3):
            focus.cycle_forward()
            seen.append(focus.focused)
        assert seen == [PanelId.VERSES, PanelId.CONTENT, PanelId.CHAPTERS]

    def test_cycle_backward_wraps(self, surface):
        """Backward cycling from Chapters lands on Scripture."""
        focus = make_controller(surface)
        focus.focus(PanelId.CHAPTERS)
        focus.cycle_backward()
        assert focus.focused == PanelId.CONTENT

    def test_cycle_from_nothing(self, surface):
        """With nothing focused, cycling starts at Chapters."""
        focus = make_controller(surface)
        focus.cycle_forward()
        assert focus.focused == PanelId.CHAPTERS


class TestLabels:
    """Test panel label styling."""

    def test_focused_label(self, surface):
        """The focused panel is marked and highlighted."""
        focus = make_controller(surface)
        focus.focus(PanelId.VERSES)
        palette = get_palette("arjuna")
        assert surface.chrome[PanelId.VERSES] == ("[*] Verses", palette.highlight, True)

    def test_unfocused_labels(self, surface):
        """Other panels are neutral and not bold."""
        focus = make_controller(surface)
        focus.focus(PanelId.VERSES)
        assert surface.chrome[PanelId.CHAPTERS] == ("[ ] Chapters", NEUTRAL_COLOR, False)
        assert surface.chrome[PanelId.CONTENT] == ("[ ] Scripture", NEUTRAL_COLOR, False)

    def test_exactly_one_marked(self, surface):
        """Only one label carries the marker."""
        focus = make_controller(surface)
        focus.focus(PanelId.CONTENT)
        marked = [p for p, chrome in surface.chrome.items() if chrome[0].startswith("[*]")]
        assert marked == [PanelId.CONTENT]


class TestCapture:
    """Test overlay input capture."""

    def test_capture_blurs_all(self, surface):
        """Capture returns the previous panel and marks nothing."""
        focus = make_controller(surface)
        focus.focus(PanelId.VERSES)
        assert focus.capture() == PanelId.VERSES
        assert focus.focused is None
        assert all(chrome[0].startswith("[ ]") for chrome in surface.chrome.values())

    def test_focus_rejected_while_captured(self, surface):
        """Focus and cycling are refused during capture."""
        focus = make_controller(surface)
        focus.focus(PanelId.CHAPTERS)
        focus.capture()
        assert focus.focus(PanelId.CONTENT) is False
        assert focus.cycle_forward() is False
        assert focus.focused is None

    def test_release_restores_panel(self, surface):
        """Release focuses the given panel."""
        focus = make_controller(surface)
        focus.focus(PanelId.CONTENT)
        previous = focus.capture()
        focus.release(previous)
        assert focus.focused == PanelId.CONTENT
        assert focus.captured is False

    def test_release_defaults_to_chapters(self, surface):
        """Release without a panel focuses Chapters."""
        focus = make_controller(surface)
        focus.capture()
        focus.release()
        assert focus.focused == PanelId.CHAPTERS

    def test_change_callback(self, surface):
        """Every focus change is reported, including capture."""
        changes = []
        focus = make_controller(surface, changes)
        focus.focus(PanelId.CHAPTERS)
        focus.capture()
        focus.release(PanelId.VERSES)
        assert changes == [PanelId.CHAPTERS, None, PanelId.VERSES]
