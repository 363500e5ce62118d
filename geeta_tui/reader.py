"""Input dispatch for the reader: one entry point per input class."""

import logging
import random
from typing import Optional, Sequence

from geeta_tui.backend.library import SearchIndex
from geeta_tui.bookmarks import BookmarkStore
from geeta_tui.config import ConfigStore
from geeta_tui.data import BOOK_NAME
from geeta_tui.data.types import Chapter
from geeta_tui.focus import FocusController
from geeta_tui.overlays import OverlayManager
from geeta_tui.selection import SelectionModel
from geeta_tui.surface import PanelId, Surface
from geeta_tui.themes import DEFAULT_THEME, THEME_KEY, ThemeApplier, get_palette
from geeta_tui.ticker import AutoScrollTicker, Scheduler

START_MESSAGE = "Navigate chapters and verses - Press 'h' for help"
PAGE_SIZE = 10
CONTENT_PAGE = 20
# Larger than any chapter; the view clamps scrolling
CONTENT_END = 1_000_000

logger = logging.getLogger(__name__)


class Reader:
    """The reader's interaction core.

    Every key press, list selection and prompt result enters here and is
    routed to exactly one context: the active overlay if there is one,
    otherwise the global keys and then the focused panel. Each handled
    event ends with a single frame flush.
    """

    def __init__(
        self,
        chapters: Sequence[Chapter],
        surface: Surface,
        schedule: Scheduler,
        config: ConfigStore,
        search: Optional[SearchIndex] = None,
        bookmarks: Optional[BookmarkStore] = None,
        book_name: str = BOOK_NAME,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._surface = surface
        self._config = config
        self._rng = rng or random.Random()

        palette = get_palette(config.get(THEME_KEY))
        self.selection = SelectionModel(chapters, surface, book_name, palette)
        self.ticker = AutoScrollTicker(
            schedule,
            lambda: surface.panel_width(PanelId.CHAPTERS),
            self._show_label_frame,
        )
        self.focus = FocusController(surface, palette, on_change=self._focus_changed)
        self.themes = ThemeApplier(surface, self.focus, self.selection)
        self.overlays = OverlayManager(
            surface,
            self.focus,
            self.selection,
            search or SearchIndex(list(chapters)),
            bookmarks or BookmarkStore(config),
            config,
            self.themes,
        )

    def start(self) -> None:
        """Show the first chapter with the chapters panel focused."""
        self.themes.apply(self._config.get(THEME_KEY) or DEFAULT_THEME)
        self.ticker.set_labels(self.selection.chapter_labels)
        self.selection.show_chapters()
        if self.selection.chapter_count:
            self.selection.select_chapter(0)
            self._surface.set_status(START_MESSAGE)
        self.focus.focus(PanelId.CHAPTERS)
        self._surface.flush()

    def shutdown(self) -> None:
        """Cancel background timers. The panels may already be gone."""
        self.ticker.cancel()

    def relayout(self) -> None:
        """Re-render width dependent content after a resize."""
        self.selection.rerender()
        if self.focus.focused == PanelId.CHAPTERS:
            self.ticker.selection_changed(self.selection.chapter_cursor.index)
        self._surface.flush()

    # ==================== Input ====================

    def handle_key(self, key: str) -> bool:
        """Route a named key to the topmost active context.

        Returns:
            True if the key was consumed
        """
        if self.overlays.active:
            handled = self.overlays.handle_key(key)
        else:
            handled = self._handle_global_key(key) or self._handle_panel_key(key)
        if handled:
            self._surface.flush()
        return handled

    def handle_select(self, panel: PanelId, index: int) -> bool:
        """Handle a mouse selection in one of the main panels."""
        if self.overlays.active:
            return False

        handled = False
        if panel == PanelId.CHAPTERS:
            self.focus.focus(PanelId.CHAPTERS)
            handled = self._select_chapter(index)
        elif panel == PanelId.VERSES:
            self.focus.focus(PanelId.VERSES)
            handled = self.selection.select_verse(index)
        if handled:
            self._surface.flush()
        return handled

    def handle_overlay_select(self, index: int) -> bool:
        """Handle a mouse selection in a list overlay."""
        handled = self.overlays.select(index)
        if handled:
            self._surface.flush()
        return handled

    def submit_prompt(self, text: str) -> None:
        """Complete the active overlay's prompt."""
        self.overlays.submit_prompt(text)
        self._surface.flush()

    def cancel_prompt(self) -> None:
        """Abandon the active overlay's prompt."""
        self.overlays.cancel_prompt()
        self._surface.flush()

    def random_verse(self) -> bool:
        """Jump to a random verse."""
        chapters = [chapter for chapter in self.selection.chapters if chapter.verses]
        if not chapters:
            return False
        chapter = self._rng.choice(chapters)
        verse = self._rng.choice(chapter.verses)
        before = self.selection.chapter_cursor.index
        logger.debug("Random verse %d:%d", chapter.id, verse.number)
        self.selection.navigate(chapter.id, verse.number)
        self._chapter_cursor_moved(before)
        return True

    # ==================== Dispatch ====================

    def _handle_global_key(self, key: str) -> bool:
        if key == "tab":
            return self.focus.cycle_forward()
        elif key == "shift+tab":
            return self.focus.cycle_backward()
        elif key == "s":
            self.overlays.open_search()
        elif key == "b":
            self.overlays.open_bookmarks()
        elif key == "t":
            self.overlays.open_theme_picker()
        elif key == "h":
            self.overlays.toggle_help()
        elif key == "a":
            self.overlays.open_add_bookmark()
        elif key == "r":
            self.random_verse()
        else:
            return False
        return True

    def _handle_panel_key(self, key: str) -> bool:
        panel = self.focus.focused
        if panel == PanelId.CHAPTERS:
            return self._handle_chapters_key(key)
        elif panel == PanelId.VERSES:
            return self._handle_verses_key(key)
        elif panel == PanelId.CONTENT:
            return self._handle_content_key(key)
        return False

    def _handle_chapters_key(self, key: str) -> bool:
        delta = _list_delta(key)
        if delta is not None:
            before = self.selection.chapter_cursor.index
            self.selection.move_chapter_cursor(delta)
            self._chapter_cursor_moved(before)
            return True
        if key == "enter":
            if self._select_chapter(self.selection.chapter_cursor.index):
                self.focus.focus(PanelId.VERSES)
            return True
        return False

    def _handle_verses_key(self, key: str) -> bool:
        delta = _list_delta(key)
        if delta is not None:
            self.selection.move_verse_cursor(delta)
            return True
        if key == "enter":
            self.selection.select_verse(self.selection.verse_cursor.index)
            return True
        return False

    def _handle_content_key(self, key: str) -> bool:
        if key in ("up", "k"):
            self._surface.scroll_content(-1)
        elif key in ("down", "j"):
            self._surface.scroll_content(1)
        elif key in ("pageup", "ctrl+u"):
            self._surface.scroll_content(-CONTENT_PAGE)
        elif key in ("pagedown", "ctrl+d", "space"):
            self._surface.scroll_content(CONTENT_PAGE)
        elif key == "home":
            self._surface.scroll_content(-CONTENT_END)
        elif key == "end":
            self._surface.scroll_content(CONTENT_END)
        else:
            return False
        return True

    # ==================== Helpers ====================

    def _select_chapter(self, index: int) -> bool:
        before = self.selection.chapter_cursor.index
        selected = self.selection.select_chapter(index)
        self._chapter_cursor_moved(before)
        return selected

    def _chapter_cursor_moved(self, before: int) -> None:
        after = self.selection.chapter_cursor.index
        if after != before:
            self.ticker.selection_changed(after)

    def _focus_changed(self, panel: Optional[PanelId]) -> None:
        if panel == PanelId.CHAPTERS:
            self.ticker.start(self.selection.chapter_cursor.index)
        else:
            self.ticker.stop()

    def _show_label_frame(self, index: int, text: str) -> None:
        self._surface.set_item_text(PanelId.CHAPTERS, index, text)
        self._surface.flush()


def _list_delta(key: str) -> Optional[int]:
    """Map a list navigation key to a cursor offset."""
    return {
        "up": -1,
        "k": -1,
        "down": 1,
        "j": 1,
        "pageup": -PAGE_SIZE,
        "pagedown": PAGE_SIZE,
    }.get(key)
