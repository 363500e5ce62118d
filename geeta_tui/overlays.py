"""Modal overlays: search, bookmarks, theme picker, help and note prompts."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from geeta_tui.config import StoreError
from geeta_tui.cursor import ListCursor
from geeta_tui.data.types import Bookmark, SearchHit
from geeta_tui.themes import THEME_KEY, THEME_NAMES

if TYPE_CHECKING:
    from geeta_tui.backend.library import SearchIndex
    from geeta_tui.bookmarks import BookmarkStore
    from geeta_tui.config import ConfigStore
    from geeta_tui.focus import FocusController
    from geeta_tui.selection import SelectionModel
    from geeta_tui.surface import PanelId, Surface
    from geeta_tui.themes import ThemeApplier

SNIPPET_LIMIT = 100
PAGE_SIZE = 10

SEARCH_HINT = "Enter:Go to | Esc/q:Close"
BOOKMARKS_HINT = "Enter:Navigate | d:Delete | e:Edit Note | K/J:Move Up/Down | Esc/q:Close"
THEMES_HINT = "Enter:Apply | Esc/q:Cancel"

HELP_TEXT = """\
[b]Geeta-TUI Keyboard Shortcuts[/b]

[b]Navigation[/b]
  Arrow keys, j/k   Navigate lists / scroll scripture
  Tab               Switch between panels
  Shift+Tab         Switch panels (reverse)
  Enter             Select item

[b]Actions[/b]
  r                 Random verse
  s                 Search (select to navigate)
  b                 View bookmarks (select to navigate)
  a                 Add bookmark
  t                 Change theme

[b]Other[/b]
  h                 Toggle help
  Esc/q             Close menus
  Ctrl+C            Quit
"""

logger = logging.getLogger(__name__)


class OverlayKind(Enum):
    """Which overlay, if any, has captured input."""

    NONE = "none"
    SEARCH_PROMPT = "search_prompt"
    SEARCH_RESULTS = "search_results"
    BOOKMARKS = "bookmarks"
    THEME_PICKER = "theme_picker"
    HELP = "help"
    ADD_BOOKMARK = "add_bookmark"


@dataclass
class Prompt:
    """A one-line text prompt."""

    title: str
    message: str
    default: str = ""


@dataclass
class OverlayState:
    """Everything the surface needs to draw an overlay."""

    kind: OverlayKind = OverlayKind.NONE
    title: str = ""
    items: List[str] = field(default_factory=list)
    cursor: int = 0
    prompt: Optional[Prompt] = None
    hint: str = ""
    body: str = ""


def format_search_hit(hit: SearchHit) -> str:
    """Format a search hit as one list entry."""
    text = hit.text
    if len(text) > SNIPPET_LIMIT:
        text = text[:SNIPPET_LIMIT] + "..."
    return f"{hit.reference} - {text}"


def format_bookmark(position: int, bookmark: Bookmark) -> str:
    """Format a bookmark as one numbered list entry."""
    item = f"{position + 1}. {bookmark.reference}"
    if bookmark.note:
        item += f" - {bookmark.note}"
    return item


class OverlayManager:
    """Stack of modal overlays over the main panels.

    At most one overlay is on the stack. While it is there the panels are
    blurred and every key goes to the overlay; closing it gives focus back
    to the panel that had it before.
    """

    def __init__(
        self,
        surface: "Surface",
        focus: "FocusController",
        selection: "SelectionModel",
        search: "SearchIndex",
        bookmarks: "BookmarkStore",
        config: "ConfigStore",
        themes: "ThemeApplier",
    ) -> None:
        self._surface = surface
        self._focus = focus
        self._selection = selection
        self._search = search
        self._store = bookmarks
        self._config = config
        self._themes = themes
        self._stack: List[OverlayState] = []
        self._return_panel: Optional["PanelId"] = None
        self._cursor = ListCursor()
        self._results: List[SearchHit] = []
        self._bookmarks: List[Bookmark] = []

    @property
    def state(self) -> OverlayState:
        """Return the top overlay, or an empty NONE state."""
        return self._stack[-1] if self._stack else OverlayState()

    @property
    def kind(self) -> OverlayKind:
        """Return the kind of the top overlay."""
        return self.state.kind

    @property
    def active(self) -> bool:
        """Check if an overlay has captured input."""
        return bool(self._stack)

    @property
    def return_panel(self) -> Optional["PanelId"]:
        """Return the panel focus goes back to on dismissal."""
        return self._return_panel

    @property
    def bookmarks(self) -> List[Bookmark]:
        """Return the bookmarks held by an open Bookmarks overlay."""
        return list(self._bookmarks)

    # ==================== Opening ====================

    def open_search(self) -> bool:
        """Open the search prompt."""
        return self._push(
            OverlayState(
                kind=OverlayKind.SEARCH_PROMPT,
                title="Search",
                prompt=Prompt("Search", "Enter search term:"),
            )
        )

    def open_bookmarks(self) -> bool:
        """Open the bookmarks manager, unless there are no bookmarks."""
        if self.active:
            return False
        bookmarks = self._store.get_all()
        if not bookmarks:
            self._surface.set_status("No bookmarks found")
            return False
        self._bookmarks = bookmarks
        self._cursor.set_items(self._bookmark_items())
        return self._push(
            OverlayState(kind=OverlayKind.BOOKMARKS, title="Bookmarks", hint=BOOKMARKS_HINT)
        )

    def open_theme_picker(self) -> bool:
        """Open the theme picker with the current theme highlighted."""
        if self.active:
            return False
        items = [name.capitalize() for name in THEME_NAMES]
        self._cursor.set_items(items, THEME_NAMES.index(self._themes.theme))
        return self._push(
            OverlayState(kind=OverlayKind.THEME_PICKER, title="Select Theme", hint=THEMES_HINT)
        )

    def open_add_bookmark(self) -> bool:
        """Prompt for a note and bookmark the selected verse."""
        if self.active:
            return False
        if self._selection.current_verse is None:
            self._surface.set_status("No verse selected. Please select a verse first.")
            return False
        return self._push(
            OverlayState(
                kind=OverlayKind.ADD_BOOKMARK,
                title="Add Bookmark",
                prompt=Prompt(
                    "Add Bookmark Note (optional)",
                    "Enter a note for this bookmark (or leave empty):",
                ),
            )
        )

    def toggle_help(self) -> bool:
        """Open help from the main view, or close it if it is showing.

        Does nothing while another overlay is open.
        """
        if self.kind == OverlayKind.HELP:
            self.dismiss()
            return True
        return self._push(OverlayState(kind=OverlayKind.HELP, title="Help", body=HELP_TEXT))

    # ==================== Input ====================

    def handle_key(self, key: str) -> bool:
        """Handle a key for the active overlay.

        Returns:
            True while an overlay is active (input is captured)
        """
        if not self._stack:
            return False

        state = self.state
        kind = state.kind

        if state.prompt is not None:
            # Text entry belongs to the prompt widget
            if key == "escape":
                self.cancel_prompt()
            return True

        if kind == OverlayKind.HELP:
            if key in ("escape", "q", "h"):
                self.dismiss()
            return True

        if key in ("escape", "q"):
            self.dismiss()
        elif key in ("up", "k"):
            self._move(-1)
        elif key in ("down", "j"):
            self._move(1)
        elif key == "pageup":
            self._move(-PAGE_SIZE)
        elif key == "pagedown":
            self._move(PAGE_SIZE)
        elif key == "home":
            self._move(-len(self._cursor))
        elif key == "end":
            self._move(len(self._cursor))
        elif key == "enter":
            self.select()
        elif kind == OverlayKind.BOOKMARKS:
            if key == "d":
                self.delete_bookmark()
            elif key == "e":
                self.edit_note()
            elif key == "K":
                self.move_bookmark(-1)
            elif key == "J":
                self.move_bookmark(1)
        return True

    def select(self, index: Optional[int] = None) -> bool:
        """Choose the entry at ``index`` (default: the cursor).

        Returns:
            False if there is no list overlay or the index is out of range
        """
        kind = self.kind
        if kind not in (
            OverlayKind.SEARCH_RESULTS,
            OverlayKind.BOOKMARKS,
            OverlayKind.THEME_PICKER,
        ) or self.state.prompt is not None:
            return False
        if index is None:
            index = self._cursor.index
        if not self._cursor.contains(index):
            return False

        if kind == OverlayKind.SEARCH_RESULTS:
            hit = self._results[index]
            self._selection.navigate(hit.chapter, hit.verse)
            self.dismiss()
        elif kind == OverlayKind.BOOKMARKS:
            bookmark = self._bookmarks[index]
            self._selection.navigate(bookmark.chapter, bookmark.verse)
            self.dismiss()
        else:
            self._apply_theme(THEME_NAMES[index])
        return True

    def submit_prompt(self, text: str) -> None:
        """Complete the prompt of the active overlay."""
        state = self.state
        if state.prompt is None:
            return

        if state.kind == OverlayKind.SEARCH_PROMPT:
            self._run_search(text)
        elif state.kind == OverlayKind.ADD_BOOKMARK:
            self._add_bookmark(text)
        elif state.kind == OverlayKind.BOOKMARKS:
            bookmark = self._bookmarks[self._cursor.index]
            bookmark.note = text or ""
            state.prompt = None
            self._persist()
            self._cursor.set_items(self._bookmark_items(), self._cursor.index)
            self._refresh()

    def cancel_prompt(self) -> None:
        """Abandon the prompt of the active overlay."""
        state = self.state
        if state.prompt is None:
            return
        if state.kind == OverlayKind.BOOKMARKS:
            state.prompt = None
            self._refresh()
        else:
            self.dismiss()

    def dismiss(self) -> None:
        """Close the overlay and give focus back."""
        if not self._stack:
            return
        self._stack.clear()
        self._results = []
        self._bookmarks = []
        self._cursor.set_items([])
        self._surface.hide_overlay()
        panel = self._return_panel
        self._return_panel = None
        self._focus.release(panel)

    # ==================== Bookmarks ====================

    def delete_bookmark(self) -> bool:
        """Delete the bookmark under the cursor."""
        if self.kind != OverlayKind.BOOKMARKS or not self._bookmarks:
            return False
        del self._bookmarks[self._cursor.index]
        saved = self._persist()

        if not self._bookmarks:
            self.dismiss()
            if saved:
                self._surface.set_status("All bookmarks deleted")
        else:
            self._cursor.set_items(self._bookmark_items(), self._cursor.index)
            self._refresh()
        return True

    def edit_note(self) -> bool:
        """Prompt for a new note for the bookmark under the cursor."""
        if self.kind != OverlayKind.BOOKMARKS or not self._bookmarks:
            return False
        bookmark = self._bookmarks[self._cursor.index]
        self.state.prompt = Prompt("Edit Bookmark Note", "Edit note:", bookmark.note)
        self._refresh()
        return True

    def move_bookmark(self, step: int) -> bool:
        """Swap the bookmark under the cursor with its neighbour.

        Args:
            step: -1 to move up, 1 to move down

        Returns:
            False at the list boundary
        """
        if self.kind != OverlayKind.BOOKMARKS:
            return False
        index = self._cursor.index
        target = index + step
        if not 0 <= target < len(self._bookmarks):
            return False

        bookmarks = self._bookmarks
        bookmarks[index], bookmarks[target] = bookmarks[target], bookmarks[index]
        self._persist()
        self._cursor.set_items(self._bookmark_items(), target)
        self._refresh()
        return True

    # ==================== Helpers ====================

    def _push(self, state: OverlayState) -> bool:
        if self._stack:
            return False
        self._return_panel = self._focus.capture()
        self._stack.append(state)
        self._refresh()
        return True

    def _replace(self, state: OverlayState) -> None:
        self._stack[-1] = state
        self._refresh()

    def _refresh(self) -> None:
        state = self.state
        state.items = self._cursor.items
        state.cursor = self._cursor.index
        self._surface.show_overlay(state)

    def _move(self, delta: int) -> None:
        if self._cursor.move(delta):
            self._refresh()

    def _run_search(self, text: str) -> None:
        query = text.strip()
        if not query:
            self.dismiss()
            return

        results = self._search.query(query)
        if not results:
            self.dismiss()
            self._surface.set_status("No results found")
            return

        self._results = results
        self._cursor.set_items([format_search_hit(hit) for hit in results])
        self._replace(
            OverlayState(
                kind=OverlayKind.SEARCH_RESULTS,
                title=f'Search Results: "{query}" ({len(results)})',
                hint=SEARCH_HINT,
            )
        )
        self._surface.set_status(f"{len(results)} results for '{query}'")

    def _add_bookmark(self, note: str) -> None:
        chapter = self._selection.current_chapter
        verse = self._selection.current_verse
        self.dismiss()
        if chapter is None or verse is None:
            return

        bookmark = Bookmark(
            chapter=chapter.id,
            verse=verse.number,
            note=note or "",
            chapter_title=chapter.title,
        )
        try:
            self._store.add(bookmark)
        except StoreError as e:
            self._surface.set_status(f"Could not save bookmark: {e}")
            return
        self._surface.set_status(
            f"Bookmark added: {self._selection.book_name} {chapter.id}:{verse.number}"
        )

    def _apply_theme(self, name: str) -> None:
        try:
            self._config.set(THEME_KEY, name)
        except StoreError as e:
            self._surface.set_status(f"Could not save theme: {e}")
        self._themes.apply(name)
        self.dismiss()

    def _persist(self) -> bool:
        try:
            self._store.persist(self._bookmarks)
        except StoreError as e:
            logger.warning("Bookmark write failed: %s", e)
            self._surface.set_status(f"Could not save bookmarks: {e}")
            return False
        return True

    def _bookmark_items(self) -> List[str]:
        return [format_bookmark(i, bm) for i, bm in enumerate(self._bookmarks)]
