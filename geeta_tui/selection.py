"""Chapter/verse selection state."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from geeta_tui.cursor import ListCursor
from geeta_tui.data import BOOK_NAME
from geeta_tui.data.types import Chapter, Verse
from geeta_tui.render import render_content
from geeta_tui.surface import PanelId, Surface
from geeta_tui.themes import Palette, get_palette

WHOLE_CHAPTER = "Whole chapter"
# Border plus padding of the content panel
CONTENT_MARGIN = 4

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """What the content panel currently shows.

    ``verse_index`` is 0-based into the chapter's verses; None means the
    whole chapter.
    """

    chapter_index: int = 0
    verse_index: Optional[int] = None


class SelectionModel:
    """Owns the shown chapter/verse and the chapter and verse pickers."""

    def __init__(
        self,
        chapters: Sequence[Chapter],
        surface: Surface,
        book_name: str = BOOK_NAME,
        palette: Optional[Palette] = None,
    ) -> None:
        self._chapters = list(chapters)
        self._surface = surface
        self.book_name = book_name
        self.palette = palette or get_palette(None)
        self.selection = Selection()
        self.chapter_cursor = ListCursor(ch.label for ch in self._chapters)
        self.verse_cursor = ListCursor()
        # Verses of the last primary render, re-used by rerender()
        self._shown: Optional[List[Verse]] = None

    @property
    def chapters(self) -> List[Chapter]:
        """Return the loaded chapters."""
        return self._chapters

    @property
    def chapter_count(self) -> int:
        """Return the number of chapters."""
        return len(self._chapters)

    @property
    def chapter_labels(self) -> List[str]:
        """Return the chapter picker entries."""
        return self.chapter_cursor.items

    @property
    def current_chapter(self) -> Optional[Chapter]:
        """Return the selected chapter, or None when nothing is loaded."""
        if not self._chapters:
            return None
        return self._chapters[self.selection.chapter_index]

    @property
    def current_verse(self) -> Optional[Verse]:
        """Return the selected verse, or None in whole-chapter mode."""
        chapter = self.current_chapter
        if chapter is None or self.selection.verse_index is None:
            return None
        return chapter.verses[self.selection.verse_index]

    @property
    def verse_items(self) -> List[str]:
        """Return the verse picker entries."""
        return self.verse_cursor.items

    def show_chapters(self) -> None:
        """Push the chapter picker to the surface."""
        self._surface.set_items(PanelId.CHAPTERS, self.chapter_cursor.items)
        self._surface.set_cursor(PanelId.CHAPTERS, self.chapter_cursor.index)
        if not self._chapters:
            self._surface.set_items(PanelId.VERSES, [])
            self._surface.set_status("No chapters loaded")

    def select_chapter(self, index: int) -> bool:
        """Show a whole chapter and rebuild the verse picker.

        Returns:
            False (and changes nothing) if ``index`` is out of range
        """
        if not 0 <= index < self.chapter_count:
            logger.debug("Ignoring chapter index %d of %d", index, self.chapter_count)
            return False

        chapter = self._chapters[index]
        self.selection = Selection(chapter_index=index, verse_index=None)

        self.chapter_cursor.move_to(index)
        self._surface.set_cursor(PanelId.CHAPTERS, index)

        items = [WHOLE_CHAPTER] + [str(v.number) for v in chapter.verses]
        self.verse_cursor.set_items(items)
        self._surface.set_items(PanelId.VERSES, items)
        self._surface.set_cursor(PanelId.VERSES, 0)

        self._show(list(chapter.verses))
        self._surface.set_status(f"Reading: {self.book_name} {chapter.id}")
        return True

    def select_verse(self, list_index: int) -> bool:
        """Show one verse, or the whole chapter for the sentinel entry.

        Args:
            list_index: Verse picker index; 0 is "Whole chapter", ``k`` is
                the k-th verse of the chapter

        Returns:
            False (and changes nothing) if ``list_index`` is out of range
        """
        chapter = self.current_chapter
        if chapter is None or not 0 <= list_index <= chapter.verse_count:
            return False

        self.verse_cursor.move_to(list_index)
        self._surface.set_cursor(PanelId.VERSES, list_index)

        if list_index == 0:
            self.selection.verse_index = None
            self._show(list(chapter.verses))
            self._surface.set_status(f"Reading: Chapter {chapter.id} - {chapter.title}")
        else:
            verse = chapter.verses[list_index - 1]
            self.selection.verse_index = list_index - 1
            self._show([verse])
            self._surface.set_status(f"Chapter {chapter.id}:{verse.number} - {chapter.title}")
        return True

    def find_chapter(self, chapter_id: int) -> Optional[int]:
        """Return the index of the chapter with the given id."""
        for idx, chapter in enumerate(self._chapters):
            if chapter.id == int(chapter_id):
                return idx
        return None

    def navigate(self, chapter_id: int, verse_number: Optional[int] = None) -> bool:
        """Select a chapter by id and, if found, a verse by number.

        Returns:
            False if no chapter has that id
        """
        index = self.find_chapter(chapter_id)
        if index is None:
            return False
        self.select_chapter(index)

        if verse_number is not None:
            for pos, verse in enumerate(self._chapters[index].verses):
                if verse.number == int(verse_number):
                    self.select_verse(pos + 1)
                    break
        return True

    def move_chapter_cursor(self, delta: int) -> bool:
        """Move the chapter highlight without selecting."""
        if not self.chapter_cursor.move(delta):
            return False
        self._surface.set_cursor(PanelId.CHAPTERS, self.chapter_cursor.index)
        return True

    def move_verse_cursor(self, delta: int) -> bool:
        """Move the verse highlight without selecting."""
        if not self.verse_cursor.move(delta):
            return False
        self._surface.set_cursor(PanelId.VERSES, self.verse_cursor.index)
        return True

    def rerender(self) -> None:
        """Render the last primary content again (theme or size change)."""
        if self._shown is not None:
            self._render(self._shown)

    def content_width(self) -> int:
        """Return the width available for centering."""
        return max(0, self._surface.panel_width(PanelId.CONTENT) - CONTENT_MARGIN)

    def _show(self, verses: List[Verse]) -> None:
        self._shown = verses
        self._render(verses)

    def _render(self, verses: List[Verse]) -> None:
        text = render_content(
            self.book_name,
            self.current_chapter,
            verses,
            self.content_width(),
            self.palette,
        )
        self._surface.set_content(text)
