"""Data types for the Gita corpus."""

from geeta_tui.data.types import Bookmark, Chapter, SearchHit, Verse

BOOK_NAME = "Bhagavad-Gītā"

__all__ = [
    "BOOK_NAME",
    "Bookmark",
    "Chapter",
    "SearchHit",
    "Verse",
]
