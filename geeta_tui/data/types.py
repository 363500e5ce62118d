"""Data types for geeta-tui."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Verse:
    """A single verse of a chapter."""

    number: int
    text: str
    purport: str = ""
    transliteration: str = ""  # Only consulted by search


@dataclass(frozen=True)
class Chapter:
    """A chapter with its ordered verses."""

    id: int
    title: str
    description: str = ""
    verses: Tuple[Verse, ...] = ()

    @property
    def label(self) -> str:
        """Return the label shown in the chapters panel."""
        return f"{self.id}. {self.title}"

    @property
    def verse_count(self) -> int:
        """Return the number of verses."""
        return len(self.verses)


@dataclass(frozen=True)
class SearchHit:
    """A search result hit."""

    chapter: int
    chapter_title: str
    verse: int
    text: str

    @property
    def reference(self) -> str:
        """Return formatted reference string."""
        if self.chapter_title:
            return f"{self.chapter_title} ({self.chapter}):{self.verse}"
        return f"Chapter {self.chapter}:{self.verse}"


@dataclass
class Bookmark:
    """A saved bookmark."""

    chapter: int
    verse: int
    note: str = ""
    chapter_title: str = ""

    @property
    def reference(self) -> str:
        """Return formatted reference string."""
        if self.chapter_title:
            return f"{self.chapter_title} ({self.chapter}):{self.verse}"
        return f"Chapter {self.chapter}:{self.verse}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "chapter": self.chapter,
            "verse": self.verse,
            "note": self.note,
            "chapterTitle": self.chapter_title,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Bookmark":
        """Create from dictionary."""
        return cls(
            chapter=int(data["chapter"]),
            verse=int(data["verse"]),
            note=data.get("note") or "",
            chapter_title=data.get("chapterTitle") or "",
        )
