"""Chapter loading and text search over the Gita JSON corpus."""

import json
import logging
import os
import re
from pathlib import Path
from typing import List, Optional

from geeta_tui.data.types import Chapter, SearchHit, Verse

logger = logging.getLogger(__name__)

# Verse ids look like "VERSE 12" or "TEXTS 16-18"; the first number wins
_VERSE_NUMBER = re.compile(r"\d+")

DATA_DIR_ENV = "GEETA_DATA_DIR"


class LibraryError(Exception):
    """Raised when the corpus directory cannot be read."""


def resolve_data_dir(environ=None, cwd: Optional[Path] = None) -> Path:
    """Find the corpus directory.

    $GEETA_DATA_DIR wins, otherwise ./geeta in the working directory. The
    path is returned even if it does not exist.
    """
    environ = os.environ if environ is None else environ
    if environ.get(DATA_DIR_ENV):
        return Path(environ[DATA_DIR_ENV]).expanduser()

    return Path(cwd or Path.cwd()) / "geeta"


def load_chapters(path: Path) -> List[Chapter]:
    """Load every chapter file from a directory.

    Args:
        path: Directory containing one JSON file per chapter

    Returns:
        Chapters with at least one verse, sorted by chapter id

    Raises:
        LibraryError: If the directory does not exist
    """
    path = Path(path)
    if not path.is_dir():
        raise LibraryError(f"Corpus directory not found: {path}")

    chapters = []
    for file in sorted(path.glob("*.json")):
        try:
            with open(file, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Skipping unreadable chapter file %s: %s", file, e)
            continue

        chapter = _parse_chapter(data)
        if chapter is None:
            logger.debug("Skipping %s: no verses", file.name)
            continue
        chapters.append(chapter)

    chapters.sort(key=lambda ch: ch.id)
    logger.info("Loaded %d chapters from %s", len(chapters), path)
    return chapters


def _parse_chapter(data: dict) -> Optional[Chapter]:
    """Build a Chapter from one decoded file, or None if it has no verses."""
    if not isinstance(data, dict):
        return None
    raw_verses = data.get("verses")
    if not isinstance(raw_verses, list) or not raw_verses:
        return None

    try:
        chapter_id = int(data.get("id"))
    except (TypeError, ValueError):
        return None

    verses = []
    for raw in raw_verses:
        if not isinstance(raw, dict):
            continue
        number = _verse_number(raw.get("id"))
        if number is None:
            continue
        verses.append(
            Verse(
                number=number,
                text=raw.get("translation") or raw.get("transliteration") or "",
                purport=raw.get("purport") or "",
                transliteration=raw.get("transliteration") or "",
            )
        )

    if not verses:
        return None

    return Chapter(
        id=chapter_id,
        title=data.get("title") or "",
        description=data.get("description") or "",
        verses=tuple(verses),
    )


def _verse_number(verse_id) -> Optional[int]:
    """Extract the verse number from an id such as ``"VERSE 3"``."""
    if isinstance(verse_id, int):
        return verse_id
    match = _VERSE_NUMBER.search(str(verse_id or ""))
    return int(match.group()) if match else None


class SearchIndex:
    """Case-insensitive substring search over translation and transliteration."""

    def __init__(self, chapters: List[Chapter]) -> None:
        self._chapters = chapters

    def query(self, text: str) -> List[SearchHit]:
        """Search all verses.

        Args:
            text: Search term

        Returns:
            Hits in corpus order
        """
        needle = text.strip().lower()
        if not needle:
            return []

        results = []
        for chapter in self._chapters:
            for verse in chapter.verses:
                haystack = f"{verse.text} \n {verse.transliteration}".lower()
                if needle in haystack:
                    results.append(
                        SearchHit(
                            chapter=chapter.id,
                            chapter_title=chapter.title,
                            verse=verse.number,
                            text=verse.text or verse.transliteration,
                        )
                    )
        return results
