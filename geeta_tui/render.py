"""Scripture text formatting for the content panel."""

from typing import Optional, Sequence

from rich.text import Text

from geeta_tui.data.types import Chapter, Verse
from geeta_tui.themes import Palette


def center(text: str, width: int) -> str:
    """Left-pad ``text`` so it sits centered in ``width`` cells."""
    padding = max(0, (width - len(text)) // 2)
    return " " * padding + text


def render_content(
    book_name: str,
    chapter: Optional[Chapter],
    verses: Sequence[Verse],
    width: int,
    palette: Optional[Palette] = None,
) -> Text:
    """Format a chapter heading followed by the given verses.

    The same layout is used for a whole chapter and for a single verse:

        <book name, centered, bold>
        <"Chapter N: Title", centered, bold>

        Verse K
        <text>

        Purport:
        <purport>

    Args:
        book_name: Name shown on the first line
        chapter: Chapter the verses belong to
        verses: Verses to show, in order
        width: Usable width of the content panel for centering
        palette: Colors for headings and body text

    Returns:
        Rich Text for the content panel
    """
    book_style = "bold"
    chapter_style = "bold"
    verse_style = "bold"
    purport_style = "bold"
    body_style = ""
    if palette is not None:
        book_style = f"bold {palette.book}"
        chapter_style = f"bold {palette.chapter}"
        verse_style = f"bold {palette.verse}"
        purport_style = f"bold {palette.highlight}"
        body_style = palette.fg

    text = Text()
    text.append(center(book_name, width), style=book_style)
    text.append("\n")

    if chapter is not None:
        if chapter.title:
            heading = f"Chapter {chapter.id}: {chapter.title}"
        else:
            heading = f"Chapter {chapter.id}"
        text.append(center(heading, width), style=chapter_style)
        text.append("\n\n")

    for verse in verses:
        text.append(f"Verse {verse.number}", style=verse_style)
        text.append("\n")
        text.append(verse.text, style=body_style)
        text.append("\n\n")

        if verse.purport:
            text.append("Purport:", style=purport_style)
            text.append("\n")
            text.append(verse.purport, style=body_style)
            text.append("\n\n")

    return text
