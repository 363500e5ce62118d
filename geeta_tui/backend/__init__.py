"""Corpus backend for geeta-tui."""

from geeta_tui.backend.library import (
    LibraryError,
    SearchIndex,
    load_chapters,
    resolve_data_dir,
)

__all__ = [
    "LibraryError",
    "SearchIndex",
    "load_chapters",
    "resolve_data_dir",
]
