"""Bookmark persistence on top of the config file."""

import logging
from typing import List

from geeta_tui.config import ConfigStore
from geeta_tui.data.types import Bookmark

BOOKMARKS_KEY = "bookmarks"

logger = logging.getLogger(__name__)


class BookmarkStore:
    """Ordered bookmark list stored under the ``bookmarks`` config key."""

    def __init__(self, config: ConfigStore) -> None:
        self._config = config

    def get_all(self) -> List[Bookmark]:
        """Return all bookmarks in saved order.

        Entries that cannot be parsed are skipped.
        """
        bookmarks = []
        for data in self._config.get(BOOKMARKS_KEY) or []:
            try:
                bookmarks.append(Bookmark.from_dict(data))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed bookmark: %r", data)
        return bookmarks

    def persist(self, bookmarks: List[Bookmark]) -> None:
        """Replace the saved list with ``bookmarks``.

        Raises:
            StoreError: If the config file could not be written.
        """
        self._config.set(BOOKMARKS_KEY, [bm.to_dict() for bm in bookmarks])

    def add(self, bookmark: Bookmark) -> None:
        """Append a bookmark and save."""
        bookmarks = self.get_all()
        bookmarks.append(bookmark)
        self.persist(bookmarks)
