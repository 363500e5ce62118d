"""Bounded cursor over a list of display items."""

from typing import List, Optional, Sequence


class ListCursor:
    """Items plus a highlighted index that never leaves the list.

    An empty list has index 0 and no current item.
    """

    def __init__(self, items: Optional[Sequence[str]] = None) -> None:
        self._items: List[str] = list(items or [])
        self._index = 0

    @property
    def items(self) -> List[str]:
        """Return a copy of the items."""
        return self._items.copy()

    @property
    def index(self) -> int:
        """Return the highlighted index."""
        return self._index

    def __len__(self) -> int:
        return len(self._items)

    def set_items(self, items: Sequence[str], index: int = 0) -> None:
        """Replace the items and highlight ``index`` (clamped)."""
        self._items = list(items)
        self._index = 0
        self.clamp(index)

    def contains(self, index: int) -> bool:
        """Check whether ``index`` addresses an item."""
        return 0 <= index < len(self._items)

    def move_to(self, index: int) -> bool:
        """Highlight ``index``. Returns False if out of range."""
        if not self.contains(index):
            return False
        self._index = index
        return True

    def move(self, delta: int) -> bool:
        """Move by ``delta``. Returns True only if the index changed."""
        target = max(0, min(self._index + delta, len(self._items) - 1))
        if target == self._index or not self._items:
            return False
        self._index = target
        return True

    def clamp(self, index: Optional[int] = None) -> None:
        """Clamp ``index`` (default: the current index) into range."""
        if index is None:
            index = self._index
        self._index = max(0, min(index, len(self._items) - 1)) if self._items else 0
