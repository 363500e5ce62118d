"""Tests for the config file and bookmark storage."""

import json

import pytest

from geeta_tui.bookmarks import BOOKMARKS_KEY, BookmarkStore
from geeta_tui.config import ConfigStore, StoreError
from geeta_tui.data.types import Bookmark


class TestConfigStore:
    """Test the JSON key/value store."""

    def test_roundtrip(self, tmp_path):
        """Values survive a reload."""
        path = tmp_path / "sub" / "config.json"
        ConfigStore(path).set("theme", "bhima")
        assert ConfigStore(path).get("theme") == "bhima"

    def test_default(self, config):
        """Missing keys return the default."""
        assert config.get("theme") is None
        assert config.get("theme", "arjuna") == "arjuna"

    def test_corrupt_file(self, tmp_path):
        """A corrupt file reads as empty."""
        path = tmp_path / "config.json"
        path.write_text("{oops", encoding="utf-8")
        assert ConfigStore(path).get("theme") is None

    def test_not_an_object(self, tmp_path):
        """A JSON list reads as empty."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert ConfigStore(path).get("theme") is None

    def test_keeps_other_keys(self, tmp_path):
        """Writing one key keeps the rest of the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"other": 1}), encoding="utf-8")
        ConfigStore(path).set("theme", "nakula")
        assert json.loads(path.read_text(encoding="utf-8")) == {"other": 1, "theme": "nakula"}

    def test_write_failure(self, tmp_path):
        """Write errors raise StoreError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StoreError):
            ConfigStore(blocker / "config.json").set("theme", "bhima")


class TestBookmarkStore:
    """Test bookmark persistence."""

    def test_add_and_read(self, config):
        """Bookmarks append in order."""
        store = BookmarkStore(config)
        store.add(Bookmark(1, 4, "army"))
        store.add(Bookmark(2, 47, "", "Contents"))
        assert [(bm.chapter, bm.verse) for bm in store.get_all()] == [(1, 4), (2, 47)]

    def test_stored_shape(self, config):
        """Entries use the chapterTitle key."""
        BookmarkStore(config).add(Bookmark(2, 7, "note", "Contents"))
        saved = json.loads(config.path.read_text(encoding="utf-8"))
        assert saved[BOOKMARKS_KEY] == [
            {"chapter": 2, "verse": 7, "note": "note", "chapterTitle": "Contents"}
        ]

    def test_skips_malformed(self, config):
        """Entries that cannot be parsed are dropped."""
        config.set(BOOKMARKS_KEY, [{"chapter": "x"}, {"chapter": "3", "verse": "5"}])
        bookmarks = BookmarkStore(config).get_all()
        assert bookmarks == [Bookmark(3, 5)]

    def test_persist_replaces(self, config):
        """persist overwrites the list."""
        store = BookmarkStore(config)
        store.add(Bookmark(1, 1))
        store.persist([Bookmark(5, 5)])
        assert store.get_all() == [Bookmark(5, 5)]
