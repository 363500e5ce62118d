"""Tests for corpus loading and search."""

import json

import pytest

from geeta_tui.backend import LibraryError, SearchIndex, load_chapters, resolve_data_dir
from geeta_tui.backend.library import DATA_DIR_ENV


def write_chapter(directory, name, data):
    (directory / name).write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def corpus(tmp_path):
    write_chapter(
        tmp_path,
        "chapter10.json",
        {
            "id": 10,
            "title": "The Opulence of the Absolute",
            "verses": [{"id": "VERSE 1", "translation": "Ten one."}],
        },
    )
    write_chapter(
        tmp_path,
        "chapter2.json",
        {
            "id": "2",
            "title": "Contents of the Gita Summarized",
            "description": "Arjuna submits",
            "verses": [
                {
                    "id": "VERSE 1",
                    "translation": "Sanjaya said...",
                    "transliteration": "sanjaya uvaca",
                    "purport": "Material compassion.",
                },
                {"id": "TEXTS 2-3", "transliteration": "sri-bhagavan uvaca"},
                "not a verse",
            ],
        },
    )
    write_chapter(tmp_path, "empty.json", {"id": 3, "title": "Empty", "verses": []})
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


class TestLoadChapters:
    """Test reading chapter files."""

    def test_sorted_by_id(self, corpus):
        """Chapters come back in numeric order."""
        chapters = load_chapters(corpus)
        assert [ch.id for ch in chapters] == [2, 10]

    def test_skips_empty_and_broken(self, corpus):
        """Files without verses or with bad JSON are dropped."""
        chapters = load_chapters(corpus)
        assert "Empty" not in [ch.title for ch in chapters]

    def test_verse_fields(self, corpus):
        """Verse numbers, text fallback and purport."""
        chapter = load_chapters(corpus)[0]
        assert chapter.description == "Arjuna submits"
        assert [v.number for v in chapter.verses] == [1, 2]
        assert chapter.verses[0].purport == "Material compassion."
        assert chapter.verses[1].text == "sri-bhagavan uvaca"

    def test_missing_directory(self, tmp_path):
        """A missing directory is an error."""
        with pytest.raises(LibraryError):
            load_chapters(tmp_path / "nowhere")


class TestSearchIndex:
    """Test substring search."""

    def test_case_insensitive(self, corpus):
        """Queries ignore case."""
        index = SearchIndex(load_chapters(corpus))
        hits = index.query("SANJAYA")
        assert [(h.chapter, h.verse) for h in hits] == [(2, 1)]
        assert hits[0].chapter_title == "Contents of the Gita Summarized"

    def test_corpus_order(self, corpus):
        """Hits follow chapter then verse order."""
        index = SearchIndex(load_chapters(corpus))
        hits = index.query("uvaca")
        assert [(h.chapter, h.verse) for h in hits] == [(2, 1), (2, 2)]

    def test_blank_query(self, corpus):
        """Blank queries match nothing."""
        index = SearchIndex(load_chapters(corpus))
        assert index.query("  ") == []

    def test_no_match(self, corpus):
        """Unknown words give an empty list."""
        index = SearchIndex(load_chapters(corpus))
        assert index.query("xyzzy") == []


class TestResolveDataDir:
    """Test corpus directory lookup."""

    def test_environment_wins(self, tmp_path):
        """The environment variable takes precedence."""
        (tmp_path / "geeta").mkdir()
        path = resolve_data_dir({DATA_DIR_ENV: "/srv/gita"}, cwd=tmp_path)
        assert str(path) == "/srv/gita"

    def test_working_directory(self, tmp_path):
        """./geeta is used when present."""
        (tmp_path / "geeta").mkdir()
        assert resolve_data_dir({}, cwd=tmp_path) == tmp_path / "geeta"

    def test_missing_local_directory(self, tmp_path):
        """A missing ./geeta is still returned so loading reports it."""
        path = resolve_data_dir({}, cwd=tmp_path)
        assert path == tmp_path / "geeta"
        with pytest.raises(LibraryError, match="Corpus directory not found"):
            load_chapters(path)
