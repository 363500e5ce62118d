"""Shared fixtures: an in-memory surface, a manual timer queue and a corpus."""

import random
from typing import Dict, List, Optional

import pytest
from rich.text import Text

from geeta_tui.config import ConfigStore
from geeta_tui.data.types import Chapter, Verse
from geeta_tui.reader import Reader
from geeta_tui.surface import PanelId

CHAPTER_TITLES = [
    "Observing the Armies on the Battlefield of Kurukshetra",
    "Contents of the Gita Summarized",
    "Karma-yoga",
    "Transcendental Knowledge",
    "Karma-yoga in Krishna Consciousness",
    "Dhyana-yoga",
    "Knowledge of the Absolute",
    "Attaining the Supreme",
    "The Most Confidential Knowledge",
    "The Opulence of the Absolute",
    "The Universal Form",
    "Devotional Service",
    "Nature, the Enjoyer and Consciousness",
    "The Three Modes of Material Nature",
    "The Yoga of the Supreme Person",
    "The Divine and Demoniac Natures",
    "The Divisions of Faith",
    "Conclusion: The Perfection of Renunciation",
]

VERSE_COUNTS = {1: 47, 2: 5}


class FakeSurface:
    """Records every call the reader core makes."""

    def __init__(self) -> None:
        self.chrome: Dict[PanelId, tuple] = {}
        self.items: Dict[PanelId, List[str]] = {}
        self.cursors: Dict[PanelId, int] = {}
        self.frames: List[tuple] = []
        self.content: Optional[Text] = None
        self.scrolled: List[int] = []
        self.status: Optional[str] = None
        self.palette = None
        self.overlay = None
        self.widths = {PanelId.CHAPTERS: 30, PanelId.VERSES: 30, PanelId.CONTENT: 84}
        self.flushes = 0

    @property
    def content_lines(self) -> List[str]:
        return self.content.plain.split("\n") if self.content is not None else []

    def set_panel_chrome(self, panel, label, color, bold):
        self.chrome[panel] = (label, color, bold)

    def set_items(self, panel, items):
        self.items[panel] = list(items)

    def set_item_text(self, panel, index, text):
        self.items[panel][index] = text
        self.frames.append((index, text))

    def set_cursor(self, panel, index):
        self.cursors[panel] = index

    def set_content(self, text):
        self.content = text

    def scroll_content(self, lines):
        self.scrolled.append(lines)

    def set_status(self, message):
        self.status = message

    def set_chrome_colors(self, palette):
        self.palette = palette

    def show_overlay(self, state):
        self.overlay = state

    def hide_overlay(self):
        self.overlay = None

    def panel_width(self, panel):
        return self.widths[panel]

    def flush(self):
        self.flushes += 1


class FakeTimer:
    """One-shot timer fired by hand."""

    def __init__(self, delay, callback) -> None:
        self.delay = delay
        self.callback = callback
        self.stopped = False
        self.fired = False

    def stop(self) -> None:
        self.stopped = True


class ManualScheduler:
    """Stand-in for App.set_timer that never fires on its own."""

    def __init__(self) -> None:
        self.timers: List[FakeTimer] = []

    def __call__(self, delay, callback):
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.stopped and not t.fired]

    @property
    def next_delay(self) -> Optional[float]:
        pending = self.pending
        return pending[0].delay if pending else None

    def fire(self) -> FakeTimer:
        """Run the single pending timer."""
        pending = self.pending
        assert len(pending) == 1, f"expected one pending timer, got {len(pending)}"
        timer = pending[0]
        timer.fired = True
        timer.callback()
        return timer


def make_chapter(chapter_id: int, title: str, count: int) -> Chapter:
    verses = []
    for n in range(1, count + 1):
        verses.append(Verse(number=n, text=f"Text {chapter_id}.{n}"))
    return Chapter(id=chapter_id, title=title, description="", verses=tuple(verses))


def make_corpus() -> List[Chapter]:
    chapters = []
    for chapter_id, title in enumerate(CHAPTER_TITLES, start=1):
        chapters.append(make_chapter(chapter_id, title, VERSE_COUNTS.get(chapter_id, 3)))

    first = list(chapters[0].verses)
    first[3] = Verse(
        number=4,
        text="Here in this army are many heroic bowmen equal in fighting to Bhima and Arjuna.",
    )
    chapters[0] = Chapter(id=1, title=chapters[0].title, verses=tuple(first))

    second = list(chapters[1].verses)
    second[0] = Verse(
        number=1,
        text="Sanjaya said: Seeing Arjuna full of compassion, Madhusudana spoke.",
        transliteration="sanjaya uvaca tam tatha krpayavistam",
    )
    second[1] = Verse(number=2, text="Text 2.2", purport="Purport of 2.2")
    chapters[1] = Chapter(id=2, title=chapters[1].title, verses=tuple(second))
    return chapters


@pytest.fixture
def chapters():
    return make_corpus()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def config(tmp_path):
    return ConfigStore(tmp_path / "config.json")


@pytest.fixture
def reader(chapters, surface, scheduler, config):
    reader = Reader(chapters, surface, scheduler, config, rng=random.Random(7))
    reader.start()
    return reader
