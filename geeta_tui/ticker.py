"""Marquee scrolling for chapter labels that are wider than their panel."""

import logging
import re
from enum import Enum
from typing import Any, Callable, Optional, Sequence

START_DELAY = 1.0
TICK_DELAY = 0.15
PAUSE_DELAY = 2.0
# Border plus padding of the chapters panel
LABEL_MARGIN = 4

_LABEL = re.compile(r"^\s*(\d+\.\s+)(.+)$")

logger = logging.getLogger(__name__)

# schedule(delay_seconds, callback) -> handle with a stop() method
Scheduler = Callable[[float, Callable[[], None]], Any]


class TickerState(Enum):
    """Timer state of the ticker."""

    IDLE = "idle"  # no timer pending
    SCHEDULED = "scheduled"  # waiting out the start delay
    RUNNING = "running"  # scrolling, next tick or pause pending


class AutoScrollTicker:
    """Scrolls the highlighted chapter label back and forth.

    The ``"<number>. "`` prefix stays put and only the title moves. At
    either end the direction flips and the next tick waits
    ``PAUSE_DELAY``. At most one timer is pending at any time: every
    reschedule, highlight change and ``stop`` cancels it first.
    """

    def __init__(
        self,
        schedule: Scheduler,
        width: Callable[[], int],
        on_frame: Callable[[int, str], None],
    ) -> None:
        """Initialize the ticker.

        Args:
            schedule: Starts a one-shot timer and returns a stoppable handle
            width: Returns the outer width of the chapters panel
            on_frame: Receives (label index, text to display)
        """
        self._schedule = schedule
        self._width = width
        self._on_frame = on_frame
        self._labels: list[str] = []
        self._index = 0
        self._timer: Any = None
        self._active = False
        self._scrolled = False
        self.state = TickerState.IDLE
        self.offset = 0
        self.direction = 1

    @property
    def active(self) -> bool:
        """Check if the chapters panel is focused."""
        return self._active

    def set_labels(self, labels: Sequence[str]) -> None:
        """Set the full chapter labels."""
        self._restore()
        self._labels = list(labels)
        self._reset()

    def start(self, index: int) -> None:
        """Begin scrolling ``index`` after the start delay (panel focused)."""
        self._active = True
        self._index = index
        self._reset()
        self._arm()

    def stop(self) -> None:
        """Cancel any timer and show the full label (blur)."""
        self._active = False
        self._cancel()
        self._restore()
        self._reset()
        self.state = TickerState.IDLE

    def cancel(self) -> None:
        """Cancel any timer without drawing (shutdown)."""
        self._active = False
        self._cancel()
        self._scrolled = False
        self._reset()
        self.state = TickerState.IDLE

    def selection_changed(self, index: int) -> None:
        """Restart from offset 0 for a newly highlighted label."""
        self._cancel()
        self._restore()
        self._index = index
        self._reset()
        if self._active:
            self._arm()
        else:
            self.state = TickerState.IDLE

    def tick(self) -> None:
        """Advance the marquee by one step."""
        self._timer = None
        parts = self._split()
        if parts is None:
            # Label fits now (e.g. after a resize)
            self._restore()
            self._reset()
            self.state = TickerState.IDLE
            return

        prefix, title, title_width = parts
        max_offset = len(title) - title_width
        self.state = TickerState.RUNNING

        self.offset += self.direction
        delay = TICK_DELAY
        if self.offset >= max_offset:
            self.offset = max_offset
            self.direction = -1
            delay = PAUSE_DELAY
        elif self.offset <= 0:
            self.offset = 0
            self.direction = 1
            delay = PAUSE_DELAY

        self._scrolled = True
        self._on_frame(self._index, prefix + title[self.offset : self.offset + title_width])
        self._set_timer(delay)

    def _split(self):
        """Return (prefix, title, title width) if the label must scroll."""
        if not 0 <= self._index < len(self._labels):
            return None
        label = self._labels[self._index]
        available = self._width() - LABEL_MARGIN
        if len(label) <= available:
            return None

        match = _LABEL.match(label)
        if match:
            prefix, title = match.group(1), match.group(2)
        else:
            prefix, title = "", label
        title_width = available - len(prefix)
        if title_width <= 0 or len(title) <= title_width:
            return None
        return prefix, title, title_width

    def _arm(self) -> None:
        """Schedule the first tick, unless the label fits."""
        self._cancel()
        if self._split() is None:
            self.state = TickerState.IDLE
            return
        self._set_timer(START_DELAY)
        self.state = TickerState.SCHEDULED

    def _set_timer(self, delay: float) -> None:
        self._cancel()
        self._timer = self._schedule(delay, self.tick)

    def _cancel(self) -> None:
        timer = self._timer
        self._timer = None
        if timer is not None:
            timer.stop()

    def _restore(self) -> None:
        """Put the full label back if it was scrolled."""
        if self._scrolled and 0 <= self._index < len(self._labels):
            self._on_frame(self._index, self._labels[self._index])
        self._scrolled = False

    def _reset(self) -> None:
        self.offset = 0
        self.direction = 1
