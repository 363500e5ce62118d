"""Modal box for search, bookmarks, themes, help and prompts."""

from typing import List, Optional, TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import OptionList, Static

from geeta_tui.overlays import OverlayState, Prompt
from geeta_tui.widgets.prompt_input import PromptInput

if TYPE_CHECKING:
    from geeta_tui.themes import Palette


class OverlayList(OptionList):
    """Entry list of a list overlay; keys come from the app."""

    can_focus = False


class OverlayBox(Widget):
    """Draws whatever overlay state the reader pushes.

    The box stays composed and is shown or hidden with ``display``.
    """

    DEFAULT_CSS = """
    OverlayBox {
        layer: overlay;
        dock: top;
        width: 100%;
        height: 100%;
        align: center middle;
        background: $background 50%;
    }

    OverlayBox > #overlay-frame {
        width: 80%;
        max-width: 100;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: round $primary;
        border-title-align: left;
        padding: 0 1;
    }

    OverlayBox .overlay-body {
        height: auto;
    }

    OverlayBox .overlay-list {
        height: auto;
        max-height: 20;
    }

    OverlayBox .overlay-hint {
        height: 1;
        color: $text-muted;
    }
    """

    class ItemSelected(Message):
        """Message sent when a list entry is clicked."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._items: List[str] = []
        self._prompt: Optional[Prompt] = None

    def compose(self) -> ComposeResult:
        with Vertical(id="overlay-frame"):
            yield Static("", classes="overlay-body", id="overlay-body")
            yield OverlayList(classes="overlay-list", id="overlay-list")
            yield PromptInput(id="overlay-prompt")
            yield Static("", classes="overlay-hint", id="overlay-hint")

    def show_state(self, state: OverlayState) -> None:
        """Show the overlay described by ``state``."""
        frame = self.query_one("#overlay-frame", Vertical)
        frame.border_title = state.title

        body = self.query_one("#overlay-body", Static)
        body.update(state.body)
        body.display = bool(state.body)

        lst = self.query_one("#overlay-list", OverlayList)
        if state.items != self._items:
            self._items = list(state.items)
            lst.clear_options()
            lst.add_options(self._items)
        if self._items:
            lst.highlighted = state.cursor
        lst.display = bool(self._items)

        hint = self.query_one("#overlay-hint", Static)
        hint.update(state.hint)
        hint.display = bool(state.hint) and state.prompt is None

        prompt = self.query_one("#overlay-prompt", PromptInput)
        if state.prompt is not self._prompt:
            self._prompt = state.prompt
            if state.prompt is None:
                self.screen.set_focus(None)
            else:
                prompt.reset(state.prompt)
                prompt.focus()
        prompt.display = state.prompt is not None

        self.display = True

    def hide_state(self) -> None:
        """Hide the overlay and forget its contents."""
        self.display = False
        self._items = []
        self._prompt = None
        self.query_one("#overlay-list", OverlayList).clear_options()
        self.screen.set_focus(None)

    def set_palette(self, palette: "Palette") -> None:
        """Recolor the box."""
        frame = self.query_one("#overlay-frame", Vertical)
        frame.styles.border = ("round", palette.highlight)
        frame.styles.border_title_color = palette.highlight
        frame.styles.background = palette.bg
        frame.styles.color = palette.fg

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Forward clicks on list entries."""
        event.stop()
        self.post_message(self.ItemSelected(event.option_index))
