"""Bordered list panel for the chapter and verse pickers."""

from typing import List

from textual.message import Message
from textual.widgets import OptionList

from geeta_tui.surface import PanelId


class PanelList(OptionList):
    """Chapter or verse picker.

    Keys are routed by the app, so the list never takes focus itself. It
    only reports mouse selections.
    """

    DEFAULT_CSS = """
    PanelList {
        height: 1fr;
        border: round white;
        border-title-align: left;
        padding: 0 1;
        scrollbar-size-vertical: 1;
    }
    """

    can_focus = False

    class EntrySelected(Message):
        """Message sent when an entry is clicked."""

        def __init__(self, panel: PanelId, index: int) -> None:
            self.panel = panel
            self.index = index
            super().__init__()

    def __init__(self, panel: PanelId, **kwargs) -> None:
        super().__init__(**kwargs)
        self.panel = panel

    def set_entries(self, items: List[str]) -> None:
        """Replace all entries."""
        self.clear_options()
        self.add_options(items)

    def set_entry_text(self, index: int, text: str) -> None:
        """Replace the text of one entry."""
        if 0 <= index < self.option_count:
            self.replace_option_prompt_at_index(index, text)

    def set_cursor(self, index: int) -> None:
        """Highlight one entry and scroll it into view."""
        if 0 <= index < self.option_count:
            self.highlighted = index

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Forward clicks as panel selections."""
        event.stop()
        self.post_message(self.EntrySelected(self.panel, event.option_index))
