"""One-line text prompt widget."""

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from geeta_tui.overlays import Prompt


class PromptInput(Widget):
    """Titled text prompt for search terms and bookmark notes."""

    DEFAULT_CSS = """
    PromptInput {
        height: auto;
        layout: vertical;
    }

    PromptInput > .prompt-title {
        height: 1;
        text-style: bold;
    }

    PromptInput > .prompt-message {
        height: 1;
        color: $text-muted;
    }

    PromptInput > .prompt-text {
        height: 3;
    }
    """

    class Submitted(Message):
        """Message sent when the prompt is submitted."""

        def __init__(self, value: str) -> None:
            self.value = value
            super().__init__()

    class Cancelled(Message):
        """Message sent when the prompt is cancelled."""

        pass

    def compose(self) -> ComposeResult:
        yield Static("", classes="prompt-title", id="prompt-title")
        yield Static("", classes="prompt-message", id="prompt-message")
        yield Input(placeholder="", classes="prompt-text", id="prompt-text")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#prompt-text", Input)

    def reset(self, prompt: Prompt) -> None:
        """Show a new prompt with its default value.

        Args:
            prompt: Title, message and initial text
        """
        self.query_one("#prompt-title", Static).update(prompt.title)
        self.query_one("#prompt-message", Static).update(prompt.message)
        self.input_widget.value = prompt.default
        self.input_widget.cursor_position = len(prompt.default)

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        self.post_message(self.Submitted(self.input_widget.value))

    def on_key(self, event) -> None:
        """Handle Escape."""
        if event.key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.Cancelled())
