"""Textual widgets for geeta-tui."""

from geeta_tui.widgets.content_view import ContentView
from geeta_tui.widgets.overlay_box import OverlayBox
from geeta_tui.widgets.panel_list import PanelList
from geeta_tui.widgets.prompt_input import PromptInput
from geeta_tui.widgets.status_bar import StatusBar

__all__ = [
    "ContentView",
    "OverlayBox",
    "PanelList",
    "PromptInput",
    "StatusBar",
]
