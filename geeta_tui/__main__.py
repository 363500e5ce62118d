"""Entry point for geeta-tui."""

import logging
import os
import sys

from rich.console import Console
from textual.logging import TextualHandler

from geeta_tui.app import GeetaApp
from geeta_tui.backend import LibraryError, load_chapters, resolve_data_dir

LOG_LEVEL_ENV = "GEETA_TUI_LOG_LEVEL"

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Send log records to the Textual devtools console."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, handlers=[TextualHandler()])


def main() -> int:
    """Run the geeta-tui application."""
    _configure_logging()
    console = Console(stderr=True)

    data_dir = resolve_data_dir()
    try:
        chapters = load_chapters(data_dir)
    except LibraryError as e:
        console.print(f"[bold red]Error:[/] {e}")
        return 1

    if not chapters:
        console.print(f"[bold red]Error:[/] no chapters found in {data_dir}")
        return 1

    logger.info("Starting with %d chapters", len(chapters))
    app = GeetaApp(chapters)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
