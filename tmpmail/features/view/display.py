"""Hands rendered messages to the terminal or the configured browser."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from tmpmail.core.models import RenderedDocument
from tmpmail.ui.components import StatusMessage
from tmpmail.utils.system import open_in_browser


class MessageDisplay:
    """Coordinates display for the view feature."""

    def __init__(self, browser: str, console: Optional[Console] = None):
        self.browser = browser
        self.message = StatusMessage(console)

    def show(self, document: RenderedDocument, document_path: Path) -> None:
        """Print text documents; open HTML documents from the cache file."""
        if document.is_text:
            self.message.plain(document.content)
            return

        open_in_browser(self.browser, document_path)

    def show_markup(self, markup: str) -> None:
        """Print raw body markup."""
        self.message.plain(markup)
