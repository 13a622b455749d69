"""Simple status messages (no panels)."""

from typing import Optional

from rich.console import Console

from tmpmail.utils.console import get_console, print_plain


class StatusMessage:
    """Simple status messages without panels.

    Used by: features that need quick inline feedback.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def plain(self, message: str) -> None:
        """Print message verbatim, for output other tools may parse."""
        print_plain(message, self.console)
