"""Inbox table display component."""

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tmpmail.core.models import MessageSummary
from tmpmail.utils.console import get_console


class MessageTable:
    """Reusable message summary table.

    Used by: inbox listing.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def display(
        self,
        messages: List[MessageSummary],
        title: str = "Inbox",
        show_date: bool = True,
    ) -> None:
        """Display message summaries as a table, in the order given.

        Cells are plain Text so that subjects containing brackets are not
        read as rich markup.
        """
        table = Table(title=Text(title, style="bold"), title_justify="left")

        table.add_column("ID", style="cyan", justify="right", no_wrap=True)
        table.add_column("From", style="magenta", min_width=20)
        table.add_column("Subject", style="green", min_width=20)
        if show_date:
            table.add_column("Date", style="yellow", justify="right")

        for message in messages:
            row = [
                Text(str(message.id)),
                Text(self._truncate(message.sender or "Unknown", 40)),
                Text(self._truncate(message.subject or "No Subject", 60)),
            ]
            if show_date:
                row.append(Text(message.date))
            table.add_row(*row)

        self.console.print(table)

    @staticmethod
    def _truncate(text: str, max_length: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."
