"""Inbox display coordinator (uses shared UI components)."""

from typing import List, Optional

from rich.console import Console

from tmpmail.core.models import EmailAddress, MessageSummary
from tmpmail.ui.components import MessageTable, StatusMessage

NO_MAIL_MESSAGE = "No new mail"


class InboxDisplay:
    """Coordinates display for the inbox feature."""

    def __init__(self, console: Optional[Console] = None):
        self.table = MessageTable(console)
        self.message = StatusMessage(console)

    def display(self, address: EmailAddress, messages: List[MessageSummary]) -> None:
        """Show the inbox, or a distinct notice when it is empty."""
        title = f"[ Inbox for {address} ]"

        if not messages:
            self.message.plain(f"{title}\n")
            self.message.plain(NO_MAIL_MESSAGE)
            return

        self.table.display(messages, title=title)
