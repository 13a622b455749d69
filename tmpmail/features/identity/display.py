"""Identity display helpers."""

from typing import List, Optional

from rich.console import Console

from tmpmail.core.models import EmailAddress
from tmpmail.ui.components import StatusMessage


class IdentityDisplay:
    """Prints the active address and the provider's domains."""

    def __init__(self, console: Optional[Console] = None):
        self.message = StatusMessage(console)

    def show_address(self, address: EmailAddress) -> None:
        self.message.plain(address.address)

    def show_domains(self, domains: List[str]) -> None:
        lines = "\n".join(f"- {domain}" for domain in domains)
        self.message.plain(f"List of available domains: \n{lines}")
