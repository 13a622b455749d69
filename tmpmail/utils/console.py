"""Centralised console management module"""

from typing import Optional

from rich.console import Console
from rich.text import Text

_console: Optional[Console] = None
_error_console: Optional[Console] = None


def get_console() -> Console:
    """Get the shared Console instance"""
    global _console

    if _console is None:
        _console = Console()

    return _console

def get_error_console() -> Console:
    """Get the shared Console writing to stderr"""
    global _error_console

    if _error_console is None:
        _error_console = Console(stderr=True)

    return _error_console

def reset_console() -> None:
    """Reset the shared Console instances (for testing purposes)"""
    global _console, _error_console
    _console = None
    _error_console = None


## Convenience Print Functions

# Messages are wrapped in Text so that brackets in addresses or regex
# patterns are never parsed as rich markup.

def print_error(message: str, console: Optional[Console] = None) -> None:
    """Print an error message to stderr"""
    output_console = console or get_error_console()
    output_console.print(Text(f"Error: {message}", style="red"))

def print_plain(text: str, console: Optional[Console] = None) -> None:
    """Print text verbatim, without markup or highlighting"""
    output_console = console or get_console()
    output_console.print(text, markup=False, highlight=False, soft_wrap=True)
