"""Message viewing feature.

Public API:
    MessageRenderer.render(address, detail, fmt) -> RenderedDocument
    MessageRenderer.view(address, message_id, fmt) -> Fetch, render, cache
    MessageDisplay.show(document, path) -> stdout or browser
"""

from .display import MessageDisplay
from .renderer import MessageRenderer

__all__ = [
    "MessageDisplay",
    "MessageRenderer",
]
