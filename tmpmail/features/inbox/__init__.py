"""Inbox feature.

Public API:
    InboxService.list(address) -> Message summaries in provider order
    InboxService.most_recent_id(address) -> Id of the last listed message
    InboxDisplay -> Table or "No new mail"
"""

from .display import NO_MAIL_MESSAGE, InboxDisplay
from .service import InboxService

__all__ = [
    "InboxDisplay",
    "InboxService",
    "NO_MAIL_MESSAGE",
]
