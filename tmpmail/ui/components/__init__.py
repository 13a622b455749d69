"""Reusable UI components for mailbox display."""

from .messages import StatusMessage
from .tables import MessageTable

__all__ = [
    "MessageTable",
    "StatusMessage",
]
