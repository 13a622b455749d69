"""Mailbox provider access.

Public API:
    ProviderClient -> domain list, inbox, message detail, attachment links
"""

from .client import NOT_FOUND_SENTINEL, ProviderClient

__all__ = ["NOT_FOUND_SENTINEL", "ProviderClient"]
