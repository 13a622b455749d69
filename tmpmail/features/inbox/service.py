"""Inbox listing for the active address."""

from typing import List, Optional

from tmpmail.core.models import EmailAddress, MessageSummary
from tmpmail.core.provider import ProviderClient
from tmpmail.utils.logging import get_logger, log_call

logger = get_logger(__name__)


class InboxService:
    """Lists messages in the provider's native order."""

    def __init__(self, provider: ProviderClient):
        self.provider = provider

    @log_call
    def list(self, address: EmailAddress) -> List[MessageSummary]:
        messages = self.provider.fetch_inbox(address)
        logger.debug(f"{len(messages)} message(s) for {address}")
        return messages

    def most_recent_id(self, address: EmailAddress) -> Optional[int]:
        """Id of the last listed message, or None for an empty inbox.

        "Most recent" is positional: the last row of the provider's listing.
        No timestamp comparison is made.
        """
        messages = self.list(address)
        if not messages:
            return None
        return messages[-1].id
