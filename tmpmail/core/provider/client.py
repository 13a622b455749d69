"""HTTP client for the 1secmail-compatible mailbox API."""

from typing import Any, List, Optional

import httpx

from tmpmail.core.models import (
    EmailAddress,
    MessageDetail,
    MessageSummary,
    ShortenedUrl,
)
from tmpmail.utils.config import AppConfig
from tmpmail.utils.errors import NotFoundError, ProviderError
from tmpmail.utils.logging import get_logger, log_call

logger = get_logger(__name__)

NOT_FOUND_SENTINEL = "Message not found"


class ProviderClient:
    """Read-only wrapper around the provider's query-parameter API.

    Holds no state besides the HTTP client; every call is a fresh GET.
    """

    def __init__(self, config: AppConfig, http_client: Optional[httpx.Client] = None):
        self.base_url = config.provider_base_url
        self.shortener_url = config.shortener_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=config.network_timeout, follow_redirects=True
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ProviderClient":
        return self

    def __exit__(self, exc_type, exc_value, exc_tb) -> None:
        self.close()

    ## Transport

    def _get(self, action: str, **params: Any) -> httpx.Response:
        """Issue a GET for an API action and return the raw response."""
        query = {"action": action, **params}

        try:
            response = self._client.get(self.base_url, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Mail provider returned HTTP {e.response.status_code} for {action}",
                details={"action": action, "status": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(
                f"Failed to reach mail provider for {action}: {e}",
                details={"action": action},
            ) from e

        logger.debug(f"{action} -> HTTP {response.status_code}")
        return response

    @staticmethod
    def _is_not_found(response: httpx.Response) -> bool:
        return response.text.strip() == NOT_FOUND_SENTINEL

    @staticmethod
    def _json(response: httpx.Response, action: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                f"Mail provider sent an unreadable response for {action}",
                details={"action": action, "body": response.text[:200]},
            ) from e

    ## API actions

    @log_call
    def fetch_domains(self) -> List[str]:
        """Fetch the domains the provider currently serves.

        Domains keep the provider's order with duplicates removed. An empty
        list is an error: no address can be generated without a domain.
        """
        data = self._json(self._get("getDomainList"), "getDomainList")

        if not isinstance(data, list):
            raise ProviderError(
                "Mail provider sent a malformed domain list",
                details={"action": "getDomainList"},
            )

        domains = list(dict.fromkeys(str(d).strip() for d in data if str(d).strip()))

        if not domains:
            raise ProviderError(
                "1secmail API error for getting domains list",
                details={"action": "getDomainList"},
            )

        return domains

    @log_call
    def fetch_inbox(self, address: EmailAddress) -> List[MessageSummary]:
        """Fetch message summaries for an address, in provider order."""
        response = self._get("getMessages", login=address.username, domain=address.domain)

        if self._is_not_found(response):
            return []

        data = self._json(response, "getMessages")
        if not isinstance(data, list):
            raise ProviderError(
                "Mail provider sent a malformed inbox listing",
                details={"action": "getMessages"},
            )

        try:
            return [MessageSummary.from_payload(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(
                f"Mail provider sent a malformed inbox entry: {e}",
                details={"action": "getMessages"},
            ) from e

    @log_call
    def fetch_message(self, address: EmailAddress, message_id: int) -> MessageDetail:
        """Fetch one message by id.

        Raises:
            NotFoundError: If the provider answers with its not-found text.
            ProviderError: On transport or parse failure.
        """
        response = self._get(
            "readMessage",
            login=address.username,
            domain=address.domain,
            id=message_id,
        )

        if self._is_not_found(response):
            raise NotFoundError(
                NOT_FOUND_SENTINEL,
                details={"id": message_id, "address": address.address},
            )

        data = self._json(response, "readMessage")

        try:
            if not isinstance(data, dict):
                raise TypeError("message payload is not an object")
            return MessageDetail.from_payload(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(
                f"Mail provider sent a malformed message: {e}",
                details={"action": "readMessage", "id": message_id},
            ) from e

    def download_link(self, address: EmailAddress, message_id: int, filename: str) -> str:
        """Build the download URL for one attachment."""
        url = httpx.URL(
            self.base_url,
            params={
                "action": "download",
                "login": address.username,
                "domain": address.domain,
                "id": message_id,
                "file": filename,
            },
        )
        return str(url)

    def shorten_url(self, long_url: str) -> ShortenedUrl:
        """Shorten a link, falling back to the original on any failure."""
        try:
            response = self._client.post(self.shortener_url, data={"url": long_url})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"URL shortening failed, using the full link: {e}")
            return ShortenedUrl(url=long_url, shortened=False)

        short = response.text.strip()
        if not short.startswith(("http://", "https://")):
            logger.warning(f"URL shortener returned an unexpected body: {short[:80]!r}")
            return ShortenedUrl(url=long_url, shortened=False)

        return ShortenedUrl(url=short, shortened=True)
