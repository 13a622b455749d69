"""Active identity management."""

import random
import string
from typing import List, Optional

from tmpmail.core.models import EmailAddress
from tmpmail.core.provider import ProviderClient
from tmpmail.core.session import SessionStore
from tmpmail.core.validation import AddressValidator
from tmpmail.utils.errors import InvalidAddressError
from tmpmail.utils.logging import get_logger, log_call

logger = get_logger(__name__)

USERNAME_LENGTH = 11
USERNAME_ALPHABET = string.ascii_lowercase + string.digits


class AddressManager:
    """Generates, validates and persists the single active address."""

    def __init__(
        self,
        provider: ProviderClient,
        store: SessionStore,
        rng: Optional[random.Random] = None,
    ):
        self.provider = provider
        self.store = store
        self.rng = rng or random.SystemRandom()

    def list_domains(self) -> List[str]:
        return self.provider.fetch_domains()

    def _random_username(self) -> str:
        return "".join(self.rng.choices(USERNAME_ALPHABET, k=USERNAME_LENGTH))

    def _random_domain(self, domains: List[str]) -> str:
        return self.rng.choice(domains)

    @log_call
    def ensure_identity(self) -> EmailAddress:
        """Return the stored address, generating and storing one if absent."""
        address = self.store.read_address()
        if address is not None:
            return address

        logger.info("No active address, generating one")
        return self.generate()

    @log_call
    def generate(
        self,
        custom_username: Optional[str] = None,
        custom_domain: Optional[str] = None,
    ) -> EmailAddress:
        """Create a new address and make it the active one.

        Parts left out are chosen at random; parts given are validated
        against the reserved names and the provider's current domains.
        The previous address is overwritten only once validation passes.
        """
        domains = self.provider.fetch_domains()

        if custom_username is None:
            username = self._random_username()
        else:
            username = AddressValidator.check_username(custom_username)

        if custom_domain is None:
            domain = self._random_domain(domains)
        else:
            domain = AddressValidator.check_domain(custom_domain, domains)

        address = EmailAddress(username=username, domain=domain)
        self.store.write_address(address)
        logger.info(f"Active address is now {address}")

        return address

    def generate_from_string(self, custom_address: str) -> EmailAddress:
        """Validate a full 'username@domain' string and make it active."""
        try:
            parsed = EmailAddress.parse(custom_address)
        except ValueError as e:
            # Reserved names are reported before format problems
            AddressValidator.check_username((custom_address or "").partition("@")[0])
            domains = self.provider.fetch_domains()
            raise InvalidAddressError(
                f"Provided email is invalid. Must match {AddressValidator.address_pattern(domains)}",
                details={"address": custom_address},
            ) from e

        return self.generate(custom_username=parsed.username, custom_domain=parsed.domain)
