"""Custom address validation."""

import re
from typing import Iterable

from tmpmail.core.models import EmailAddress
from tmpmail.utils.errors import InvalidAddressError, ValidationError
from tmpmail.utils.logging import get_logger

logger = get_logger(__name__)

RESERVED_USERNAMES = ("abuse", "webmaster", "contact", "postmaster", "hostmaster", "admin")


class AddressValidator:
    """Validate user-supplied addresses against the provider's rules"""

    USERNAME_PATTERN = re.compile(r"^[a-z0-9]+$")
    BLACKLIST_PATTERN = re.compile("(" + "|".join(RESERVED_USERNAMES) + ")")

    @classmethod
    def is_blacklisted(cls, username: str) -> bool:
        """Check whether a username contains a reserved name"""
        return bool(cls.BLACKLIST_PATTERN.search(username.casefold()))

    @staticmethod
    def address_pattern(domains: Iterable[str]) -> str:
        """The pattern shown to the user when an address is rejected"""
        return "[a-z0-9]+@(" + "|".join(domains) + ")"

    @classmethod
    def check_username(cls, username: str) -> str:
        """Case-fold and validate a username, returning the folded form.

        Raises:
            ValidationError: If the username contains a reserved name.
            InvalidAddressError: If it has characters outside [a-z0-9].
        """
        folded = (username or "").strip().casefold()

        if cls.is_blacklisted(folded):
            logger.info(f"Rejected reserved username: {folded}")
            reserved = "\n".join(f"- {name}" for name in RESERVED_USERNAMES)
            raise ValidationError(
                "For security reasons, that username cannot be used. "
                f"Here are the blacklisted usernames:\n{reserved}",
                details={"username": folded},
            )

        if not cls.USERNAME_PATTERN.match(folded):
            raise InvalidAddressError(
                f"Provided email is invalid. Username must match {cls.USERNAME_PATTERN.pattern[1:-1]}",
                details={"username": folded},
            )

        return folded

    @classmethod
    def check_domain(cls, domain: str, domains: Iterable[str]) -> str:
        """Case-fold a domain and make sure the provider serves it.

        Raises:
            InvalidAddressError: If the domain is not in the fetched set.
        """
        known = [d.casefold() for d in domains]
        folded = (domain or "").strip().casefold()

        if folded not in known:
            raise InvalidAddressError(
                f"Provided email is invalid. Must match {cls.address_pattern(known)}",
                details={"domain": folded, "domains": known},
            )

        return folded

    @classmethod
    def validate(cls, username: str, domain: str, domains: Iterable[str]) -> EmailAddress:
        """Validate both parts and build the address.

        The blacklist is checked before the format so that reserved names
        are always reported as such.
        """
        known = list(domains)
        folded_username = cls.check_username(username)
        folded_domain = cls.check_domain(domain, known)
        return EmailAddress(username=folded_username, domain=folded_domain)
