"""Email identity value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailAddress:
    """A disposable address, kept as its structured parts.

    The composed 'username@domain' form is only produced for display and
    for the provider's query parameters.
    """

    username: str
    domain: str

    def __post_init__(self):
        if not self.username or not self.domain:
            raise ValueError("Email address needs both a username and a domain")

    @property
    def address(self) -> str:
        return f"{self.username}@{self.domain}"

    def __str__(self) -> str:
        return self.address

    @classmethod
    def parse(cls, value: str) -> "EmailAddress":
        """Create EmailAddress from its 'username@domain' form.

        Raises:
            ValueError: If the string does not hold exactly one '@' with
                text on both sides.
        """
        text = (value or "").strip()
        username, separator, domain = text.partition("@")

        if not separator or "@" in domain or not username or not domain:
            raise ValueError(f"Invalid email address: {value!r}")

        return cls(username=username, domain=domain)
