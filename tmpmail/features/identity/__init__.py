"""Identity feature.

Public API:
    AddressManager.ensure_identity() -> Stored or freshly generated address
    AddressManager.generate(username, domain) -> New validated address
    IdentityDisplay -> Print address and domain list
"""

from .display import IdentityDisplay
from .manager import USERNAME_ALPHABET, USERNAME_LENGTH, AddressManager

__all__ = [
    "AddressManager",
    "IdentityDisplay",
    "USERNAME_ALPHABET",
    "USERNAME_LENGTH",
]
