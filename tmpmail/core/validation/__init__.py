"""Domain validation utilities."""

from .address import AddressValidator

__all__ = ['AddressValidator']
