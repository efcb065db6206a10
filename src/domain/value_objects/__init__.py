"""Domain value objects.

Immutable objects defined by their attributes, not by identity.
"""

from src.domain.value_objects.address import Address

__all__ = ["Address"]
