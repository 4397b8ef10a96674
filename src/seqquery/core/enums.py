"""Enumerations shared across the functional modules."""

from enum import Enum, IntEnum

__all__ = [
    "Ordering",
    "LookupStatus",
]


class Ordering(IntEnum):
    """Result of a three-way comparison.

    The members are plain ``int`` values so they can be compared against
    ``0`` the same way a ``cmp``-style result would be.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


class LookupStatus(str, Enum):
    """Outcome of a keyed lookup followed by a parse."""

    FOUND = "found"
    MISSING = "missing"
    MALFORMED = "malformed"
