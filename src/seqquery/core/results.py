"""Result containers returned by the lookup helpers.

Lookups report absence through these values instead of raising. Both are
named tuples, so callers can unpack them (``found, value = try_get(...)``)
or compare them against plain tuples.
"""

from typing import Any, NamedTuple

from .enums import LookupStatus

__all__ = [
    "Lookup",
    "ParseResult",
]


class Lookup(NamedTuple):
    """Whether a value was found, and the value (or a zero value)."""

    found: bool
    value: Any = None


class ParseResult(NamedTuple):
    """A lookup followed by a parse.

    Attributes:
        found: ``True`` only when the key was present and the value parsed.
        value: The parsed value, or the caller's fallback.
        status: Distinguishes a missing key from an unparseable value.
    """

    found: bool
    value: Any
    status: LookupStatus

    def as_lookup(self) -> Lookup:
        return Lookup(self.found, self.value)
