"""Core types, enums, results and settings for seqquery."""

from seqquery.core.config import Settings, settings
from seqquery.core.enums import LookupStatus, Ordering
from seqquery.core.results import Lookup, ParseResult

__all__ = [
    "Settings",
    "settings",
    "LookupStatus",
    "Ordering",
    "Lookup",
    "ParseResult",
]
