"""Sequence and mapping query helpers."""

from seqquery.core import Lookup, LookupStatus, Ordering, ParseResult, settings
from seqquery.functional.extremum import (
    compare,
    index_of,
    index_of_max,
    index_of_min,
    is_greater,
    is_less,
)
from seqquery.functional.lookup import (
    float_value,
    get,
    int_value,
    keys,
    try_float,
    try_get,
    try_int,
    try_parse,
)
from seqquery.functional.primitives import (
    at_least,
    is_null_or_empty,
    try_first,
    try_pop_one,
)
from seqquery.functional.sampling import RandomOrder, pick, random_order
from seqquery.functional.window import take_at_least, take_at_most, take_exactly

__all__ = [
    "Lookup",
    "LookupStatus",
    "Ordering",
    "ParseResult",
    "settings",
    "compare",
    "index_of",
    "index_of_max",
    "index_of_min",
    "is_greater",
    "is_less",
    "float_value",
    "get",
    "int_value",
    "keys",
    "try_float",
    "try_get",
    "try_int",
    "try_parse",
    "at_least",
    "is_null_or_empty",
    "try_first",
    "try_pop_one",
    "RandomOrder",
    "pick",
    "random_order",
    "take_at_least",
    "take_at_most",
    "take_exactly",
]
