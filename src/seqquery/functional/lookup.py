"""Key lookup over mappings and plain sequences of pairs.

:func:`try_get` works the same whether it is handed a real mapping or any
iterable of ``(key, value)`` entries, e.g. records deserialized into a list
of tuples:

- **Mapping fast path**: sources implementing :class:`collections.abc.Mapping`
  are probed with ``key in source``. A miss is final, since a mapping keeps
  its keys unique.
- **Fallback scan**: everything else is scanned in order and the first entry
  whose key is the lookup key or compares equal (``==``) to it wins.
  Mappings are scanned through ``.items()`` when the key is unhashable.

Nothing in this module raises for a missing key or an unparseable value.
Results come back as :class:`~seqquery.core.results.Lookup` or
:class:`~seqquery.core.results.ParseResult` tuples.

Examples:
    >>> from seqquery.functional.lookup import try_get, try_float
    >>> try_get([("a", 1), ("b", 2)], "b")
    Lookup(found=True, value=2)
    >>> try_float({"a": "3.14"}, "a")
    Lookup(found=True, value=3.14)
    >>> try_float({"a": "3.14"}, "missing")
    Lookup(found=False, value=0.0)
"""

import typing as tp
from collections.abc import Mapping

from seqquery.core.enums import LookupStatus
from seqquery.core.results import Lookup, ParseResult
from seqquery.core.types import PairSource
from seqquery.functional.primitives import is_null_or_empty
from seqquery.logger.logger import logger

__all__ = [
    "try_get",
    "get",
    "keys",
    "try_parse",
    "try_float",
    "try_int",
    "float_value",
    "int_value",
]

_MISSING = Lookup(False, None)


def try_get(pairs: tp.Optional[PairSource], key: tp.Any) -> Lookup:
    """Look up ``key`` in a mapping or an iterable of ``(key, value)`` pairs.

    Args:
        pairs: A mapping, an iterable of pairs, or ``None``.
        key: Key to look for.

    Returns:
        ``Lookup(True, value)`` for the first matching entry, otherwise
        ``Lookup(False, None)``.
    """
    if is_null_or_empty(pairs):
        return _MISSING

    if isinstance(pairs, Mapping):
        try:
            if key in pairs:
                return Lookup(True, pairs[key])
            return _MISSING
        except TypeError:
            # Unhashable key, fall back to comparing entries one by one
            logger.debug(f"Key {key!r} is not hashable, scanning mapping entries")
        entries: tp.Iterable[tp.Any] = pairs.items()
    else:
        entries = pairs

    for entry_key, value in entries:
        # Identity first, as built-in containers do, so NaN keys match
        if entry_key is key or entry_key == key:
            return Lookup(True, value)

    return _MISSING


def get(pairs: tp.Optional[PairSource], key: tp.Any, default: tp.Any = None) -> tp.Any:
    """Value stored under ``key``, or ``default`` when there is none."""
    found, value = try_get(pairs, key)
    return value if found else default


def keys(pairs: tp.Optional[PairSource]) -> tp.Iterator[tp.Any]:
    """Lazily yield the key of every entry, in iteration order."""
    if pairs is None:
        return
    if isinstance(pairs, Mapping):
        yield from pairs.keys()
        return
    for entry_key, _ in pairs:
        yield entry_key


def try_parse(
    pairs: tp.Optional[PairSource],
    key: tp.Any,
    parser: tp.Callable[[str], tp.Any],
    default: tp.Any = None,
) -> ParseResult:
    """Look up a textual value and parse it.

    Only ``str`` values are handed to ``parser``; anything else is reported
    as malformed. ``ValueError`` and ``TypeError`` raised by the parser are
    reported the same way.

    Args:
        pairs: A mapping, an iterable of pairs, or ``None``.
        key: Key to look for.
        parser: Converts the stored text, e.g. ``float``.
        default: Value placed in the result when the lookup or parse fails.

    Returns:
        A :class:`ParseResult` whose ``status`` tells a missing key apart from
        a value that could not be parsed.
    """
    found, text = try_get(pairs, key)
    if not found:
        return ParseResult(False, default, LookupStatus.MISSING)

    if not isinstance(text, str):
        logger.debug(f"Value for {key!r} is {type(text).__name__}, not text")
        return ParseResult(False, default, LookupStatus.MALFORMED)

    try:
        value = parser(text)
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not parse value for {key!r}: {e}")
        return ParseResult(False, default, LookupStatus.MALFORMED)

    return ParseResult(True, value, LookupStatus.FOUND)


def try_float(pairs: tp.Optional[PairSource], key: tp.Any) -> Lookup:
    """Parse the value under ``key`` as a float. Failures yield ``0.0``."""
    return try_parse(pairs, key, float, 0.0).as_lookup()


def try_int(pairs: tp.Optional[PairSource], key: tp.Any) -> Lookup:
    """Parse the value under ``key`` as an integer. Failures yield ``0``."""
    return try_parse(pairs, key, int, 0).as_lookup()


def float_value(
    pairs: tp.Optional[PairSource], key: tp.Any, default: float = 0.0
) -> float:
    return try_parse(pairs, key, float, default).value


def int_value(pairs: tp.Optional[PairSource], key: tp.Any, default: int = 0) -> int:
    return try_parse(pairs, key, int, default).value
