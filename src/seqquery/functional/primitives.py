"""Small predicates and accessors used alongside the query helpers."""

import typing as tp
from collections.abc import Sized

from seqquery.core.results import Lookup
from seqquery.core.types import T

__all__ = [
    "is_null_or_empty",
    "at_least",
    "try_first",
    "try_pop_one",
]


def is_null_or_empty(collection: tp.Optional[tp.Iterable[tp.Any]]) -> bool:
    """``True`` for ``None`` or a sized collection with no elements.

    Unsized iterables are never consumed to find out, so they count as
    non-empty.
    """
    if collection is None:
        return True
    return isinstance(collection, Sized) and len(collection) == 0


def at_least(source: tp.Optional[tp.Iterable[T]], minimum: int) -> bool:
    """Whether ``source`` holds at least ``minimum`` elements.

    Stops consuming the source as soon as the answer is known.
    """
    if minimum <= 0:
        return True
    if source is None:
        return False
    if isinstance(source, Sized):
        return len(source) >= minimum

    for _ in source:
        minimum -= 1
        if minimum == 0:
            return True
    return False


def try_first(
    source: tp.Optional[tp.Iterable[T]],
    predicate: tp.Optional[tp.Callable[[T], bool]] = None,
) -> Lookup:
    """First element (matching ``predicate`` when given)."""
    if source is None:
        return Lookup(False, None)
    for item in source:
        if predicate is None or predicate(item):
            return Lookup(True, item)
    return Lookup(False, None)


def try_pop_one(
    collection: tp.MutableSequence[T], predicate: tp.Callable[[T], bool]
) -> Lookup:
    """Remove and return the first element matching ``predicate``.

    Args:
        collection: Mutable sequence to search. Modified in place on a match.
        predicate: Selects the element to remove.

    Returns:
        ``Lookup(True, item)`` after removing ``item``, otherwise
        ``Lookup(False, None)`` with the collection untouched.
    """
    for index, item in enumerate(collection):
        if predicate(item):
            del collection[index]
            return Lookup(True, item)
    return Lookup(False, None)
