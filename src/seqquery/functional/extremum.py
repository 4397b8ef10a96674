"""Index of the extremal element of a sequence.

The locator walks a sequence once, keeping the projected value of the best
element seen so far. Each new element is compared three-way against it and a
comparison policy decides whether the new element takes over. The first
element always initializes the running extremum.

Policies:
    - :func:`is_less`: strictly smaller wins, so ties keep the earliest index.
    - :func:`is_greater`: strictly larger wins, ties keep the earliest index.

Any callable taking an :class:`~seqquery.core.enums.Ordering` works as a
policy; ``lambda order: order <= 0`` for example returns the *last* minimum.

Examples:
    >>> from seqquery.functional.extremum import index_of_min, index_of_max
    >>> index_of_min([3, 1, 2])
    1
    >>> index_of_max(["a", "ccc", "bb"], key=len)
    1
    >>> index_of_max([])
    -1
"""

import typing as tp

from seqquery.core.enums import Ordering
from seqquery.core.types import Comparable, ComparisonPolicy, Projection

__all__ = [
    "NOT_FOUND",
    "compare",
    "is_less",
    "is_greater",
    "index_of",
    "index_of_min",
    "index_of_max",
]

NOT_FOUND = -1


def compare(a: Comparable, b: Comparable) -> Ordering:
    """Three-way comparison of ``a`` against ``b``."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def is_less(order: Ordering) -> bool:
    return order < 0


def is_greater(order: Ordering) -> bool:
    return order > 0


def index_of(
    source: tp.Optional[tp.Iterable[tp.Any]],
    policy: ComparisonPolicy,
    key: tp.Optional[Projection] = None,
) -> int:
    """Return the index of the element selected by ``policy``.

    Args:
        source: Elements to search. ``None`` is treated as empty.
        policy: Receives the comparison of a candidate's projected value
            against the running extremum and returns ``True`` when the
            candidate should replace it.
        key: Projection applied exactly once per element. Defaults to the
            element itself.

    Returns:
        Zero-based index of the extremal element, or ``NOT_FOUND`` (-1) for an
        empty or ``None`` source.
    """
    if source is None:
        return NOT_FOUND

    best_index = NOT_FOUND
    best_value = None

    for index, item in enumerate(source):
        value = item if key is None else key(item)

        if best_index == NOT_FOUND or policy(compare(value, best_value)):
            best_index = index
            best_value = value

    return best_index


def index_of_min(
    source: tp.Optional[tp.Iterable[tp.Any]], key: tp.Optional[Projection] = None
) -> int:
    """Index of the first element with the smallest projected value."""
    return index_of(source, is_less, key)


def index_of_max(
    source: tp.Optional[tp.Iterable[tp.Any]], key: tp.Optional[Projection] = None
) -> int:
    """Index of the first element with the largest projected value."""
    return index_of(source, is_greater, key)
