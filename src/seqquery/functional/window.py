"""Fixed-size windows over a sequence.

:func:`take_exactly` always returns a list of exactly ``count`` elements.
Surplus source elements are dropped. Missing slots are filled from the
supplied defaults: slot ``i`` takes ``defaults[i]`` while ``i`` is in range
and the *last* default after that, or ``fill`` when no defaults are given.

Examples:
    >>> take_exactly([1, 2, 3], 5, 9)
    [1, 2, 3, 9, 9]
    >>> take_exactly([1, 2, 3], 2)
    [1, 2]
    >>> take_exactly([1], 4, 7, 8)
    [1, 8, 8, 8]
    >>> take_at_least([1, 2, 3], 2)
    [1, 2, 3]

Note:
    :func:`take_at_least` and :func:`take_at_most` need the length of the
    source up front. Sized sources are measured with ``len``; any other
    iterable (generators, iterators) is first copied into a list, which costs
    a full pass and memory proportional to the source.
"""

import typing as tp
from collections.abc import Sized

from seqquery.core.types import T, window_count_adapter
from seqquery.functional.primitives import is_null_or_empty
from seqquery.logger.logger import logger

__all__ = [
    "take_exactly",
    "take_at_least",
    "take_at_most",
]


def _validate_count(count: int) -> int:
    # Raises pydantic.ValidationError, a ValueError subclass
    return window_count_adapter.validate_python(count)


def _measure(
    source: tp.Optional[tp.Iterable[T]],
) -> tp.Tuple[tp.Iterable[T], int]:
    if source is None:
        return (), 0
    if isinstance(source, Sized):
        return source, len(source)
    logger.debug("Materializing unsized source to measure its length")
    items = list(source)
    return items, len(items)


def take_exactly(
    source: tp.Optional[tp.Iterable[T]],
    count: int,
    *defaults: T,
    fill: tp.Any = None,
) -> tp.List[T]:
    """Take exactly ``count`` elements, padding with defaults when short.

    Args:
        source: Elements to take from. ``None`` is treated as empty. Only the
            first ``count`` elements are consumed.
        count: Length of the result. Must be a non-negative ``int``.
        *defaults: Values for the padded slots, by position. The last one
            repeats for every slot past the end of ``defaults``.
        fill: Padding used when no ``defaults`` are given.

    Returns:
        A new list of length ``count``.

    Raises:
        ValueError: If ``count`` is negative or not an integer.
    """
    count = _validate_count(count)
    window: tp.List[T] = []

    if count == 0:
        return window

    if not is_null_or_empty(source):
        for item in source:
            window.append(item)
            if len(window) == count:
                return window

    overflow = defaults[-1] if defaults else fill
    for slot in range(len(window), count):
        window.append(defaults[slot] if slot < len(defaults) else overflow)

    return window


def take_at_least(
    source: tp.Optional[tp.Iterable[T]],
    count: int,
    *defaults: T,
    fill: tp.Any = None,
) -> tp.List[T]:
    """Every source element, padded up to ``count`` when the source is shorter."""
    count = _validate_count(count)
    source, size = _measure(source)
    return take_exactly(source, max(size, count), *defaults, fill=fill)


def take_at_most(
    source: tp.Optional[tp.Iterable[T]],
    count: int,
    *defaults: T,
    fill: tp.Any = None,
) -> tp.List[T]:
    """At most ``count`` source elements; never pads."""
    count = _validate_count(count)
    source, size = _measure(source)
    return take_exactly(source, min(size, count), *defaults, fill=fill)
