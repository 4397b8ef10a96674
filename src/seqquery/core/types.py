"""Reusable type definitions for seqquery.

Type Aliases:
    Projection: Maps an element to the value it is ranked by.
    ComparisonPolicy: Decides whether a comparison result replaces the
        running extremum.
    Pair: A single ``(key, value)`` entry.
    PairSource: Either a mapping or any iterable of pairs.
    WindowCount: A non-negative integer element count.
"""

import operator
from typing import (
    Annotated,
    Any,
    Callable,
    Iterable,
    Mapping,
    Protocol,
    Tuple,
    TypeVar,
    Union,
)

import annotated_types as at
from pydantic import BeforeValidator, TypeAdapter

from .enums import Ordering

__all__ = [
    "T",
    "K",
    "V",
    "Comparable",
    "Projection",
    "ComparisonPolicy",
    "Pair",
    "PairSource",
    "WindowCount",
    "validate_index",
    "window_count_adapter",
]

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class Comparable(Protocol):
    """Anything ordered by ``<`` and ``>``."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


Projection = Callable[[T], Comparable]
ComparisonPolicy = Callable[[Ordering], bool]

Pair = Tuple[K, V]
PairSource = Union[Mapping[K, V], Iterable[Pair]]


def validate_index(value: Any) -> int:
    """Accept ``int`` and anything implementing ``__index__`` (numpy integers).

    Raises:
        ValueError: For bools, floats and other non-integer values.
    """
    if isinstance(value, bool):
        raise ValueError("Count must be an integer, not a bool.")
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(
            f"Count must be an integer, got {type(value).__name__}."
        ) from None


# Element count for the window helpers; negative numbers are rejected
WindowCount = Annotated[int, BeforeValidator(validate_index), at.Ge(0)]

window_count_adapter = TypeAdapter(WindowCount)
