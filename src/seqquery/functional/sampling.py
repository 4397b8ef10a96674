"""Sampling without replacement.

:func:`random_order` enumerates every element of a finite source exactly once
in a uniformly random order. Each iteration of the returned
:class:`RandomOrder` is its own session: on the first ``next()`` the source
is copied into a private pool, and every step draws an index uniformly from
the pool, yields that element and swap-removes it. The caller's collection is
never touched.

Randomness comes from a :class:`numpy.random.Generator`. Pass a seed or a
generator for reproducible orders; with neither, ``settings.RANDOM_SEED`` is
used when set.

Example:
    Reproducible draw order::

        import numpy as np

        rng = np.random.default_rng(7)
        order = list(random_order(["a", "b", "c"], rng=rng))

Note:
    Iterating the same :class:`RandomOrder` twice gives two independent
    shuffles. When the source is itself an iterator, the first session
    exhausts it and later sessions are empty.
"""

import typing as tp

import numpy as np

from seqquery.core.config import settings
from seqquery.core.types import T
from seqquery.logger.logger import logger

__all__ = [
    "RandomLike",
    "make_rng",
    "pick",
    "RandomOrder",
    "random_order",
]

RandomLike = tp.Union[None, int, np.random.Generator]


def make_rng(rng: RandomLike = None) -> np.random.Generator:
    """Resolve ``rng`` into a generator.

    ``None`` uses ``settings.RANDOM_SEED`` (fresh OS entropy when unset), an
    ``int`` seeds a new generator and a generator is returned unchanged.
    """
    if rng is None:
        rng = settings.RANDOM_SEED
    return np.random.default_rng(rng)


def pick(
    pool: tp.Sequence[T], rng: RandomLike = None
) -> tp.Tuple[int, tp.Optional[T]]:
    """Pick one element of ``pool`` uniformly at random.

    Args:
        pool: Indexable collection to draw from.
        rng: Seed or generator, see :func:`make_rng`.

    Returns:
        ``(index, element)``, or ``(-1, None)`` for an empty pool.
    """
    size = len(pool)
    if size == 0:
        return -1, None

    generator = make_rng(rng)
    # floor(u * n) for u in [0, 1); min() guards float rounding up to n
    index = min(int(generator.random() * size), size - 1)
    return index, pool[index]


class RandomOrder(tp.Iterable[T]):
    """Lazily shuffled view of a source sequence.

    Attributes:
        source: The caller's collection. It is copied, never mutated.
        rng: Generator shared by every session started from this view.
    """

    def __init__(self, source: tp.Optional[tp.Iterable[T]], rng: RandomLike = None):
        self.source = source
        self.rng = make_rng(rng)

    def __iter__(self) -> tp.Iterator[T]:
        # Pool is allocated on the first next(), not here
        return self._session()

    def _session(self) -> tp.Iterator[T]:
        pool: tp.List[T] = [] if self.source is None else list(self.source)
        logger.debug(f"Starting random order session over {len(pool)} elements")

        while pool:
            index, item = pick(pool, self.rng)
            # Order of the remaining pool is irrelevant, so swap-remove in O(1)
            pool[index] = pool[-1]
            pool.pop()
            yield item


def random_order(
    source: tp.Optional[tp.Iterable[T]], rng: RandomLike = None
) -> RandomOrder[T]:
    """Every element of ``source`` exactly once, in a uniformly random order."""
    return RandomOrder(source, rng)
