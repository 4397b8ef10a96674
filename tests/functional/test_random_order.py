from collections import Counter

import numpy as np
import pytest
from seqquery.core.config import settings
from seqquery.functional.sampling import RandomOrder, make_rng, pick, random_order


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def test_yields_a_permutation(rng):
    source = list(range(20))
    result = list(random_order(source, rng=rng))
    assert sorted(result) == source
    assert len(result) == len(source)


def test_keeps_duplicates(rng):
    source = ["a", "b", "a", "c", "a"]
    assert Counter(random_order(source, rng=rng)) == Counter(source)


def test_source_is_not_mutated(rng):
    source = [3, 1, 2]
    list(random_order(source, rng=rng))
    assert source == [3, 1, 2]


def test_trivial_sources():
    assert list(random_order([])) == []
    assert list(random_order(None)) == []
    assert list(random_order(["x"])) == ["x"]


def test_same_seed_same_order():
    source = list("abcdefgh")
    first = list(random_order(source, rng=7))
    second = list(random_order(source, rng=7))
    assert first == second


def test_each_iteration_is_a_new_session():
    source = list(range(30))
    order = random_order(source, rng=np.random.default_rng(1))
    first = list(order)
    second = list(order)
    assert sorted(first) == sorted(second) == source
    assert first != second


def test_pool_is_copied_lazily():
    source = [1, 2]
    sequence = iter(random_order(source, rng=0))
    source.append(3)
    assert sorted(sequence) == [1, 2, 3]


def test_partial_consumption_is_safe(rng):
    source = list(range(10))
    sequence = iter(random_order(source, rng=rng))
    taken = [next(sequence), next(sequence)]
    del sequence
    assert len(set(taken)) == 2
    assert source == list(range(10))


def test_iterator_source_is_single_use(rng):
    order = RandomOrder(iter([1, 2, 3]), rng=rng)
    assert sorted(order) == [1, 2, 3]
    assert list(order) == []


def test_first_position_is_roughly_uniform():
    rng = np.random.default_rng(123)
    counts = Counter(next(iter(random_order("abcd", rng=rng))) for _ in range(4000))
    for letter in "abcd":
        # Expected 1000 per letter
        assert 850 < counts[letter] < 1150


def test_pick():
    rng = np.random.default_rng(5)
    pool = ["x", "y", "z"]
    for _ in range(100):
        index, item = pick(pool, rng)
        assert 0 <= index < len(pool)
        assert pool[index] == item


def test_pick_empty_pool():
    assert pick([]) == (-1, None)


def test_make_rng_uses_configured_seed(monkeypatch):
    monkeypatch.setattr(settings, "RANDOM_SEED", 99)
    assert make_rng().random() == np.random.default_rng(99).random()


def test_make_rng_passes_generator_through(rng):
    assert make_rng(rng) is rng
