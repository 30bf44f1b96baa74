import random

import pytest

from lrucaches.results import InvalidSizeError, Put, Update
from lrucaches.segmented import SegmentedCache, SegmentedCacheBuilder


def _lens(cache):
    return cache.probationary_len(), cache.protected_len()


def _put_all(cache, pairs):
    return [cache.put(key, value) for key, value in pairs]


@pytest.fixture
def cache():
    return SegmentedCache(2, 2)


def test_overview_example(cache):
    _put_all(cache, [(1, 1), (2, 2)])
    assert _lens(cache) == (2, 0)

    assert [cache.get(1), cache.get(2)] == [1, 2]
    cache.put(2, 22)
    assert _lens(cache) == (0, 2)

    _put_all(cache, [(3, 3), (4, 4)])
    assert _lens(cache) == (2, 2)

    assert [cache.peek(3), cache.peek(4)] == [3, 4]
    assert _lens(cache) == (2, 2)

    assert cache.remove(2) == 22
    assert len(cache) == 3

    cache.purge()
    assert len(cache) == 0
    assert cache.is_empty()


def test_put_results(cache):
    results = _put_all(cache, [(1, "a"), (2, "b"), (2, "beta"), (3, "c")])
    assert results == [Put(), Put(), Update("b"), Put()]
    assert [cache.get(1), cache.get(2)] == ["a", "beta"]


def test_get_after_updates(cache):
    _put_all(cache, [("apple", 8), ("banana", 4), ("banana", 6), ("pear", 2)])
    assert cache.get("banana") == 6


def test_get_missing_returns_default(cache):
    assert cache.get("nothing") is None
    assert cache.get("nothing", "fallback") == "fallback"
    assert cache.peek("nothing", "fallback") == "fallback"


def test_peek(cache):
    _put_all(cache, [(1, "a"), (2, "b")])
    assert [cache.peek(1), cache.peek(2)] == ["a", "b"]
    assert cache.protected_len() == 0


def test_contains(cache):
    _put_all(cache, [(1, "a"), (2, "b"), (3, "c")])
    assert [cache.contains(1), cache.contains(2)] == [False, True]
    assert 3 in cache


def test_remove(cache):
    cache.put(2, "a")
    assert [cache.remove(1), cache.remove(2), cache.remove(2)] == [None, "a", None]
    assert len(cache) == 0


def test_len_and_purge(cache):
    assert len(cache) == 0
    steps = [(1, "a", 1), (2, "b", 2), (3, "c", 2), (3, "cc", 2), (4, "d", 3)]
    for key, value, expected_len in steps:
        cache.put(key, value)
        assert len(cache) == expected_len
    cache.purge()
    assert len(cache) == 0


def test_capacities():
    cache = SegmentedCache(2, 3)
    assert (cache.cap(), cache.probationary_cap(), cache.protected_cap()) == (5, 2, 3)


@pytest.mark.parametrize("sizes", [(0, 2), (2, 0), (0, 0)])
def test_invalid_sizes(sizes):
    with pytest.raises(InvalidSizeError) as info:
        SegmentedCache(*sizes)
    assert info.value == InvalidSizeError(0)


def test_builder_roundtrip():
    builder = SegmentedCache.builder(1, 1).set_probationary_size(5).set_protected_size(6)
    cache = SegmentedCache.from_builder(builder)
    assert (cache.probationary_cap(), cache.protected_cap()) == (5, 6)
    cache.put(1, 1)
    assert cache.peek(1) == 1


@pytest.mark.parametrize(
    "builder",
    [SegmentedCacheBuilder(3, 0), SegmentedCacheBuilder().set_protected_size(3)],
)
def test_builder_rejects_zero(builder):
    with pytest.raises(InvalidSizeError):
        builder.finalize()


def test_get_demotes_protected_overflow():
    cache = SegmentedCache(2, 1)
    _put_all(cache, [(1, 1), (2, 2)])
    assert [cache.get(1), cache.get(2)] == [1, 2]
    assert _lens(cache) == (1, 1)
    assert cache.peek_lru_from_protected() == (2, 2)
    assert cache.peek_mru_from_probationary() == (1, 1)


def test_put_demotes_protected_overflow():
    cache = SegmentedCache(2, 1)
    _put_all(cache, [(1, 1), (1, 10), (2, 2)])
    assert cache.put(2, 20) == Put()
    assert cache.peek_mru_from_protected() == (2, 20)
    assert cache.peek_lru_from_probationary() == (1, 10)
    assert len(cache) == 2


def test_put_protected_and_remove_lru(cache):
    cache.put_protected("x", 1)
    cache.put_protected("y", 2)
    cache.put("z", 3)
    assert cache.protected_len() == 2
    assert cache.remove_lru_from_protected() == ("x", 1)
    assert cache.remove_lru_from_probationary() == ("z", 3)
    assert cache.remove_lru_from_probationary() is None
    assert len(cache) == 1


def test_peek_on_empty_segments():
    cache = SegmentedCache(1, 1)
    assert cache.peek_lru_from_probationary() is None
    assert cache.peek_mru_from_protected() is None


def test_random_ops_respect_capacities():
    rng = random.Random(7)
    cache = SegmentedCache(16, 48)
    for _ in range(5000):
        key = rng.randrange(128)
        op = rng.randrange(3)
        if op == 0:
            cache.put(key, key)
        elif op == 1:
            value = cache.get(key)
            assert value is None or value == key
        else:
            cache.remove(key)
        assert cache.probationary_len() <= cache.probationary_cap()
        assert cache.protected_len() <= cache.protected_cap()
        assert len(cache) <= cache.cap()