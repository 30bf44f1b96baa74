# lrucaches

Fixed-size in-memory caches built on one small LRU segment type:

- `SegmentedCache` (`lrucaches.segmented`) is a segmented LRU. New entries go into a *probationary* segment. An entry that is read or written a second time moves to a *protected* segment. When the protected segment is full, its least recently used entry drops back to probationary.
- `TwoQueueCache` (`lrucaches.two_queue`) is a 2Q cache. It keeps *recent* and *frequent* entries apart, and a *ghost* list remembers recently evicted entries together with their values. A burst of new keys therefore cannot push out entries that are used often.
- `LRUSegment` (`lrucaches.core`) is the bounded LRU mapping the two caches are built from. You can also use it on its own.

Each `put` returns a result object from `lrucaches.results` that tells you what happened:

- `Put()`: a new entry was stored.
- `Update(value)`: an existing entry was replaced. `value` is the old value.
- `Evicted(key, value)`: a new entry was stored and another entry was dropped.
- `EvictedAndUpdate(evicted, update)`: an entry was replaced and another one was dropped. `evicted` is the dropped `(key, value)` pair and `update` is the replaced value.

## Install

```
pip install lrucaches
```

## Segmented LRU

```python
from lrucaches.segmented import SegmentedCache

cache = SegmentedCache(2, 2)          # probationary size, protected size
cache.put(1, 1)
cache.put(2, 2)
assert cache.probationary_len() == 2

assert cache.get(1) == 1              # promoted to the protected segment
assert cache.protected_len() == 1

assert cache.remove(2) == 2
cache.purge()
assert len(cache) == 0
```

Other members of the cache:

- `peek(key, default)` reads an entry without moving it.
- `put_protected(key, value)` writes an entry straight into the protected segment.
- `peek_lru_from_probationary()`, `peek_mru_from_probationary()`, `peek_lru_from_protected()` and `peek_mru_from_protected()` return an entry without moving it.
- `remove_lru_from_probationary()` and `remove_lru_from_protected()` remove the least recently used entry of a segment.
- `cap()`, `probationary_cap()` and `protected_cap()` give the capacities.
- `contains(key)` or `key in cache` tells you whether a key is present.
- `is_empty()` tells you whether the cache holds nothing.

You can also build the cache step by step:

```python
from lrucaches.segmented import SegmentedCache, SegmentedCacheBuilder

cache = SegmentedCacheBuilder(5, 5).set_protected_size(10).finalize()
cache = SegmentedCache.from_builder(SegmentedCache.builder(3, 3))
```

## 2Q

```python
from lrucaches.two_queue import TwoQueueCache
from lrucaches.results import Put, Update

cache = TwoQueueCache(4)              # recent ratio 0.25, ghost ratio 0.5 by default
for i in range(1, 5):
    assert cache.put(i, i) == Put()

cache.put(5, 5)                       # key 1 moves to the ghost list
assert cache.put(1, 1) == Update(1)   # brought back into the frequent list
print(list(cache.frequent_keys()), list(cache.ghost_keys_lru()))
```

`len(cache)`, `cap()` and `contains()` count only the recent and frequent segments. The ghost list is left out of all three. `remove()` and `purge()` also clear ghost entries, and `is_empty()` is true only when the ghost list is empty as well.

Each segment has six iterators, named `recent_*`, `frequent_*` and `ghost_*`. `keys`, `values` and `items` give the most recently used entry first. `keys_lru`, `values_lru` and `items_lru` give the least recently used entry first. For example, `recent_items_lru()` walks the recent segment from its oldest entry. `recent_len()`, `frequent_len()` and `ghost_len()` give the size of each segment.

To choose the ratios, you have four options:

- pass them to the constructor, as in `TwoQueueCache(size, recent_ratio, ghost_ratio)`;
- use `TwoQueueCache.with_recent_ratio`;
- use `TwoQueueCache.with_ghost_ratio`;
- use `TwoQueueCache.builder(size)`, which has `set_size`, `set_recent_ratio`, `set_ghost_ratio` and `finalize`.

## Errors

These settings raise an error:

- A size of zero or less raises `InvalidSizeError`.
- A ratio outside `[0, 1]` raises `InvalidRecentRatioError` or `InvalidGhostRatioError`.
- The ghost list must be able to hold at least one entry. If `size * ghost_ratio` rounds down to zero, you get an `InvalidSizeError`. For example, `TwoQueueCache(1)` raises it.

All three errors are subclasses of `lrucaches.results.CacheError`, which is itself a `ValueError`. The rejected value is kept on the exception as `.value`.

## What it does not do

The caches live in memory only, in a single process. There is no persistence, no expiry by time and no locking for use from several threads.

## Tests

```
pip install -e ".[test]"
pytest
```