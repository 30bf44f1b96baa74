"""2Q cache: separate recent and frequent LRU segments plus a ghost list."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from typing import Any, Generic, Optional, TypeVar

from lrucaches.core import LRUSegment
from lrucaches.results import (
    Evicted,
    EvictedAndUpdate,
    InvalidGhostRatioError,
    InvalidRecentRatioError,
    InvalidSizeError,
    Put,
    PutResult,
    Update,
)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_2Q_RECENT_RATIO = 0.25
"""Share of the cache dedicated to entries that were accessed only once."""

DEFAULT_2Q_GHOST_RATIO = 0.5
"""Size of the ghost list, relative to the cache size."""

__all__ = [
    "DEFAULT_2Q_RECENT_RATIO",
    "DEFAULT_2Q_GHOST_RATIO",
    "TwoQueueCacheBuilder",
    "TwoQueueCache",
]

_MISSING = object()


class TwoQueueCacheBuilder:
    """Collects the size and ratios for a :class:`TwoQueueCache`."""

    __slots__ = ("size", "recent_ratio", "ghost_ratio")

    def __init__(self, size: int = 0) -> None:
        self.size = size
        self.recent_ratio = DEFAULT_2Q_RECENT_RATIO
        self.ghost_ratio = DEFAULT_2Q_GHOST_RATIO

    def set_size(self, size: int) -> TwoQueueCacheBuilder:
        """Set the cache size and return the builder."""
        self.size = size
        return self

    def set_recent_ratio(self, ratio: float) -> TwoQueueCacheBuilder:
        """Set the recent segment ratio and return the builder."""
        self.recent_ratio = ratio
        return self

    def set_ghost_ratio(self, ratio: float) -> TwoQueueCacheBuilder:
        """Set the ghost list ratio and return the builder."""
        self.ghost_ratio = ratio
        return self

    def finalize(self) -> TwoQueueCache:
        """Build the cache, raising a :class:`CacheError` on bad parameters."""
        return TwoQueueCache(self.size, self.recent_ratio, self.ghost_ratio)


class TwoQueueCache(Generic[K, V]):
    """A fixed-size 2Q cache.

    New entries go to the recent segment; entries seen a second time move
    to the frequent segment. Entries evicted from the cache are remembered,
    with their values, in a ghost list; putting a ghost key again brings it
    straight into the frequent segment. The ghost list is not counted in
    ``len`` or ``cap`` and its keys are not reported by ``contains``.
    """

    __slots__ = ("_size", "_recent_size", "_recent", "_frequent", "_ghost")

    def __init__(
        self,
        size: int,
        recent_ratio: float = DEFAULT_2Q_RECENT_RATIO,
        ghost_ratio: float = DEFAULT_2Q_GHOST_RATIO,
    ) -> None:
        if size <= 0:
            raise InvalidSizeError(size)
        if recent_ratio < 0.0 or recent_ratio > 1.0:
            raise InvalidRecentRatioError(recent_ratio)
        if ghost_ratio < 0.0 or ghost_ratio > 1.0:
            raise InvalidGhostRatioError(ghost_ratio)

        self._size = size
        self._recent_size = int(math.floor(size * recent_ratio))
        self._recent: LRUSegment[K, V] = LRUSegment(size)
        self._frequent: LRUSegment[K, V] = LRUSegment(size)
        self._ghost: LRUSegment[K, V] = LRUSegment(int(math.floor(size * ghost_ratio)))

    @classmethod
    def builder(cls, size: int) -> TwoQueueCacheBuilder:
        """Return a builder preset with ``size`` and the default ratios."""
        return TwoQueueCacheBuilder(size)

    @classmethod
    def from_builder(cls, builder: TwoQueueCacheBuilder) -> TwoQueueCache:
        """Build a cache from ``builder``."""
        return builder.finalize()

    @classmethod
    def with_recent_ratio(cls, size: int, recent_ratio: float) -> TwoQueueCache:
        """Create a cache with a custom recent ratio."""
        return cls(size, recent_ratio, DEFAULT_2Q_GHOST_RATIO)

    @classmethod
    def with_ghost_ratio(cls, size: int, ghost_ratio: float) -> TwoQueueCache:
        """Create a cache with a custom ghost ratio."""
        return cls(size, DEFAULT_2Q_RECENT_RATIO, ghost_ratio)

    def _pop_victim(self, prefer_recent: bool) -> Optional[tuple[K, V]]:
        """Remove the LRU entry of the preferred segment, falling back to the other."""
        first, second = (
            (self._recent, self._frequent) if prefer_recent else (self._frequent, self._recent)
        )
        entry = first.pop_lru()
        return entry if entry is not None else second.pop_lru()

    def put(self, key: K, value: V) -> PutResult:
        """Insert or update ``key``.

        The recent and frequent segments together never hold more than
        ``cap()`` entries; the ghost list has its own size.
        """
        if key in self._frequent:
            return self._frequent.put(key, value)

        if key in self._recent:
            old = self._recent.remove(key)
            self._frequent.put(key, value)
            return Update(old)

        recent_len = len(self._recent)
        freq_len = len(self._frequent)

        if key in self._ghost:
            if recent_len + freq_len < self._size:
                old = self._ghost.remove(key)
                self._frequent.put(key, value)
                return Update(old)

            victim = self._pop_victim(recent_len > self._recent_size)
            ghost_result: PutResult = Put()
            if victim is not None:
                ghost_result = self._ghost.put(*victim)
            if isinstance(ghost_result, Evicted) and ghost_result.key == key:
                self._frequent.put(key, value)
                return Update(ghost_result.value)
            old = self._ghost.remove(key)
            self._frequent.put(key, value)
            if isinstance(ghost_result, Evicted):
                return EvictedAndUpdate((ghost_result.key, ghost_result.value), old)
            return Update(old)

        if freq_len + recent_len < self._size:
            result = self._recent.put(key, value)
            if isinstance(result, Evicted):
                return self._ghost.put(result.key, result.value)
            return Put()

        victim = self._pop_victim(recent_len >= self._recent_size)
        self._recent.put(key, value)
        if victim is None:
            return Put()
        return self._ghost.put(*victim)

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value for ``key``; a recent entry moves to the frequent segment."""
        if key in self._frequent:
            return self._frequent.get(key)
        if key in self._recent:
            value = self._recent.remove(key)
            self._frequent.put(key, value)
            return value
        return default

    def peek(self, key: K, default: Any = None) -> Any:
        """Return the value for ``key`` without changing any order."""
        value = self._frequent.peek(key, _MISSING)
        if value is not _MISSING:
            return value
        return self._recent.peek(key, default)

    def contains(self, key: K) -> bool:
        """Whether ``key`` is in the recent or frequent segment."""
        return key in self._frequent or key in self._recent

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` from any segment, ghost included, and return its value."""
        for segment in (self._frequent, self._recent, self._ghost):
            if key in segment:
                return segment.remove(key)
        return None

    def purge(self) -> None:
        """Remove every entry, ghosts included."""
        self._frequent.clear()
        self._recent.clear()
        self._ghost.clear()

    def cap(self) -> int:
        """Maximum number of live entries (the ghost list is not counted)."""
        return self._size

    def is_empty(self) -> bool:
        """Whether all segments, ghost included, are empty."""
        return not self._frequent and not self._recent and not self._ghost

    def recent_len(self) -> int:
        """Number of entries in the recent segment."""
        return len(self._recent)

    def frequent_len(self) -> int:
        """Number of entries in the frequent segment."""
        return len(self._frequent)

    def ghost_len(self) -> int:
        """Number of entries in the ghost list."""
        return len(self._ghost)

    def recent_keys(self) -> Iterator[K]:
        """Recent keys, most recently used first."""
        return self._recent.keys()

    def recent_keys_lru(self) -> Iterator[K]:
        """Recent keys, least recently used first."""
        return self._recent.keys_lru()

    def recent_values(self) -> Iterator[V]:
        """Recent values, most recently used first."""
        return self._recent.values()

    def recent_values_lru(self) -> Iterator[V]:
        """Recent values, least recently used first."""
        return self._recent.values_lru()

    def recent_items(self) -> Iterator[tuple[K, V]]:
        """Recent entries, most recently used first."""
        return self._recent.items()

    def recent_items_lru(self) -> Iterator[tuple[K, V]]:
        """Recent entries, least recently used first."""
        return self._recent.items_lru()

    def frequent_keys(self) -> Iterator[K]:
        """Frequent keys, most recently used first."""
        return self._frequent.keys()

    def frequent_keys_lru(self) -> Iterator[K]:
        """Frequent keys, least recently used first."""
        return self._frequent.keys_lru()

    def frequent_values(self) -> Iterator[V]:
        """Frequent values, most recently used first."""
        return self._frequent.values()

    def frequent_values_lru(self) -> Iterator[V]:
        """Frequent values, least recently used first."""
        return self._frequent.values_lru()

    def frequent_items(self) -> Iterator[tuple[K, V]]:
        """Frequent entries, most recently used first."""
        return self._frequent.items()

    def frequent_items_lru(self) -> Iterator[tuple[K, V]]:
        """Frequent entries, least recently used first."""
        return self._frequent.items_lru()

    def ghost_keys(self) -> Iterator[K]:
        """Ghost keys, most recently evicted first."""
        return self._ghost.keys()

    def ghost_keys_lru(self) -> Iterator[K]:
        """Ghost keys, least recently evicted first."""
        return self._ghost.keys_lru()

    def ghost_values(self) -> Iterator[V]:
        """Ghost values, most recently evicted first."""
        return self._ghost.values()

    def ghost_values_lru(self) -> Iterator[V]:
        """Ghost values, least recently evicted first."""
        return self._ghost.values_lru()

    def ghost_items(self) -> Iterator[tuple[K, V]]:
        """Ghost entries, most recently evicted first."""
        return self._ghost.items()

    def ghost_items_lru(self) -> Iterator[tuple[K, V]]:
        """Ghost entries, least recently evicted first."""
        return self._ghost.items_lru()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._recent) + len(self._frequent)

    def __repr__(self) -> str:
        return f"TwoQueueCache(len={len(self)}, cap={self.cap()})"