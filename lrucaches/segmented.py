"""Segmented LRU cache: a probationary segment in front of a protected one."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Generic, Optional, TypeVar

from lrucaches.core import LRUSegment
from lrucaches.results import Evicted, InvalidSizeError, PutResult, Update

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["SegmentedCacheBuilder", "SegmentedCache"]


class SegmentedCacheBuilder:
    """Collects the segment sizes for a :class:`SegmentedCache`."""

    __slots__ = ("probationary_size", "protected_size")

    def __init__(self, probationary_size: int = 0, protected_size: int = 0) -> None:
        self.probationary_size = probationary_size
        self.protected_size = protected_size

    def set_probationary_size(self, size: int) -> SegmentedCacheBuilder:
        """Set the probationary segment size and return the builder."""
        self.probationary_size = size
        return self

    def set_protected_size(self, size: int) -> SegmentedCacheBuilder:
        """Set the protected segment size and return the builder."""
        self.protected_size = size
        return self

    def finalize(self) -> SegmentedCache:
        """Build the cache, raising :class:`InvalidSizeError` on a bad size."""
        return SegmentedCache(self.probationary_size, self.protected_size)


class SegmentedCache(Generic[K, V]):
    """A fixed-size segmented LRU cache.

    New entries land in the probationary segment. An entry that is hit
    again moves to the protected segment; when the protected segment is
    full its least recently used entry is demoted back to probation.
    """

    __slots__ = ("_probationary", "_protected")

    def __init__(self, probationary_size: int, protected_size: int) -> None:
        if protected_size <= 0:
            raise InvalidSizeError(protected_size)
        if probationary_size <= 0:
            raise InvalidSizeError(probationary_size)
        self._probationary: LRUSegment[K, V] = LRUSegment(probationary_size)
        self._protected: LRUSegment[K, V] = LRUSegment(protected_size)

    @classmethod
    def builder(cls, probationary_size: int, protected_size: int) -> SegmentedCacheBuilder:
        """Return a builder preset with the given sizes."""
        return SegmentedCacheBuilder(probationary_size, protected_size)

    @classmethod
    def from_builder(cls, builder: SegmentedCacheBuilder) -> SegmentedCache:
        """Build a cache from ``builder``."""
        return builder.finalize()

    def _promote(self, key: K, value: V) -> PutResult:
        """Put an entry into the protected segment, demoting any overflow."""
        result = self._protected.put(key, value)
        if isinstance(result, Evicted):
            return self._probationary.put(result.key, result.value)
        return result

    def put(self, key: K, value: V) -> PutResult:
        """Insert or update ``key``; a repeated key moves to the protected segment."""
        if key in self._protected:
            return self._protected.put(key, value)
        if key in self._probationary:
            old = self._probationary.remove(key)
            result = self._protected.put(key, value)
            if isinstance(result, Evicted):
                return self._probationary.put(result.key, result.value)
            return Update(old)
        return self._probationary.put(key, value)

    def put_protected(self, key: K, value: V) -> PutResult:
        """Put an entry straight into the protected segment."""
        return self._protected.put(key, value)

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value for ``key``, promoting it to the protected segment."""
        if key in self._protected:
            return self._protected.get(key)
        if key in self._probationary:
            value = self._probationary.remove(key)
            self._promote(key, value)
            return value
        return default

    def peek(self, key: K, default: Any = None) -> Any:
        """Return the value for ``key`` without changing any order."""
        if key in self._protected:
            return self._protected.peek(key)
        return self._probationary.peek(key, default)

    def contains(self, key: K) -> bool:
        """Whether ``key`` is in either segment; does not update the cache."""
        return key in self._protected or key in self._probationary

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` and return its value, or ``None`` if absent."""
        if key in self._probationary:
            return self._probationary.remove(key)
        return self._protected.remove(key)

    def purge(self) -> None:
        """Remove every entry."""
        self._probationary.clear()
        self._protected.clear()

    def cap(self) -> int:
        """Total number of entries the cache can hold."""
        return self._probationary.size + self._protected.size

    def is_empty(self) -> bool:
        """Whether both segments are empty."""
        return not self._probationary and not self._protected

    def peek_lru_from_probationary(self) -> Optional[tuple[K, V]]:
        """Least recently used probationary entry, left in place."""
        return self._probationary.peek_lru()

    def peek_mru_from_probationary(self) -> Optional[tuple[K, V]]:
        """Most recently used probationary entry, left in place."""
        return self._probationary.peek_mru()

    def peek_lru_from_protected(self) -> Optional[tuple[K, V]]:
        """Least recently used protected entry, left in place."""
        return self._protected.peek_lru()

    def peek_mru_from_protected(self) -> Optional[tuple[K, V]]:
        """Most recently used protected entry, left in place."""
        return self._protected.peek_mru()

    def remove_lru_from_probationary(self) -> Optional[tuple[K, V]]:
        """Remove and return the least recently used probationary entry."""
        return self._probationary.pop_lru()

    def remove_lru_from_protected(self) -> Optional[tuple[K, V]]:
        """Remove and return the least recently used protected entry."""
        return self._protected.pop_lru()

    def probationary_len(self) -> int:
        """Number of entries in the probationary segment."""
        return len(self._probationary)

    def protected_len(self) -> int:
        """Number of entries in the protected segment."""
        return len(self._protected)

    def probationary_cap(self) -> int:
        """Capacity of the probationary segment."""
        return self._probationary.size

    def protected_cap(self) -> int:
        """Capacity of the protected segment."""
        return self._protected.size

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._probationary) + len(self._protected)

    def __repr__(self) -> str:
        return f"SegmentedCache(len={len(self)}, cap={self.cap()})"