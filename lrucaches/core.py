"""A bounded least-recently-used segment, the building block of the caches."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterator
from typing import Any, Generic, Optional, TypeVar

from lrucaches.results import Evicted, InvalidSizeError, Put, PutResult, Update

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["LRUSegment"]


class LRUSegment(Generic[K, V]):
    """A fixed-capacity mapping that evicts its least recently used entry.

    Entries are ordered from least to most recently used. ``put`` and ``get``
    mark an entry as most recently used; ``peek`` and the iterators do not.
    """

    __slots__ = ("_size", "_entries")

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise InvalidSizeError(size)
        self._size = size
        self._entries: OrderedDict[K, V] = OrderedDict()

    @property
    def size(self) -> int:
        """The maximum number of entries the segment holds."""
        return self._size

    def put(self, key: K, value: V) -> PutResult:
        """Store ``value`` under ``key`` as the most recently used entry.

        Returns ``Update`` with the replaced value when the key was present,
        ``Evicted`` with the dropped entry when the segment was full, and
        ``Put`` otherwise.
        """
        entries = self._entries
        if key in entries:
            old = entries[key]
            entries[key] = value
            entries.move_to_end(key)
            return Update(old)
        evicted: Optional[tuple[K, V]] = None
        if len(entries) >= self._size:
            evicted = entries.popitem(last=False)
        entries[key] = value
        if evicted is None:
            return Put()
        return Evicted(*evicted)

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it most recently used."""
        entries = self._entries
        if key not in entries:
            return default
        entries.move_to_end(key)
        return entries[key]

    def peek(self, key: K, default: Any = None) -> Any:
        """Return the value for ``key`` without changing the order."""
        return self._entries.get(key, default)

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` and return its value, or ``None`` if it is absent."""
        return self._entries.pop(key, None)

    def pop_lru(self) -> Optional[tuple[K, V]]:
        """Remove and return the least recently used entry, if any."""
        if not self._entries:
            return None
        return self._entries.popitem(last=False)

    def peek_lru(self) -> Optional[tuple[K, V]]:
        """Return the least recently used entry without removing it."""
        return next(iter(self._entries.items()), None)

    def peek_mru(self) -> Optional[tuple[K, V]]:
        """Return the most recently used entry without removing it."""
        return next(reversed(self._entries.items()), None)

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def keys(self) -> Iterator[K]:
        """Keys from most to least recently used."""
        yield from reversed(self._entries)

    def keys_lru(self) -> Iterator[K]:
        """Keys from least to most recently used."""
        yield from self._entries

    def values(self) -> Iterator[V]:
        """Values from most to least recently used."""
        yield from reversed(self._entries.values())

    def values_lru(self) -> Iterator[V]:
        """Values from least to most recently used."""
        yield from self._entries.values()

    def items(self) -> Iterator[tuple[K, V]]:
        """``(key, value)`` pairs from most to least recently used."""
        yield from reversed(self._entries.items())

    def items_lru(self) -> Iterator[tuple[K, V]]:
        """``(key, value)`` pairs from least to most recently used."""
        yield from self._entries.items()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:
        return f"LRUSegment(len={len(self)}, size={self._size})"