"""Outcomes of cache insertions and the errors raised when building caches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")

__all__ = [
    "CacheError",
    "InvalidSizeError",
    "InvalidRecentRatioError",
    "InvalidGhostRatioError",
    "Put",
    "Update",
    "Evicted",
    "EvictedAndUpdate",
    "PutResult",
]


class CacheError(ValueError):
    """Base error for invalid cache configuration; carries the offending value."""

    _what = "cache parameter"

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid {self._what}: {value!r}")
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheError):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class InvalidSizeError(CacheError):
    """Raised when a cache or segment size is not positive."""

    _what = "cache size"


class InvalidRecentRatioError(CacheError):
    """Raised when the recent ratio lies outside [0.0, 1.0]."""

    _what = "recent ratio"


class InvalidGhostRatioError(CacheError):
    """Raised when the ghost ratio lies outside [0.0, 1.0]."""

    _what = "ghost ratio"


@dataclass(frozen=True)
class Put:
    """A new entry was stored and nothing was evicted."""


@dataclass(frozen=True)
class Update(Generic[V]):
    """An existing entry was updated; ``value`` is the value it replaced."""

    value: V


@dataclass(frozen=True)
class Evicted(Generic[K, V]):
    """A new entry was stored and the entry ``key``/``value`` was evicted."""

    key: K
    value: V


@dataclass(frozen=True)
class EvictedAndUpdate(Generic[K, V]):
    """An entry was updated and another one was evicted.

    ``evicted`` is the evicted ``(key, value)`` pair and ``update`` the
    value that was replaced.
    """

    evicted: tuple[K, V]
    update: V


PutResult = Union[Put, Update, Evicted, EvictedAndUpdate]