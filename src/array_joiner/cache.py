"""Bounded cache whose eviction order is decided by the caller."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from array_joiner.errors import CapacityViolation, EmptyCacheError

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """
    A resident value and the bookkeeping available when ranking it.

    Parameters
    ----------
    value :
        The cached value.
    order :
        Admission sequence number. Later loads have larger numbers.
    """

    value: V
    order: int


class BoundedCache(Generic[V]):
    """
    A set of at most `capacity` values.

    The cache has no eviction policy of its own. Callers make room with
    `evict`, passing a ranking of the resident entries.

    This cache is not safe to share between concurrent joins.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._entries: dict[V, CacheEntry[V]] = {}
        self._loads = 0

    @property
    def capacity(self) -> int:
        """The maximum number of resident values."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        """Whether another value can only be loaded after an eviction."""
        return len(self._entries) >= self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: object) -> bool:
        return value in self._entries

    def __repr__(self) -> str:
        values = ", ".join(str(e.value) for e in self._entries.values())
        return f"{type(self).__name__}<{self._capacity}>[{values}]"

    def clear(self) -> None:
        """Remove every resident value."""
        self._entries.clear()

    def load(self, value: V) -> None:
        """
        Make `value` resident.

        Loading a value that is already resident does nothing.

        Parameters
        ----------
        value :
            The value to load.

        Raises
        ------
        CapacityViolation
            If the cache is full. Callers must evict first.
        """
        if value in self._entries:
            return
        if self.is_full:
            raise CapacityViolation(f"Cannot load {value} into full cache {self!r}")
        self._entries[value] = CacheEntry(value=value, order=self._loads)
        self._loads += 1

    def values(self) -> set[V]:
        """Return a copy of the resident values."""
        return set(self._entries)

    def entries(self) -> list[CacheEntry[V]]:
        """Return the resident entries, oldest first."""
        return list(self._entries.values())

    def evict(self, rank: Callable[[CacheEntry[V]], Any]) -> V:
        """
        Remove and return the resident value with the smallest rank.

        Parameters
        ----------
        rank :
            Computes a comparable rank for each entry. Entries with equal rank
            are evicted oldest first.

        Returns
        -------
        :
            The evicted value.

        Raises
        ------
        EmptyCacheError
            If nothing is resident.
        """
        if not self._entries:
            raise EmptyCacheError(f"Cannot evict from empty cache {self!r}")
        victim = min(self._entries.values(), key=rank)
        del self._entries[victim.value]
        logger.debug("Evicted %s from %r", victim.value, self)
        return victim.value
