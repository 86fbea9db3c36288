# chromalogo/cache/lru.py
"""
Bounded least-recently-used cache with optional time-based expiry.

Public API
----------
- LRUCache[V]: ``get`` / ``set`` / ``has`` / ``delete`` / ``clear`` plus
  ``stats``, ``keys``, ``prune``, ``hot_keys`` and ``reset_stats``.
- CacheStats: immutable snapshot returned by :meth:`LRUCache.stats`.

Design notes
------------
- Recency is kept by an :class:`collections.OrderedDict` (oldest first), so
  lookup, promotion and eviction are all O(1).
- Expiry is measured from insertion, or from the last access when
  ``refresh_age_on_access`` is on ("sliding" expiry). An expired entry is
  removed the moment it is observed and reads as a miss.
- Every public method takes the instance lock; ``get`` mutates recency, so
  even reads need it when a cache is shared between threads.
- A cache is an optimization. Nothing here raises for ordinary use.

Python 3.9+ compatible.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar


__all__ = ["LRUCache", "CacheStats"]

V = TypeVar("V")

logger = logging.getLogger("chromalogo.cache")


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time counters for one cache.

    ``hit_rate`` is a fraction in [0, 1] and is 0.0 before the first ``get``.
    """

    hits: int
    misses: int
    size: int
    max_size: int
    hit_rate: float
    evictions: int = 0
    expirations: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


class _Entry(Generic[V]):
    __slots__ = ("value", "stamp", "access_count")

    def __init__(self, value: V, stamp: float) -> None:
        self.value = value
        self.stamp = stamp
        self.access_count = 1


class LRUCache(Generic[V]):
    """Least-recently-used cache keyed by strings.

    Parameters
    ----------
    max_size : int, default 1000
        Maximum number of live entries. Must be positive.
    max_age : float | None, default None
        Seconds an entry stays readable. ``None`` disables expiry.
    refresh_age_on_access : bool, default True
        If True, a successful ``get`` restarts the entry's age.
    clock : Callable[[], float], default time.monotonic
        Time source in seconds; injectable for tests.
    name : str, default "cache"
        Label used in log lines.
    """

    def __init__(
        self,
        max_size: int = 1000,
        max_age: Optional[float] = None,
        refresh_age_on_access: bool = True,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be a positive integer.")
        if max_age is not None and max_age <= 0:
            raise ValueError("max_age must be positive when given.")
        self.max_size = int(max_size)
        self.max_age = max_age
        self.refresh_age_on_access = refresh_age_on_access
        self.name = name
        self._clock = clock
        self._data: "OrderedDict[str, _Entry[V]]" = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    # ---- internals ----------------------------------------------------------

    def _is_expired(self, entry: _Entry[V], now: float) -> bool:
        return self.max_age is not None and now - entry.stamp > self.max_age

    def _drop_if_expired(self, key: str, now: float) -> Optional[_Entry[V]]:
        """Return the live entry for ``key``; remove and return None if stale."""
        entry = self._data.get(key)
        if entry is None:
            return None
        if self._is_expired(entry, now):
            del self._data[key]
            self._expirations += 1
            logger.debug("[%s] expired %r", self.name, key)
            return None
        return entry

    # ---- mapping-like API ---------------------------------------------------

    def get(self, key: str) -> Optional[V]:
        """Return the cached value, or None on a miss.

        A hit promotes the entry to most-recently-used.
        """
        with self._lock:
            now = self._clock()
            entry = self._drop_if_expired(key, now)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            entry.access_count += 1
            if self.refresh_age_on_access:
                entry.stamp = now
            self._data.move_to_end(key)
            return entry.value

    def set(self, key: str, value: V) -> None:
        """Insert or replace ``key``; evict the least-recent entry if full."""
        with self._lock:
            now = self._clock()
            entry = self._data.get(key)
            if entry is not None:
                entry.value = value
                entry.stamp = now
                entry.access_count += 1
                self._data.move_to_end(key)
                return

            self._data[key] = _Entry(value, now)
            while len(self._data) > self.max_size:
                old_key, _ = self._data.popitem(last=False)
                self._evictions += 1
                logger.debug("[%s] evicted %r", self.name, old_key)

    def has(self, key: str) -> bool:
        """Return True if ``key`` is live. Does not touch recency or counters."""
        with self._lock:
            return self._drop_if_expired(key, self._clock()) is not None

    def delete(self, key: str) -> bool:
        """Remove ``key``; return True if a live entry was removed."""
        with self._lock:
            if self._drop_if_expired(key, self._clock()) is None:
                return False
            del self._data[key]
            return True

    def clear(self) -> None:
        """Drop all entries and reset every counter."""
        with self._lock:
            self._data.clear()
            self.reset_stats()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    # ---- maintenance / introspection ----------------------------------------

    def prune(self) -> int:
        """Remove every expired entry now; return how many were removed."""
        with self._lock:
            if self.max_age is None:
                return 0
            now = self._clock()
            stale = [k for k, e in self._data.items() if self._is_expired(e, now)]
            for key in stale:
                del self._data[key]
            self._expirations += len(stale)
            if stale:
                logger.debug("[%s] pruned %d stale entries", self.name, len(stale))
            return len(stale)

    def keys(self) -> List[str]:
        """Return live keys from least- to most-recently used."""
        with self._lock:
            self.prune()
            return list(self._data)

    def hot_keys(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Return ``(key, access_count)`` pairs, most accessed first."""
        with self._lock:
            ranked = sorted(self._data.items(), key=lambda kv: kv[1].access_count, reverse=True)
            return [(k, e.access_count) for k, e in ranked[:limit]]

    def reset_stats(self) -> None:
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._evictions = 0
            self._expirations = 0

    def stats(self) -> CacheStats:
        with self._lock:
            total = self._hits + self._misses
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._data),
                max_size=self.max_size,
                hit_rate=(self._hits / total) if total else 0.0,
                evictions=self._evictions,
                expirations=self._expirations,
            )
