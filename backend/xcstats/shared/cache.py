"""
In-memory query cache with per-entry expiry.

Memoizes expensive queries (sheet fetches, aggregations) for a short
window. The clock is injectable so tests can move time by hand.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 30.0


@dataclass(frozen=True)
class CacheEntry:
    """Cached value and the clock reading when it was stored."""

    value: Any
    stored_at: float


class QueryCache:
    """
    TTL cache keyed by query name + parameters.

    Keys are any hashable value, e.g. "available-years" or ("top-seven", 2025).
    There is no size bound. Expired entries are dropped on every write,
    so the cache only holds keys stored within the last ttl_seconds.

    Concurrent misses on the same key may each run the computation.
    Writes are serialized with an asyncio.Lock.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}
        self._lock = asyncio.Lock()

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at >= self.ttl_seconds

    def get(self, key: Hashable) -> Optional[CacheEntry]:
        """Return the live entry for key, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._is_expired(entry, self._clock()):
            del self._entries[key]
            return None
        return entry

    def _prune(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Pruned {len(expired)} expired cache entries")

    async def set(self, key: Hashable, value: Any) -> None:
        """Store value with the current clock reading, dropping expired entries."""
        async with self._lock:
            now = self._clock()
            self._prune(now)
            self._entries[key] = CacheEntry(value=value, stored_at=now)

    async def get_or_compute(
        self,
        key: Hashable,
        compute: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Return the cached value for key, computing it on a miss.

        Args:
            key: Query name, or tuple of name and parameters
            compute: Coroutine factory producing a fresh value

        Returns:
            Cached or freshly computed value
        """
        entry = self.get(key)
        if entry is not None:
            logger.debug(f"Cache hit: {key!r}")
            return entry.value

        logger.debug(f"Cache miss: {key!r}")
        value = await compute()
        await self.set(key, value)
        return value

    def clear(self) -> None:
        """Drop every entry."""
        count = len(self._entries)
        self._entries.clear()
        logger.info(f"Query cache cleared ({count} entries)")

    def __len__(self) -> int:
        return len(self._entries)
