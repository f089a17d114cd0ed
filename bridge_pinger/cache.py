import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)

RouteCacheKey = Tuple[str, float, str, str]


@dataclass
class CacheEntry:
    value: Any
    created_at: float


class RouteCache:
    """In-memory TTL cache for aggregated route responses.

    Expired entries are invisible to readers and dropped on read. Every
    write also sweeps the whole map for stale entries. There is no size
    bound; the TTL is the only thing that keeps it small.
    """

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds or settings.cache_ttl_seconds
        self._clock = clock
        self._cache: Dict[Hashable, CacheEntry] = {}
        self._lock = asyncio.Lock()

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at > self.ttl_seconds

    async def get(self, key: Hashable) -> Optional[Any]:
        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            now = self._clock()
            if self._expired(entry, now):
                del self._cache[key]
                return None

            logger.debug("Cache hit for %s (age: %ds)", key, round(now - entry.created_at))
            return entry.value

    async def set(self, key: Hashable, value: Any) -> None:
        async with self._lock:
            now = self._clock()
            self._cache[key] = CacheEntry(value=value, created_at=now)
            logger.debug("Cached data for %s", key)

            stale = [k for k, entry in self._cache.items() if self._expired(entry, now)]
            for k in stale:
                del self._cache[k]
            if stale:
                logger.info("Cleaned up %d expired cache entries", len(stale))

    async def clear(self) -> None:
        async with self._lock:
            self._cache.clear()

    def size(self) -> int:
        return len(self._cache)

    def stats(self) -> Dict[str, int]:
        return {"size": len(self._cache), "ttl_seconds": self.ttl_seconds}


def route_cache_key(token: str, amount: float, from_chain: str, to_chain: str) -> RouteCacheKey:
    return (token, amount, from_chain, to_chain)


__all__ = ["CacheEntry", "RouteCache", "RouteCacheKey", "route_cache_key"]
