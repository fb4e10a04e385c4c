import logging
import math
import time
from typing import Any, cast

from ...interfaces import CacheInterface
from ...models import MISSING, CacheItem

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 500
EVICTION_FRACTION = 0.1


class InMemoryCache(CacheInterface):
    """Process-wide TTL cache.

    Expired entries are dropped lazily on read and eagerly on every write.
    When a write finds more than ``max_entries`` live entries, the 10% of
    them closest to expiry are evicted before the new value is stored.

    None of the methods await anything, so under asyncio each call runs to
    completion without interleaving with another. Threads sharing the
    instance must serialize access themselves.
    """

    _instance: "InMemoryCache | None" = None
    cache: dict[str, CacheItem]
    max_entries: int

    def __new__(cls, max_entries: int | None = None) -> "InMemoryCache":
        if cls._instance is None:
            cls._instance = cast(InMemoryCache, super().__new__(cls))
            cls._instance.cache = {}
            cls._instance.max_entries = DEFAULT_MAX_ENTRIES
        if max_entries is not None:
            cls._instance.max_entries = max_entries
        return cls._instance

    async def set(self, key: str, value: Any, ttl: float) -> None:
        now = time.time()
        self._evict_if_needed(now)
        self.cache[key] = CacheItem(value, now + ttl)

    async def get(self, key: str) -> Any:
        item = self.cache.get(key)
        if item is None:
            return MISSING
        if time.time() < item.expire_at:
            return item.value
        del self.cache[key]  # Remove expired item
        return MISSING

    async def clear(self) -> None:
        self.cache.clear()

    async def size(self) -> int:
        return len(self.cache)

    def _prune_expired(self, now: float) -> None:
        expired = [key for key, item in self.cache.items() if item.expire_at <= now]
        for key in expired:
            del self.cache[key]

    def _evict_if_needed(self, now: float) -> None:
        self._prune_expired(now)
        if len(self.cache) <= self.max_entries:
            return

        by_expiry = sorted(self.cache.items(), key=lambda entry: entry[1].expire_at)
        to_remove = math.ceil(len(by_expiry) * EVICTION_FRACTION)
        for key, _ in by_expiry[:to_remove]:
            del self.cache[key]
        logger.debug(f"Evicted {to_remove} entries closest to expiry, {len(self.cache)} remain")
