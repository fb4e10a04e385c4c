from .in_memory.cache import InMemoryCache
from .in_memory.decorator import InMemoryCacheDecorator


class AsyncCacheDecoratorFactory:
    @classmethod
    async def inmemory(cls, default_ttl: float = 60, max_entries: int | None = None) -> InMemoryCacheDecorator:
        cache = InMemoryCache(max_entries=max_entries)
        return InMemoryCacheDecorator(cache, default_ttl)

    @classmethod
    async def from_inmemory_cache(cls, cache: InMemoryCache, default_ttl: float = 60) -> InMemoryCacheDecorator:
        return InMemoryCacheDecorator(cache, default_ttl)
