from .base import BaseCacheableClass
from .cache import AsyncCacheDecoratorFactory
from .cache.in_memory import InMemoryCache, InMemoryCacheDecorator
from .interfaces import CacheDecoratorInterface, CacheInterface
from .models import MISSING, CacheItem, SearchResult

__all__ = [
    "MISSING",
    "AsyncCacheDecoratorFactory",
    "BaseCacheableClass",
    "CacheInterface",
    "CacheDecoratorInterface",
    "CacheItem",
    "InMemoryCache",
    "InMemoryCacheDecorator",
    "SearchResult",
]
