from .cache import DEFAULT_MAX_ENTRIES, InMemoryCache
from .decorator import InMemoryCacheDecorator

__all__ = ["DEFAULT_MAX_ENTRIES", "InMemoryCache", "InMemoryCacheDecorator"]
