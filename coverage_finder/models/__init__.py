from .cache_item import MISSING, CacheItem
from .search_result import SearchResult

__all__ = ["MISSING", "CacheItem", "SearchResult"]
