import pytest

from coverage_finder import InMemoryCache
from coverage_finder.cache.in_memory import DEFAULT_MAX_ENTRIES


@pytest.fixture
async def cache():
    cache = InMemoryCache(max_entries=DEFAULT_MAX_ENTRIES)
    await cache.clear()
    yield cache
    await cache.clear()
    cache.max_entries = DEFAULT_MAX_ENTRIES
