import asyncio

from coverage_finder import BaseCacheableClass, InMemoryCache, InMemoryCacheDecorator


class RankingService(BaseCacheableClass):
    def __init__(self):
        cache = InMemoryCache()
        cache_decorator = InMemoryCacheDecorator(cache, default_ttl=300)  # 5 minutes default
        super().__init__(cache_decorator)

    @BaseCacheableClass.cache(ttl=2)
    async def top_pages(self, keyword: str, depth: int = 10):
        print(f"Fetching top {depth} pages for {keyword!r}...")
        # Simulate API call
        await asyncio.sleep(1)
        return [f"https://example.com/{keyword.replace(' ', '-')}/{i}" for i in range(1, depth + 1)]

    @BaseCacheableClass.cache(ttl=60, bypass_param="refresh")
    async def volume(self, keyword: str, refresh: bool = False):
        print(f"Fetching search volume for {keyword!r}...")
        await asyncio.sleep(1)
        return len(keyword) * 1000


async def main():
    service = RankingService()

    print("=== Ranking Service Example ===")

    print("\n1. First call - fetched:")
    print(await service.top_pages("cheap flights", depth=3))

    print("\n2. Same call with keyword arguments - cached:")
    print(await service.top_pages(keyword="cheap flights", depth=3))

    print("\n3. Forced refresh - fetched and stored again:")
    print(await service.volume("cheap flights", refresh=True))
    print(await service.volume("cheap flights"))

    print(f"\nEntries in cache: {await InMemoryCache().size()}")

    print("\n4. Waiting 3 seconds for top_pages to expire...")
    await asyncio.sleep(3)
    print(await service.top_pages("cheap flights", depth=3))


if __name__ == "__main__":
    asyncio.run(main())
