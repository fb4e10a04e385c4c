from unittest.mock import MagicMock

import pytest

from coverage_finder import BaseCacheableClass, CacheDecoratorInterface, InMemoryCacheDecorator


class MockCacheDecorator(CacheDecoratorInterface):
    def __init__(self):
        self.call_count = 0
        self.calls = []

    def __call__(self, ttl=None, bypass_param=None):
        def decorator(func):
            async def wrapper(*args, **kwargs):
                self.call_count += 1
                self.calls.append((ttl, bypass_param))
                return await func(*args, **kwargs)

            return wrapper

        return decorator


class TestService(BaseCacheableClass):
    __test__ = False

    def __init__(self, cache_decorator):
        super().__init__(cache_decorator)
        self.fetches = 0

    @BaseCacheableClass.cache(ttl=60)
    async def get_data(self, key: str):
        self.fetches += 1
        return f"data_{key}"

    @BaseCacheableClass.cache(ttl=900, bypass_param="bypass_cache")
    async def get_fresh_data(self, key: str, bypass_cache: bool = False):
        self.fetches += 1
        return f"fresh_{key}_{self.fetches}"


class TestBaseCacheableClass:
    def test_init(self):
        mock_decorator = MockCacheDecorator()
        service = TestService(mock_decorator)
        assert service._cache_decorator == mock_decorator

    def test_wrapped(self):
        mock_decorator = MagicMock()
        mock_decorator.return_value.return_value = lambda x: x

        service = BaseCacheableClass(mock_decorator)

        def test_func():
            return "test"

        service.wrapped(test_func)
        mock_decorator.assert_called_once_with()
        mock_decorator.return_value.assert_called_once_with(test_func)

    @pytest.mark.asyncio
    async def test_cache_decorator(self):
        mock_decorator = MockCacheDecorator()
        service = TestService(mock_decorator)

        result = await service.get_data("test")
        assert result == "data_test"
        assert mock_decorator.call_count == 1
        assert mock_decorator.calls == [(60, None)]

    @pytest.mark.asyncio
    async def test_bypass_param_forwarded(self):
        mock_decorator = MockCacheDecorator()
        service = TestService(mock_decorator)

        await service.get_fresh_data("test", bypass_cache=True)
        assert mock_decorator.calls == [(900, "bypass_cache")]

    @pytest.mark.asyncio
    async def test_instances_share_the_process_cache(self, cache):
        decorator = InMemoryCacheDecorator(cache, default_ttl=60)
        first = TestService(decorator)
        second = TestService(decorator)

        assert await first.get_data("shared") == "data_shared"
        assert await second.get_data("shared") == "data_shared"
        assert first.fetches == 1
        assert second.fetches == 0

    @pytest.mark.asyncio
    async def test_bypass_with_real_cache(self, cache):
        service = TestService(InMemoryCacheDecorator(cache, default_ttl=60))

        assert await service.get_fresh_data("k") == "fresh_k_1"
        assert await service.get_fresh_data("k") == "fresh_k_1"
        assert await service.get_fresh_data("k", bypass_cache=True) == "fresh_k_2"
        assert await service.get_fresh_data("k") == "fresh_k_2"
        assert service.fetches == 2

    @pytest.mark.asyncio
    async def test_cache_decorator_without_init(self):
        """Test cache decorator raises error when _cache_decorator not found"""

        class BadService(BaseCacheableClass):
            def __init__(self):
                # Not calling super().__init__()
                pass

            @BaseCacheableClass.cache()
            async def get_data(self):
                return "data"

        service = BadService()
        with pytest.raises(AttributeError, match="_cache_decorator not found"):
            await service.get_data()


class Volumes(BaseCacheableClass):
    @BaseCacheableClass.cache(ttl=60)
    async def lookup(self, keyword: str):
        return {"volume": 1000}


class Rankings(BaseCacheableClass):
    @BaseCacheableClass.cache(ttl=60)
    async def lookup(self, keyword: str):
        return ["https://a.example"]


class TestSameNamedMethods:
    @pytest.mark.asyncio
    async def test_methods_on_different_classes_do_not_share_entries(self, cache):
        decorator = InMemoryCacheDecorator(cache, default_ttl=60)

        assert await Volumes(decorator).lookup("shoes") == {"volume": 1000}
        assert await Rankings(decorator).lookup("shoes") == ["https://a.example"]
        assert await cache.size() == 2
