from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from .interfaces import CacheDecoratorInterface

F = TypeVar("F", bound=Callable[..., Any])


class BaseCacheableClass:
    def __init__(self, cache_decorator: CacheDecoratorInterface) -> None:
        self._cache_decorator = cache_decorator

    def wrapped(self, func: F) -> F:
        return self._cache_decorator()(func)  # type: ignore

    @classmethod
    def cache(cls, ttl: float | None = None, bypass_param: str | None = None) -> Callable[[F], F]:
        """Memoize an async method through the instance's cache decorator.

        ttl: seconds to keep the result; the decorator's default when None.
        bypass_param: name of a boolean parameter that, when true, skips the
        cache read but still stores the fresh result.
        """

        def decorator(func: F) -> F:
            @wraps(func)
            async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                if not hasattr(self, "_cache_decorator"):
                    raise AttributeError("_cache_decorator not found. Did you call super().__init__?")
                return await self._cache_decorator(ttl=ttl, bypass_param=bypass_param)(func)(self, *args, **kwargs)

            return wrapper  # type: ignore

        return decorator
