from abc import ABC, abstractmethod
from collections.abc import Callable


class CacheDecoratorInterface(ABC):
    @abstractmethod
    def __call__(self, ttl: float | None = None, bypass_param: str | None = None) -> Callable:
        pass
