from .cache import CacheInterface
from .decorator import CacheDecoratorInterface

__all__ = ["CacheInterface", "CacheDecoratorInterface"]
