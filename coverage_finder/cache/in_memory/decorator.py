import inspect
import json
import logging
from collections.abc import Callable
from dataclasses import fields, is_dataclass
from functools import wraps
from typing import Any

from ...interfaces import CacheDecoratorInterface, CacheInterface
from ...models import MISSING

logger = logging.getLogger(__name__)


def _qualified_name(value: Any) -> str:
    return f"{getattr(value, '__module__', '')}.{getattr(value, '__qualname__', type(value).__qualname__)}"


def _tagged(value: Any) -> Any:
    """Map an argument to a JSON-safe structure that keeps its type.

    Plain dicts never appear in the output; every container is wrapped in a
    single-key tag object, so ``(1,)`` and ``[1]`` or ``{1: "x"}`` and
    ``{"1": "x"}`` encode differently.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, list):
        return {"list": [_tagged(item) for item in value]}
    if isinstance(value, tuple):
        return {"tuple": [_tagged(item) for item in value]}
    if isinstance(value, (set, frozenset)):
        items = sorted((_tagged(item) for item in value), key=json.dumps)
        return {type(value).__name__: items}
    if isinstance(value, dict):
        pairs = [[_tagged(k), _tagged(v)] for k, v in value.items()]
        return {"dict": sorted(pairs, key=lambda pair: json.dumps(pair[0]))}
    if is_dataclass(value) and not isinstance(value, type):
        fields_ = {field.name: _tagged(getattr(value, field.name)) for field in fields(value)}
        return {"dataclass": _qualified_name(type(value)), "fields": fields_}
    return {"repr": _qualified_name(type(value)), "value": repr(value)}


class InMemoryCacheDecorator(CacheDecoratorInterface):
    def __init__(self, cache: CacheInterface, default_ttl: float = 60):
        self.cache = cache
        self.default_ttl = default_ttl

    def key_builder(
        self, f: Callable[..., Any], *args: Any, bypass_param: str | None = None, **kwargs: Any
    ) -> str:
        """Build ``"<module.qualname>:<json params>"`` from the arguments bound to ``f``.

        Defaults are applied and keys are sorted, so positional and keyword
        spellings of the same call share a key. ``self`` and the bypass
        parameter do not take part in the key.
        """
        func_name = _qualified_name(f)
        try:
            bound = inspect.signature(f).bind(*args, **kwargs)
        except (TypeError, ValueError):
            params: dict[str, Any] = {"args": list(args), "kwargs": kwargs}
        else:
            bound.apply_defaults()
            params = {
                name: value
                for name, value in bound.arguments.items()
                if name not in ("self", bypass_param)
            }
        encoded = json.dumps(
            {name: _tagged(value) for name, value in params.items()}, sort_keys=True, separators=(",", ":")
        )
        return f"{func_name}:{encoded}"

    def _bypass_requested(self, f: Callable[..., Any], bypass_param: str | None, args: Any, kwargs: Any) -> bool:
        if bypass_param is None:
            return False
        if bypass_param in kwargs:
            return bool(kwargs[bypass_param])
        try:
            bound = inspect.signature(f).bind(*args, **kwargs)
        except (TypeError, ValueError):
            return False
        bound.apply_defaults()
        return bool(bound.arguments.get(bypass_param, False))

    def __call__(
        self, ttl: float | None = None, bypass_param: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            @wraps(func)
            async def wrapper(*args: Any, **kwargs: Any) -> Any:
                _key = self.key_builder(func, *args, bypass_param=bypass_param, **kwargs)
                current_ttl = ttl if ttl is not None else self.default_ttl

                if self._bypass_requested(func, bypass_param, args, kwargs):
                    logger.debug(f"Cache bypass requested for {_key}")
                else:
                    try:
                        cached_value = await self.cache.get(_key)
                    except Exception as e:
                        logger.error(f"Error reading cache: {e}")
                        cached_value = MISSING
                    if cached_value is not MISSING:
                        logger.debug(f"Cache hit for {_key}")
                        return cached_value
                    logger.debug(f"Cache miss for {_key}")

                result = await func(*args, **kwargs)

                if result is not None:
                    try:
                        await self.cache.set(_key, result, ttl=current_ttl)
                    except Exception as e:
                        logger.error(f"Error writing cache: {e}")

                return result

            return wrapper

        return decorator
