from dataclasses import dataclass
from typing import Any


class _Missing:
    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


# Returned by cache reads on a miss. None is a legitimate cached value.
MISSING: Any = _Missing()


@dataclass
class CacheItem:
    value: Any
    expire_at: float
