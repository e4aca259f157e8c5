from .factorial_cache_repository import (
    InMemoryFactorialCacheStore,
    RedisFactorialCacheStore,
    create_factorial_cache_store,
)

__all__ = [
    "InMemoryFactorialCacheStore",
    "RedisFactorialCacheStore",
    "create_factorial_cache_store",
]
