from .factorial_cache_service import FactorialCacheService

__all__ = ["FactorialCacheService"]
