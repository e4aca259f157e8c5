"""
Factorial Cache Repository Interfaces

Abstract repository interface following the DDD Repository pattern.
Defines the contract every factorial cache backend implements.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .value_objects import CacheLookup


class FactorialCacheStore(ABC):
    """
    Abstract store mapping decimal input numbers to decimal factorials.

    Implementations own their connection and serialize access to it per
    operation. Expiration is owned by the store; callers never delete.
    """

    @abstractmethod
    async def get(self, key: str) -> CacheLookup:
        """
        Look up a cached factorial.

        Never raises for cache failures: a missing or wrongly typed entry
        is ABSENT, anything else is TRANSPORT_ERROR.
        """
        pass

    @abstractmethod
    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Store a factorial that expires after ``ttl_seconds``.

        Raises:
            CacheTransportException: If the write could not be performed
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the backing store is reachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass

    def get_status(self) -> Dict[str, Any]:
        """Describe the store for health reporting."""
        return {"backend": type(self).__name__}
