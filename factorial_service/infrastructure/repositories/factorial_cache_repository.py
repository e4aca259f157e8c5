"""
Factorial Cache Repository Implementations

Concrete implementations of FactorialCacheStore.

- RedisFactorialCacheStore: one shared Redis connection, borrowed under an
  asyncio.Lock for exactly one GET or one SET at a time.
- InMemoryFactorialCacheStore: process-local store with TTL semantics and an
  injectable clock, used for tests and single-process deployments.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from redis.asyncio import Redis
from redis.exceptions import RedisError, ResponseError

from ...core.config import Settings
from ...domain.factorial.repository_interfaces import FactorialCacheStore
from ...domain.factorial.value_objects import CacheLookup
from ..redis.circuit_breaker import CacheCircuitBreaker
from ..redis.connection_factory import (
    create_circuit_breaker,
    create_redis_client,
    redis_endpoint,
    verify_connection,
)
from ..redis.exceptions import (
    CacheCircuitOpenException,
    CacheConnectionException,
    CacheTransportException,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

T = TypeVar("T")


def _is_wrong_type(error: ResponseError) -> bool:
    return str(error).startswith("WRONGTYPE")


class RedisFactorialCacheStore(FactorialCacheStore):
    """
    Redis-backed factorial cache.

    The Redis client is a single connection shared by every request. Access
    is mutually exclusive per command; the lock is never held across anything
    but the command itself.
    """

    def __init__(
        self,
        client: Redis,
        circuit_breaker: Optional[CacheCircuitBreaker] = None,
        endpoint: str = "redis",
    ):
        self.client = client
        self.circuit_breaker = circuit_breaker or CacheCircuitBreaker()
        self.endpoint = endpoint
        self._lock = asyncio.Lock()

    async def _execute(
        self, operation: str, func: Callable[[Redis], Awaitable[T]]
    ) -> T:
        """Run one command against the shared connection."""
        async with self._lock:
            return await self.circuit_breaker.call(operation, func, self.client)

    async def get(self, key: str) -> CacheLookup:
        with tracer.start_as_current_span("factorial.cache.get") as span:
            span.set_attribute("cache.key", key)
            try:
                value = await self._execute("get", lambda client: client.get(key))
            except CacheCircuitOpenException as e:
                span.set_status(Status(StatusCode.ERROR, e.message))
                return CacheLookup.transport_error(e.message)
            except UnicodeDecodeError:
                # Stored bytes are not a decimal string; overwritten on the next SET
                span.set_attribute("cache.lookup", "absent")
                return CacheLookup.absent()
            except ResponseError as e:
                if _is_wrong_type(e):
                    span.set_attribute("cache.lookup", "absent")
                    return CacheLookup.absent()
                span.set_status(Status(StatusCode.ERROR, str(e)))
                return CacheLookup.transport_error(f"{type(e).__name__}: {e}")
            except (RedisError, OSError, asyncio.TimeoutError) as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                return CacheLookup.transport_error(f"{type(e).__name__}: {e}")

            if value is None:
                span.set_attribute("cache.lookup", "absent")
                return CacheLookup.absent()

            span.set_attribute("cache.lookup", "found")
            return CacheLookup.found(value)

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None:
        with tracer.start_as_current_span("factorial.cache.set") as span:
            span.set_attribute("cache.key", key)
            span.set_attribute("cache.ttl_seconds", ttl_seconds)
            try:
                await self._execute(
                    "set", lambda client: client.set(key, value, ex=ttl_seconds)
                )
            except CacheCircuitOpenException as e:
                e.details["key"] = key
                span.set_status(Status(StatusCode.ERROR, e.message))
                raise
            except (RedisError, OSError, asyncio.TimeoutError) as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                raise CacheTransportException(
                    operation="set", key=key, original_error=e
                )

    async def ping(self) -> bool:
        try:
            async with self._lock:
                await verify_connection(self.client, self.endpoint)
            return True
        except CacheConnectionException as e:
            logger.warning(
                f"Redis ping failed: {e.message}",
                extra={"endpoint": self.endpoint, **e.details},
            )
            return False

    async def close(self) -> None:
        async with self._lock:
            await self.client.aclose()
        logger.info("Redis factorial cache closed", extra={"endpoint": self.endpoint})

    def get_status(self) -> Dict[str, Any]:
        return {
            "backend": "redis",
            "endpoint": self.endpoint,
            "circuit_breaker": self.circuit_breaker.get_status(),
        }


class InMemoryFactorialCacheStore(FactorialCacheStore):
    """
    Process-local factorial cache with per-entry expiration.

    Expired entries are dropped lazily on read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[float, str]] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> CacheLookup:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return CacheLookup.absent()

            expires_at, value = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return CacheLookup.absent()

            return CacheLookup.found(value)

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None:
        async with self._lock:
            self._entries[key] = (self._clock() + ttl_seconds, value)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        async with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def get_status(self) -> Dict[str, Any]:
        return {"backend": "memory", "entries": len(self._entries)}


def create_factorial_cache_store(settings: Settings) -> FactorialCacheStore:
    """Build the cache store selected by ``CACHE_BACKEND``."""
    if settings.CACHE_BACKEND == "memory":
        logger.info("Using in-memory factorial cache")
        return InMemoryFactorialCacheStore()

    return RedisFactorialCacheStore(
        client=create_redis_client(settings),
        circuit_breaker=create_circuit_breaker(settings),
        endpoint=redis_endpoint(settings.REDIS_URL),
    )
