"""
Factorial Cache Service

Cache-aside orchestration for factorial requests: look up the decimal result,
compute it on a miss, store it with a TTL and report hit or miss.
"""

import asyncio
import logging
from typing import Callable

from opentelemetry import trace

from ...domain.factorial.factorial import factorial_decimal
from ...domain.factorial.repository_interfaces import FactorialCacheStore
from ...domain.factorial.value_objects import (
    TTL,
    CacheKey,
    CacheLookup,
    CacheLookupStatus,
    CacheStatus,
    ComputationResult,
)
from ...infrastructure.redis.exceptions import FactorialCacheException

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class FactorialCacheService:
    """
    Computes factorials with the cache store as a best-effort memo.

    Cache failures never surface to the caller: a failed read is treated as
    a miss and a failed write is dropped. Both are logged.
    """

    def __init__(
        self,
        store: FactorialCacheStore,
        ttl: TTL,
        calculator: Callable[[int], str] = factorial_decimal,
    ):
        self.store = store
        self.ttl = ttl
        self.calculator = calculator

    async def compute(self, input_number: int) -> ComputationResult:
        """
        Return the factorial of ``input_number`` and whether it was cached.

        The input must already be validated against the upper limit.
        """
        key = CacheKey.for_input(input_number)

        with tracer.start_as_current_span("factorial.compute") as span:
            span.set_attribute("factorial.input_number", input_number)

            lookup = await self._lookup(key)
            if lookup.is_found:
                span.set_attribute("factorial.cache_status", CacheStatus.HIT.value)
                return ComputationResult(
                    value=lookup.value, cache_status=CacheStatus.HIT
                )

            if lookup.status == CacheLookupStatus.TRANSPORT_ERROR:
                logger.error(
                    f"Factorial cache read failed: {lookup.error}",
                    extra={"key": key.value, "operation": "get"},
                )

            # CPU-bound; runs in a worker thread with no cache lock held
            value = await asyncio.to_thread(self.calculator, input_number)

            await self._store(key, value)

            span.set_attribute("factorial.cache_status", CacheStatus.MISS.value)
            return ComputationResult(value=value, cache_status=CacheStatus.MISS)

    async def _lookup(self, key: CacheKey) -> CacheLookup:
        try:
            return await self.store.get(key.value)
        except FactorialCacheException as e:
            return CacheLookup.transport_error(e.message)
        except Exception as e:
            return CacheLookup.transport_error(f"{type(e).__name__}: {e}")

    async def _store(self, key: CacheKey, value: str) -> None:
        try:
            await self.store.set_with_ttl(key.value, value, self.ttl.seconds)
        except FactorialCacheException as e:
            logger.error(
                f"Factorial cache write failed: {e.message}",
                extra={"key": key.value, "operation": "set", "error_code": e.error_code},
            )
        except Exception as e:
            logger.error(
                f"Factorial cache write failed: {type(e).__name__}: {e}",
                extra={"key": key.value, "operation": "set"},
            )
