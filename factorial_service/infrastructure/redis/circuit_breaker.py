"""
Cache Circuit Breaker Implementation

Implements the circuit breaker pattern for cache store operations so that a
Redis outage costs one fast rejection per request instead of a socket timeout.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from .exceptions import CacheCircuitOpenException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation
    OPEN = "open"  # Failing, reject calls
    HALF_OPEN = "half_open"  # Probing whether the store recovered


@dataclass
class CircuitBreakerConfig:
    """Configuration for circuit breaker."""

    # Consecutive failures before opening
    failure_threshold: int = 5

    # Seconds to wait in OPEN before probing again
    recovery_timeout: float = 30.0

    # Successful probes needed to close again
    success_threshold: int = 1

    # Timeout for individual operations
    operation_timeout: float = 10.0

    # Exception types that count as store failures
    failure_exceptions: tuple = (
        RedisConnectionError,
        RedisTimeoutError,
        asyncio.TimeoutError,
        OSError,
    )


@dataclass
class CircuitBreakerMetrics:
    """Counters for circuit breaker monitoring."""

    total_calls: int = 0
    successful_calls: int = 0
    failed_calls: int = 0
    rejected_calls: int = 0
    circuit_opens: int = 0


class CacheCircuitBreaker:
    """
    Circuit breaker for cache operations.

    Errors outside ``failure_exceptions`` (for example a WRONGTYPE reply)
    pass through without touching the circuit state.
    """

    def __init__(
        self,
        config: Optional[CircuitBreakerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or CircuitBreakerConfig()
        self.state = CircuitState.CLOSED
        self.failure_count = 0
        self.success_count = 0
        self.opened_at: Optional[float] = None
        self.metrics = CircuitBreakerMetrics()
        self._clock = clock
        self._lock = asyncio.Lock()

    async def call(
        self, operation: str, func: Callable[..., Awaitable[T]], *args, **kwargs
    ) -> T:
        """
        Execute an async operation with circuit breaker protection.

        Args:
            operation: Operation name used in logs and exceptions
            func: Coroutine function to execute
            *args: Function arguments
            **kwargs: Function keyword arguments

        Returns:
            Function result

        Raises:
            CacheCircuitOpenException: If the circuit is open
            Exception: Original exception from the operation
        """
        async with self._lock:
            self.metrics.total_calls += 1
            if self.state == CircuitState.OPEN:
                if self._should_attempt_reset():
                    self._transition(CircuitState.HALF_OPEN)
                else:
                    self.metrics.rejected_calls += 1
                    raise CacheCircuitOpenException(operation=operation)

        try:
            result = await asyncio.wait_for(
                func(*args, **kwargs), timeout=self.config.operation_timeout
            )
        except self.config.failure_exceptions as e:
            await self._record_failure(operation, e)
            raise

        await self._record_success()
        return result

    async def _record_success(self) -> None:
        async with self._lock:
            self.metrics.successful_calls += 1

            if self.state == CircuitState.HALF_OPEN:
                self.success_count += 1
                if self.success_count >= self.config.success_threshold:
                    self._transition(CircuitState.CLOSED)
            elif self.state == CircuitState.CLOSED:
                self.failure_count = 0

    async def _record_failure(self, operation: str, error: Exception) -> None:
        async with self._lock:
            self.metrics.failed_calls += 1

            if self.state == CircuitState.HALF_OPEN:
                self._transition(CircuitState.OPEN)
            elif self.state == CircuitState.CLOSED:
                self.failure_count += 1
                if self.failure_count >= self.config.failure_threshold:
                    self._transition(CircuitState.OPEN)

            logger.debug(
                f"Circuit breaker recorded failure for {operation}",
                extra={
                    "operation": operation,
                    "exception_type": type(error).__name__,
                    "failure_count": self.failure_count,
                    "state": self.state.value,
                },
            )

    def _transition(self, new_state: CircuitState) -> None:
        """Move to ``new_state``; caller must hold the lock."""
        previous = self.state
        self.state = new_state
        self.success_count = 0

        if new_state == CircuitState.OPEN:
            self.opened_at = self._clock()
            self.metrics.circuit_opens += 1
        elif new_state == CircuitState.CLOSED:
            self.failure_count = 0
            self.opened_at = None

        logger.warning(
            f"Cache circuit breaker: {previous.value} -> {new_state.value}",
            extra={
                "previous_state": previous.value,
                "state": new_state.value,
                "failure_count": self.failure_count,
            },
        )

    def _should_attempt_reset(self) -> bool:
        if self.opened_at is None:
            return True
        return self._clock() - self.opened_at >= self.config.recovery_timeout

    def get_status(self) -> Dict[str, Any]:
        """Get current circuit breaker status for monitoring."""
        return {
            "state": self.state.value,
            "failure_count": self.failure_count,
            "metrics": {
                "total_calls": self.metrics.total_calls,
                "successful_calls": self.metrics.successful_calls,
                "failed_calls": self.metrics.failed_calls,
                "rejected_calls": self.metrics.rejected_calls,
                "circuit_opens": self.metrics.circuit_opens,
            },
            "config": {
                "failure_threshold": self.config.failure_threshold,
                "recovery_timeout": self.config.recovery_timeout,
                "success_threshold": self.config.success_threshold,
                "operation_timeout": self.config.operation_timeout,
            },
        }
