"""
Unit tests for CacheCircuitBreaker.

Covers the CLOSED -> OPEN -> HALF_OPEN -> CLOSED cycle with a fake clock.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from factorial_service.infrastructure.redis.circuit_breaker import (
    CacheCircuitBreaker,
    CircuitBreakerConfig,
    CircuitState,
)
from factorial_service.infrastructure.redis.exceptions import CacheCircuitOpenException


@pytest.fixture
def breaker(clock):
    return CacheCircuitBreaker(
        CircuitBreakerConfig(
            failure_threshold=3, recovery_timeout=10.0, success_threshold=1
        ),
        clock=clock,
    )


async def _fail(breaker, times=1):
    failing = AsyncMock(side_effect=RedisConnectionError("Connection refused"))
    for _ in range(times):
        with pytest.raises(RedisConnectionError):
            await breaker.call("get", failing)


class TestCacheCircuitBreaker:
    """Test circuit breaker state machine."""

    @pytest.mark.asyncio
    async def test_success_passes_through(self, breaker):
        operation = AsyncMock(return_value="720")

        result = await breaker.call("get", operation, "6")

        assert result == "720"
        operation.assert_awaited_once_with("6")
        assert breaker.state == CircuitState.CLOSED
        assert breaker.metrics.successful_calls == 1

    @pytest.mark.asyncio
    async def test_opens_after_threshold(self, breaker):
        await _fail(breaker, times=2)
        assert breaker.state == CircuitState.CLOSED

        await _fail(breaker)

        assert breaker.state == CircuitState.OPEN
        assert breaker.metrics.circuit_opens == 1

    @pytest.mark.asyncio
    async def test_open_circuit_rejects_without_calling(self, breaker):
        await _fail(breaker, times=3)
        operation = AsyncMock()

        with pytest.raises(CacheCircuitOpenException):
            await breaker.call("get", operation)

        operation.assert_not_awaited()
        assert breaker.metrics.rejected_calls == 1

    @pytest.mark.asyncio
    async def test_half_open_success_closes(self, breaker, clock):
        await _fail(breaker, times=3)
        clock.advance(10.0)

        await breaker.call("get", AsyncMock(return_value=None))

        assert breaker.state == CircuitState.CLOSED
        assert breaker.failure_count == 0

    @pytest.mark.asyncio
    async def test_half_open_failure_reopens(self, breaker, clock):
        await _fail(breaker, times=3)
        clock.advance(10.0)

        await _fail(breaker)

        assert breaker.state == CircuitState.OPEN
        assert breaker.metrics.circuit_opens == 2
        with pytest.raises(CacheCircuitOpenException):
            await breaker.call("get", AsyncMock())

    @pytest.mark.asyncio
    async def test_success_resets_failure_count(self, breaker):
        await _fail(breaker, times=2)

        await breaker.call("get", AsyncMock(return_value=None))
        await _fail(breaker, times=2)

        assert breaker.state == CircuitState.CLOSED

    @pytest.mark.asyncio
    async def test_non_failure_exception_ignored(self, breaker):
        wrong_type = AsyncMock(side_effect=ResponseError("WRONGTYPE"))

        for _ in range(5):
            with pytest.raises(ResponseError):
                await breaker.call("get", wrong_type)

        assert breaker.state == CircuitState.CLOSED
        assert breaker.metrics.failed_calls == 0

    def test_get_status(self, breaker):
        status = breaker.get_status()

        assert status["state"] == "closed"
        assert status["config"]["failure_threshold"] == 3
        assert status["metrics"]["total_calls"] == 0
