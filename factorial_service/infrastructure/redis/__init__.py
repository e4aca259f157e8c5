"""
Redis Infrastructure Module

Client construction, circuit breaker protection and exceptions for the
Redis-backed factorial cache.
"""

from .circuit_breaker import (
    CacheCircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerMetrics,
    CircuitState,
)
from .connection_factory import (
    create_circuit_breaker,
    create_redis_client,
    redis_endpoint,
    verify_connection,
)
from .exceptions import (
    CacheCircuitOpenException,
    CacheConfigurationException,
    CacheConnectionException,
    CacheTransportException,
    FactorialCacheException,
)

__all__ = [
    # Circuit breaker
    "CacheCircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitBreakerMetrics",
    "CircuitState",
    # Connection management
    "create_circuit_breaker",
    "create_redis_client",
    "redis_endpoint",
    "verify_connection",
    # Exceptions
    "FactorialCacheException",
    "CacheConnectionException",
    "CacheTransportException",
    "CacheCircuitOpenException",
    "CacheConfigurationException",
]
