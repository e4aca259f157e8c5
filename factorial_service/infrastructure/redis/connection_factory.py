"""
Redis Connection Factory

Builds the single shared Redis client used by the factorial cache.
The client is created lazily connected; nothing touches the network until
the first command or an explicit ``verify_connection``.
"""

import logging
from urllib.parse import urlparse

from redis.asyncio import Redis
from redis.exceptions import AuthenticationError as RedisAuthError
from redis.exceptions import RedisError

from ...core.config import Settings
from .circuit_breaker import CacheCircuitBreaker, CircuitBreakerConfig
from .exceptions import CacheConfigurationException, CacheConnectionException

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> Redis:
    """
    Create a single-connection Redis client from settings.

    Raises:
        CacheConfigurationException: If REDIS_URL cannot be parsed
    """
    try:
        client = Redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            single_connection_client=True,
            socket_connect_timeout=settings.REDIS_CONNECTION_TIMEOUT,
            socket_timeout=settings.REDIS_OPERATION_TIMEOUT,
        )
    except ValueError as e:
        raise CacheConfigurationException(
            message=f"Invalid Redis URL: {e}",
            config_key="REDIS_URL",
        ) from e

    logger.info(
        "Redis client configured",
        extra={"endpoint": redis_endpoint(settings.REDIS_URL)},
    )
    return client


def redis_endpoint(url: str) -> str:
    """Return host:port for a Redis URL without credentials."""
    parsed_url = urlparse(url)
    if parsed_url.scheme == "unix":
        return parsed_url.path
    return f"{parsed_url.hostname or 'localhost'}:{parsed_url.port or 6379}"


def create_circuit_breaker(settings: Settings) -> CacheCircuitBreaker:
    """Create the circuit breaker guarding the shared Redis client."""
    return CacheCircuitBreaker(
        CircuitBreakerConfig(
            failure_threshold=settings.CIRCUIT_BREAKER_FAILURE_THRESHOLD,
            recovery_timeout=settings.CIRCUIT_BREAKER_RECOVERY_TIMEOUT,
            operation_timeout=settings.REDIS_OPERATION_TIMEOUT
            + settings.REDIS_CONNECTION_TIMEOUT,
        )
    )


async def verify_connection(client: Redis, endpoint: str) -> None:
    """
    Ping Redis once.

    Raises:
        CacheConnectionException: If Redis is unreachable or rejects the credentials
    """
    try:
        await client.ping()
    except RedisAuthError as e:
        raise CacheConnectionException(
            message="Redis authentication failed", url=endpoint, original_error=e
        )
    except (RedisError, OSError) as e:
        raise CacheConnectionException(
            message="Redis connection test failed", url=endpoint, original_error=e
        )
    logger.debug("Redis connection test successful")
