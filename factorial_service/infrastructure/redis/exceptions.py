"""
Cache Infrastructure Exceptions

Infrastructure exceptions for cache store operations.
Every exception keeps the original error as its cause.
"""

from typing import Any, Dict, Optional


class FactorialCacheException(Exception):
    """Base exception for cache store errors.

    Carries a machine-readable error code and structured details for logging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class CacheConnectionException(FactorialCacheException):
    """Raised when the cache connection cannot be established."""

    def __init__(
        self,
        message: str = "Cache connection failed",
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if url:
            details["url"] = url
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=message, error_code="CACHE_CONNECTION_ERROR", details=details
        )
        if original_error:
            self.__cause__ = original_error


class CacheTransportException(FactorialCacheException):
    """Raised when a cache command fails on the wire."""

    def __init__(
        self,
        operation: str,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
        message: Optional[str] = None,
        error_code: str = "CACHE_TRANSPORT_ERROR",
    ):
        details: Dict[str, Any] = {"operation": operation}
        if key is not None:
            details["key"] = key
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=message or f"Cache operation '{operation}' failed",
            error_code=error_code,
            details=details,
        )
        if original_error:
            self.__cause__ = original_error


class CacheCircuitOpenException(CacheTransportException):
    """Raised when the cache circuit breaker is open."""

    def __init__(self, operation: str = "call", key: Optional[str] = None):
        super().__init__(
            operation=operation,
            key=key,
            message="Cache circuit breaker is open - store unavailable",
            error_code="CACHE_CIRCUIT_BREAKER_OPEN",
        )


class CacheConfigurationException(FactorialCacheException):
    """Raised when the cache configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
    ):
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)

        super().__init__(
            message=message, error_code="CACHE_CONFIGURATION_ERROR", details=details
        )
