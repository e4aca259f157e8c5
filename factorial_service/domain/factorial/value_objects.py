"""
Factorial Value Objects

Immutable value objects for the factorial cache-aside path.
Provides type safety for cache keys, expiration and lookup outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .exceptions import InvalidFactorialInputError


class CacheStatus(str, Enum):
    """Whether a result was served from cache or computed fresh."""

    HIT = "hit"
    MISS = "miss"


class CacheLookupStatus(str, Enum):
    """Outcome categories of a cache read."""

    FOUND = "found"
    ABSENT = "absent"  # Missing key or a key holding the wrong type
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class CacheKey:
    """
    Immutable cache key value object.

    Keys are the canonical decimal form of the input number, so
    ``CacheKey.for_input(42).value == "42"``.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate cache key format."""
        if not self.value:
            raise ValueError("Cache key cannot be empty")

        if not self.value.isdigit():
            raise ValueError("Cache key must be a decimal number")

        if len(self.value) > 1 and self.value.startswith("0"):
            raise ValueError("Cache key must not have leading zeros")

    @classmethod
    def for_input(cls, input_number: int) -> "CacheKey":
        """Create the cache key for an input number."""
        if input_number < 0:
            raise InvalidFactorialInputError(input_number)
        return cls(str(input_number))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TTL:
    """
    Time To Live value object for cache expiration.

    Provides type-safe TTL configuration with validation.
    """

    seconds: int

    def __post_init__(self) -> None:
        """Validate TTL value."""
        if self.seconds <= 0:
            raise ValueError("TTL must be positive")
        if self.seconds > 86400 * 365:  # Max 1 year
            raise ValueError("TTL too large (max 1 year)")

    @classmethod
    def hours(cls, hours: int) -> "TTL":
        """Create TTL from hours."""
        return cls(hours * 3600)

    def __str__(self) -> str:
        return f"{self.seconds}s"


@dataclass(frozen=True)
class CacheLookup:
    """
    Tagged result of a cache read.

    Keeps the expected "no entry" case apart from transport failures so
    callers can stay silent on one and log the other.
    """

    status: CacheLookupStatus
    value: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, value: str) -> "CacheLookup":
        return cls(status=CacheLookupStatus.FOUND, value=value)

    @classmethod
    def absent(cls) -> "CacheLookup":
        return cls(status=CacheLookupStatus.ABSENT)

    @classmethod
    def transport_error(cls, error: str) -> "CacheLookup":
        return cls(status=CacheLookupStatus.TRANSPORT_ERROR, error=error)

    @property
    def is_found(self) -> bool:
        return self.status == CacheLookupStatus.FOUND


@dataclass(frozen=True)
class ComputationResult:
    """Decimal factorial value together with its cache status."""

    value: str
    cache_status: CacheStatus


# Input validation outcomes


@dataclass(frozen=True)
class NoInput:
    """No input number was supplied; the landing page is shown instead."""


@dataclass(frozen=True)
class Rejected:
    """Input number exceeds the configured limit."""

    reason: str


@dataclass(frozen=True)
class Accepted:
    """Input number is within limits and can be computed."""

    input_number: int


ValidationOutcome = Union[NoInput, Rejected, Accepted]
