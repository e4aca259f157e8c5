"""
Factorial Domain

Value objects, the arbitrary-precision factorial, input validation and the
cache store contract.
"""

from .exceptions import InvalidFactorialInputError
from .factorial import factorial, factorial_decimal
from .repository_interfaces import FactorialCacheStore
from .validation import (
    MAX_INPUT_NUMBER,
    InputValidator,
    parse_input_number,
    validate,
)
from .value_objects import (
    TTL,
    Accepted,
    CacheKey,
    CacheLookup,
    CacheLookupStatus,
    CacheStatus,
    ComputationResult,
    NoInput,
    Rejected,
    ValidationOutcome,
)

__all__ = [
    "InvalidFactorialInputError",
    "factorial",
    "factorial_decimal",
    "FactorialCacheStore",
    "InputValidator",
    "MAX_INPUT_NUMBER",
    "parse_input_number",
    "validate",
    "TTL",
    "Accepted",
    "CacheKey",
    "CacheLookup",
    "CacheLookupStatus",
    "CacheStatus",
    "ComputationResult",
    "NoInput",
    "Rejected",
    "ValidationOutcome",
]
