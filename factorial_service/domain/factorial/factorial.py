"""
Arbitrary-precision factorial.

Python ``int`` is unbounded, so the accumulation never overflows. Inputs near
the configured limit produce results with hundreds of thousands of digits.
"""

import sys

from .exceptions import InvalidFactorialInputError

# int -> str conversion is capped at 4300 digits by default on 3.11+.
# Lifting the cap is process-wide and also removes the str -> int guard, so
# request input is length-checked before conversion (see parse_input_number).
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


def factorial(n: int) -> int:
    """Return the product of all integers from 2 through ``n`` inclusive."""
    if n < 0:
        raise InvalidFactorialInputError(n)

    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_decimal(n: int) -> str:
    """Return ``factorial(n)`` as its decimal string representation."""
    return str(factorial(n))
