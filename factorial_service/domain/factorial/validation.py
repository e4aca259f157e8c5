"""
Input Validation

Bounds checking for factorial requests. Runs before any cache interaction so
oversized inputs never reach the cache.
"""

import re
from typing import Optional

from ...constants import INPUT_TOO_BIG_MESSAGE
from .exceptions import InvalidFactorialInputError
from .value_objects import Accepted, NoInput, Rejected, ValidationOutcome

# Query values outside the unsigned 32-bit range are treated as absent
MAX_INPUT_NUMBER = 2**32 - 1

_INPUT_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


class InputValidator:
    """Classifies a raw request parameter against the configured upper limit."""

    def __init__(self, limit: int):
        if limit < 0:
            raise ValueError("Upper factorial limit cannot be negative")
        self.limit = limit

    def validate(self, raw_input: Optional[int]) -> ValidationOutcome:
        """
        Validate a raw input number.

        Args:
            raw_input: Parsed ``input_number`` parameter, or None if absent

        Returns:
            NoInput, Rejected with a user-facing reason, or Accepted

        Raises:
            InvalidFactorialInputError: If raw_input is negative
        """
        return validate(raw_input, self.limit)


def validate(raw_input: Optional[int], limit: int) -> ValidationOutcome:
    """Validate ``raw_input`` against ``limit``."""
    if raw_input is None:
        return NoInput()

    if raw_input < 0:
        raise InvalidFactorialInputError(raw_input)

    if raw_input > limit:
        return Rejected(reason=INPUT_TOO_BIG_MESSAGE)

    return Accepted(input_number=raw_input)


def parse_input_number(raw: Optional[str]) -> Optional[int]:
    """
    Parse the raw ``input_number`` query value.

    Anything that is not a non-negative decimal integer up to
    ``MAX_INPUT_NUMBER`` yields None, so a malformed parameter is handled
    the same as a missing one. The length check runs before ``int()`` so
    arbitrarily long digit strings are never converted.
    """
    if raw is None or not _INPUT_NUMBER_PATTERN.fullmatch(raw):
        return None

    digits = raw.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(MAX_INPUT_NUMBER)):
        return None

    value = int(digits)
    if value > MAX_INPUT_NUMBER:
        return None
    return value
