"""
Unit tests for the factorial domain.

Covers the arbitrary-precision factorial, value objects and input validation.
"""

import math

import pytest

from factorial_service.constants import INPUT_TOO_BIG_MESSAGE
from factorial_service.domain.factorial import (
    MAX_INPUT_NUMBER,
    TTL,
    Accepted,
    CacheKey,
    CacheLookup,
    CacheLookupStatus,
    InputValidator,
    InvalidFactorialInputError,
    NoInput,
    Rejected,
    factorial,
    factorial_decimal,
    parse_input_number,
    validate,
)


class TestFactorial:
    """Test the iterative factorial."""

    @pytest.mark.parametrize("n", [0, 1])
    def test_identity_cases(self, n):
        assert factorial(n) == 1
        assert factorial_decimal(n) == "1"

    @pytest.mark.parametrize(
        "n, expected",
        [(2, 2), (5, 120), (10, 3628800), (20, 2432902008176640000)],
    )
    def test_small_values(self, n, expected):
        assert factorial(n) == expected

    def test_beyond_fixed_width(self):
        """21! overflows an unsigned 64-bit integer."""
        assert factorial(21) == 51090942171709440000
        assert factorial(21) > 2**64

    def test_matches_math_factorial(self):
        for n in (50, 100, 1000):
            assert factorial(n) == math.factorial(n)

    def test_decimal_string_longer_than_default_digit_limit(self):
        """3000! has 9131 digits, more than the default conversion limit."""
        value = factorial_decimal(3000)

        assert len(value) == 9131
        assert value == str(math.factorial(3000))
        assert value.endswith("0" * 748)

    def test_negative_input_rejected(self):
        with pytest.raises(InvalidFactorialInputError, match="non-negative"):
            factorial(-1)


class TestCacheKey:
    """Test CacheKey value object."""

    def test_for_input(self):
        key = CacheKey.for_input(42)

        assert key.value == "42"
        assert str(key) == "42"

    def test_zero_key(self):
        assert CacheKey.for_input(0).value == "0"

    def test_negative_input(self):
        with pytest.raises(InvalidFactorialInputError):
            CacheKey.for_input(-3)

    def test_invalid_key_empty(self):
        with pytest.raises(ValueError, match="Cache key cannot be empty"):
            CacheKey("")

    def test_invalid_key_not_decimal(self):
        with pytest.raises(ValueError, match="decimal number"):
            CacheKey("abc")

    def test_invalid_key_leading_zero(self):
        with pytest.raises(ValueError, match="leading zeros"):
            CacheKey("007")


class TestTTL:
    """Test TTL value object."""

    def test_hours(self):
        assert TTL.hours(10).seconds == 36000
        assert str(TTL(60)) == "60s"

    def test_invalid_ttl_zero(self):
        with pytest.raises(ValueError, match="TTL must be positive"):
            TTL(0)

    def test_invalid_ttl_too_large(self):
        with pytest.raises(ValueError, match="TTL too large"):
            TTL(86400 * 366)


class TestCacheLookup:
    """Test the tagged cache read outcome."""

    def test_found(self):
        lookup = CacheLookup.found("120")

        assert lookup.is_found
        assert lookup.status == CacheLookupStatus.FOUND
        assert lookup.value == "120"

    def test_absent(self):
        lookup = CacheLookup.absent()

        assert not lookup.is_found
        assert lookup.status == CacheLookupStatus.ABSENT
        assert lookup.value is None

    def test_transport_error(self):
        lookup = CacheLookup.transport_error("Connection refused")

        assert not lookup.is_found
        assert lookup.status == CacheLookupStatus.TRANSPORT_ERROR
        assert lookup.error == "Connection refused"


class TestInputValidator:
    """Test input bounds checking."""

    @pytest.fixture
    def validator(self):
        return InputValidator(limit=100_000)

    def test_no_input(self, validator):
        assert validator.validate(None) == NoInput()

    def test_accepted(self, validator):
        assert validator.validate(5) == Accepted(input_number=5)

    def test_zero_accepted(self, validator):
        assert validator.validate(0) == Accepted(input_number=0)

    def test_limit_is_inclusive(self, validator):
        assert validator.validate(100_000) == Accepted(input_number=100_000)

    def test_above_limit_rejected(self, validator):
        outcome = validator.validate(100_001)

        assert isinstance(outcome, Rejected)
        assert outcome.reason == INPUT_TOO_BIG_MESSAGE

    def test_negative_input(self, validator):
        with pytest.raises(InvalidFactorialInputError):
            validator.validate(-1)

    def test_negative_limit(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            InputValidator(limit=-1)

    def test_module_level_validate(self):
        assert validate(11, limit=10) == Rejected(reason=INPUT_TOO_BIG_MESSAGE)
        assert validate(10, limit=10) == Accepted(input_number=10)
        assert validate(None, limit=10) == NoInput()


class TestParseInputNumber:
    """Test parsing of the raw query parameter."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0", 0),
            ("5", 5),
            ("007", 7),
            ("+12", 12),
            ("4294967295", MAX_INPUT_NUMBER),
        ],
    )
    def test_valid_values(self, raw, expected):
        assert parse_input_number(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "-1", "ten", "1.5", " 5", "5_000", "+", "4294967296"]
    )
    def test_malformed_values_are_absent(self, raw):
        assert parse_input_number(raw) is None

    def test_very_long_digit_string_is_absent(self):
        assert parse_input_number("1" * 100_000) is None

    def test_leading_zeros_do_not_count_towards_length(self):
        assert parse_input_number("0" * 50 + "42") == 42

    def test_malformed_value_validates_as_no_input(self):
        assert validate(parse_input_number("abc"), limit=10) == NoInput()
