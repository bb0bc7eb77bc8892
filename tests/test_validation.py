"""Tests for amount validation."""

import math
from fractions import Fraction

import pytest

from qris.errors import AmountErrorKind
from qris.messages import validation_error_text
from qris.models import AmountLimits
from qris.validation import AmountValidator, validate_amount

LIMITS = AmountLimits(min_amount=1000, max_amount=10_000_000)


@pytest.mark.parametrize("amount", [1000, 1001, 50000, 999_999, 10_000_000])
def test_valid_amounts_returned_unchanged(amount):
    check = validate_amount(amount, LIMITS)
    assert check.ok
    assert check.error is None
    assert check.amount == amount


def test_integral_float_is_accepted_unchanged():
    check = validate_amount(5000.0, LIMITS)
    assert check.ok
    assert check.amount == 5000.0
    assert isinstance(check.amount, float)


@pytest.mark.parametrize("amount", [0, 1, 999, -5000])
def test_below_minimum(amount):
    check = validate_amount(amount, LIMITS)
    assert not check.ok
    assert check.error.kind is AmountErrorKind.BELOW_MINIMUM
    assert check.error.bound == 1000


@pytest.mark.parametrize("amount", [10_000_001, 50_000_000])
def test_above_maximum(amount):
    check = validate_amount(amount, LIMITS)
    assert not check.ok
    assert check.error.kind is AmountErrorKind.ABOVE_MAXIMUM
    assert check.error.bound == 10_000_000


@pytest.mark.parametrize("amount", ["5000", None, True, math.nan, math.inf, [5000]])
def test_not_a_number(amount):
    check = validate_amount(amount, LIMITS)
    assert check.error.kind is AmountErrorKind.NOT_A_NUMBER


@pytest.mark.parametrize("amount", [1500.5, Fraction(3001, 2)])
def test_not_integer(amount):
    check = validate_amount(amount, LIMITS)
    assert check.error.kind is AmountErrorKind.NOT_INTEGER


def test_priority_integer_check_before_bounds():
    """A fractional amount below the minimum reports NOT_INTEGER first."""
    check = validate_amount(0.5, LIMITS)
    assert check.error.kind is AmountErrorKind.NOT_INTEGER


def test_custom_bounds_embedded_in_message():
    limits = AmountLimits(min_amount=2500, max_amount=7_500_000)
    low = validate_amount(100, limits)
    high = validate_amount(8_000_000, limits)
    assert low.error.bound == 2500
    assert "Rp 2.500" in validation_error_text(low.error)
    assert high.error.bound == 7_500_000
    assert "Rp 7.500.000" in validation_error_text(high.error)


@pytest.mark.parametrize("amount", [1000, 42_000, 10_000_000])
def test_validation_is_idempotent(amount):
    first = validate_amount(amount, LIMITS)
    assert validate_amount(first.amount, LIMITS) == first


def test_validator_binds_limits():
    validator = AmountValidator(AmountLimits(min_amount=10, max_amount=20))
    assert validator.validate(15).ok
    assert validator.validate(21).error.kind is AmountErrorKind.ABOVE_MAXIMUM


@pytest.mark.parametrize(
    "amount, kind",
    [
        (int("9" * 400), AmountErrorKind.ABOVE_MAXIMUM),
        (-int("9" * 400), AmountErrorKind.BELOW_MINIMUM),
        (Fraction(10**400), AmountErrorKind.ABOVE_MAXIMUM),
        (Fraction(10**400 + 1, 2), AmountErrorKind.NOT_INTEGER),
    ],
)
def test_amounts_beyond_float_range_hit_bound_checks(amount, kind):
    check = validate_amount(amount, LIMITS)
    assert check.error.kind is kind
