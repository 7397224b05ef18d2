"""Tests for numeric coercion and rounding helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from analysis.quantity import ceil_tolerant, coerce_finite, round_half_up

pytestmark = pytest.mark.unit


def test_coerce_finite_accepts_numbers_decimals_and_numeric_strings() -> None:
    """Coerce common numeric inputs into floats."""

    assert coerce_finite(135) == 135.0
    assert coerce_finite(22.5) == 22.5
    assert coerce_finite(Decimal("185.00")) == 185.0
    assert coerce_finite(" 1,200 ") == 1200.0
    assert coerce_finite("25.5") == 25.5


@pytest.mark.parametrize(
    "raw",
    [None, True, False, "", "   ", "heavy", float("nan"), float("inf"), "-inf", Decimal("NaN"), object()],
)
def test_coerce_finite_returns_none_for_malformed_values(raw: object) -> None:
    """Treat booleans, blanks, junk and non-finite values as missing."""

    assert coerce_finite(raw) is None


def test_round_half_up_rounds_halves_towards_positive_infinity() -> None:
    """Round .5 upwards rather than to even."""

    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2


def test_ceil_tolerant_ignores_binary_noise() -> None:
    """Ceil values that are integral up to float noise to that integer."""

    noisy = 90 / (5 / 60)
    assert noisy != 1080
    assert ceil_tolerant(noisy) == 1080
    assert ceil_tolerant(1.2) == 2
    assert ceil_tolerant(16.666) == 17
