"""Tests for amount parsing."""

import pytest
from decimal import Decimal

from fundtrack.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "value,expected",
    [
        (100, Decimal("100")),
        (12.5, Decimal("12.5")),
        (0.1, Decimal("0.1")),
        (Decimal("7.25"), Decimal("7.25")),
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("(50.00)", Decimal("-50.00")),
        ("  42 ", Decimal("42")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", [None, True, False, "", "   ", "abc", "NaN", "Infinity", [1], {}])
def test_parse_amount_rejects(value):
    with pytest.raises(ValueError):
        parse_amount(value)


def test_float_goes_through_str():
    """Binary float noise does not leak into the Decimal."""
    assert parse_amount(0.1) + parse_amount(0.2) == Decimal("0.3")
