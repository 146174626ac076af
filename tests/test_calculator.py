"""Tests for the calculate tool's arithmetic."""

import pytest

from demo_server.calculator import calculate, describe, format_number
from demo_server.errors import InvalidOperationError


@pytest.mark.parametrize(
    "operation, a, b, expected",
    [
        ("add", 7, 8, 15),
        ("subtract", 7, 8, -1),
        ("multiply", 7, 8, 56),
        ("add", -2.5, 2.5, 0),
        ("multiply", 1.5, 4, 6),
    ],
)
def test_arithmetic_identities(operation, a, b, expected):
    assert calculate(operation, a, b) == expected


def test_divide_returns_float():
    result = calculate("divide", 7, 2)
    assert isinstance(result, float)
    assert result == 3.5


def test_divide_by_zero_fails():
    with pytest.raises(InvalidOperationError, match="Division by zero"):
        calculate("divide", 1, 0)


def test_unknown_operation_fails():
    with pytest.raises(InvalidOperationError, match="Unknown operation: modulo"):
        calculate("modulo", 1, 2)


def test_describe_formats_expression():
    assert describe("add", 7.0, 8.0) == "Result: 7 + 8 = 15"
    assert describe("multiply", 2, 3) == "Result: 2 × 3 = 6"
    assert describe("divide", 1, 4) == "Result: 1 ÷ 4 = 0.25"


def test_format_number_keeps_fractions():
    assert format_number(2.0) == "2"
    assert format_number(2.5) == "2.5"
    assert format_number(3) == "3"
