"""Unit tests for form value coercion"""

import pytest
from nbfc_console.utils.number_utils import parse_int_or_zero


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0),
        ("", 0),
        ("   ", 0),
        ("abc", 0),
        ("42", 42),
        ("  42  ", 42),
        ("42abc", 42),
        ("12.9", 12),
        ("-250", -250),
        ("+7", 7),
        ("0x10", 16),
        ("0X1f", 31),
        ("-0x1A", -26),
        ("0x", 0),
        ("0xg", 0),
        (5000, 5000),
        (-3, -3),
        (12.9, 12),
        (-3.7, -3),
        (float("nan"), 0),
        (float("inf"), 0),
        (True, 0),
        ([1, 2], 0),
    ],
)
def test_parse_int_or_zero(value, expected):
    assert parse_int_or_zero(value) == expected
