"""Numeric coercion for user-entered form values"""

import math
import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))")


def parse_int_or_zero(value: Any) -> int:
    """
    Coerce a form value to an integer, falling back to 0.

    Strings yield their leading integer ("12.9" -> 12, "42abc" -> 42), with a
    0x prefix read as hexadecimal ("0x10" -> 16). Floats truncate toward zero. Missing, blank, non-numeric, NaN and
    infinite values become 0. Negative numbers are kept as-is.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return 0
        sign, hex_digits, digits = match.groups()
        number = int(hex_digits, 16) if hex_digits else int(digits)
        return -number if sign == "-" else number
    return 0
