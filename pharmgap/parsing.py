"""
Lenient numeric parsing for GeoJSON properties

Counts and measures in the source datasets arrive as numbers, numeric
strings, strings with trailing garbage, or not at all. None of these may
raise: a value that cannot be read is zero.
"""

import math
import re
from typing import Any

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: Any) -> int:
    """
    Read the leading integer of a value.

    "12abc" -> 12, "3.9" -> 3, 3.9 -> 3, "-4" -> -4.
    None, booleans, containers and strings without a leading digit -> 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # more digits than the interpreter will convert
                return 0
    return 0


def parse_count(value: Any) -> int:
    """Non-negative variant of parse_int, used for populations and facility counts."""
    return max(parse_int(value), 0)


def parse_measure(value: Any) -> float:
    """Read the leading decimal number of a value, 0.0 when there is none."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return 0.0
        number = float(match.group(1))
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0
