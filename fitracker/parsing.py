"""
Field parsing for incoming progress records.

Every fallback lives here so that what a missing or malformed value turns
into is an explicit, testable rule rather than an implicit conversion.
"""

import math
from typing import Any, Union

Number = Union[int, float]

# MongoDB stores integers as at most 8 bytes.
INT64_MIN = -(2 ** 63)
INT64_MAX_EXCLUSIVE = 2 ** 63


def parse_grams(value: Any, default: Number = 0) -> Number:
    """
    Parse a supplement quantity.

    Numbers and numeric strings are accepted; everything else (None, booleans,
    blank or non-numeric strings, NaN, infinities, integers too large
    for a double) falls back to ``default``.
    Integral values that fit a 64-bit BSON int come back as ``int`` so that
    ``"25"`` and ``25.0`` both serialize as ``25``; larger ones stay ``float``.

    Args:
        value: Raw value from the request payload
        default: Value used when ``value`` cannot be parsed

    Returns:
        The parsed quantity
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    else:
        return default

    if not math.isfinite(number):
        return default

    if number.is_integer() and INT64_MIN <= number < INT64_MAX_EXCLUSIVE:
        return int(number)
    return number


def parse_text(value: Any) -> str:
    """Parse a free-text field: None becomes "", scalars are stringified."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
