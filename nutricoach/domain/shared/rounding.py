"""Rounding helpers.

Python's built-in round() uses banker's rounding (round(2.5) == 2). Every
user-facing number in the coach follows half-up rounding instead, so
round(2.5) == 3 and round(-2.5) == -2.
"""

import math


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties towards +infinity.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, ties towards +infinity.

    Example:
        >>> round_one_decimal(12.25)
        12.3
    """
    return math.floor(value * 10 + 0.5) / 10


def format_number(value: float) -> str:
    """Render a number without a trailing ".0" for whole values.

    Example:
        >>> format_number(2.0)
        '2'
        >>> format_number(1.5)
        '1.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)
