"""Module for miscellaneous multi-use functions"""

__all__ = ['coerce_float', 'round_half_up']

import math
from typing import Any


def coerce_float(value: Any, default: float = 0.) -> float:
    """
    Converts a raw argument to a float. Missing, empty, unparseable or non-finite
    (inf, nan) values fall back to the default rather than raising.

    Args:
        value:
            The raw value, typically a string or number

        default: (float) (Default 0.)
            The value to use when the argument cannot be read as a number

    Returns:
        float
    """
    if value is None or value == '':
        return default

    try:
        number = float(value)
    except (TypeError, ValueError):
        return default

    return number if math.isfinite(number) else default


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
