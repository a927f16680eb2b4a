"""Module for miscellaneous multi-use functions"""

__all__ = [
    'decimal_to_dm', 'decimal_to_dms', 'dms_to_decimal',
    'format_trimmed', 'round_half_up',
]

import math
from typing import Tuple


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


def dms_to_decimal(degrees: float, minutes: float = 0., seconds: float = 0., hemisphere: str = 'N') -> float:
    """
    Converts degrees, minutes and seconds to decimal degrees. Hemispheres 'S' and 'W'
    produce negative values.
    """
    mult = -1 if hemisphere in ('S', 'W') else 1
    return mult * (degrees + (minutes / 60) + (seconds / 3600))


def decimal_to_dms(dd: float, precision: int = 5) -> Tuple[int, int, float]:
    """
    Converts the absolute value of a decimal degree to (degrees, minutes, seconds),
    with seconds rounded to the given precision. Rounding up to a full minute
    carries over into minutes and degrees.
    """
    minutes, seconds = divmod(abs(dd) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)
    seconds = round_half_up(seconds, precision)

    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    return int(degrees), int(minutes), seconds


def decimal_to_dm(dd: float, precision: int = 4) -> Tuple[int, float]:
    """
    Converts the absolute value of a decimal degree to (degrees, minutes), with
    minutes truncated (not rounded) to the given precision.
    """
    degrees = math.floor(abs(dd))
    minutes = (abs(dd) - degrees) * 60
    factor = 10 ** precision
    return int(degrees), math.floor(minutes * factor) / factor


def format_trimmed(value: float, precision: int) -> str:
    """Formats a float with at most `precision` decimals, dropping trailing zeros"""
    text = f'{value:.{precision}f}'
    if '.' not in text:
        return text
    return text.rstrip('0').rstrip('.')
