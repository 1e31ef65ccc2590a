"""
Ordinal functional core.

English ordinal suffixes: 1st, 2nd, 3rd, 4th, 11th, 12th, 13th, 21st, ...
"""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real

SUFFIXES = {1: "st", 2: "nd", 3: "rd"}
DEFAULT_SUFFIX = "th"


def _truncated_rem(value: int, modulus: int) -> int:
    # Remainder takes the sign of the dividend
    rem = abs(value) % modulus
    return -rem if value < 0 else rem


def _floor(number: float | Decimal) -> int | None:
    if isinstance(number, bool) or not isinstance(number, (Real, Decimal)):
        raise TypeError(f"number must be a real number, got {type(number).__name__}")
    if isinstance(number, Decimal) and not number.is_finite():
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return math.floor(number)


def ordinal(number: float | Decimal) -> str:
    """
    Return the ordinal suffix of number.

    The number is floored first. Teens (11-19 of every hundred) take "th".
    Negative and non-finite numbers always take "th".

    Usage:
        >>> ordinal(142)
        'nd'
    """
    value = _floor(number)
    if value is None:
        return DEFAULT_SUFFIX

    hundred_rem = _truncated_rem(value, 100)
    ten_rem = _truncated_rem(value, 10)
    if hundred_rem - ten_rem == 10:
        return DEFAULT_SUFFIX
    return SUFFIXES.get(ten_rem, DEFAULT_SUFFIX)


def ordinalize(number: float | Decimal) -> str:
    """
    Return the floored number followed by its suffix, e.g. "142nd".

    Non-finite numbers render as Python prints them ("inf" -> "infth").
    """
    value = _floor(number)
    prefix = str(number) if value is None else str(value)
    return prefix + ordinal(number)
