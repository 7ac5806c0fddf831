"""Decimal digit counting over the signed 64-bit domain.

The thresholds cover every magnitude an int64 can hold: 1 digit for 0-9
up to 19 digits for values >= 10**18 (abs(-2**63) has 19 digits).
"""

import numpy as np

from palindrome_filter.core.types import InvalidArgumentError

MAX_DIGITS = 19

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

# 10, 100, ..., 10**18 ascending: index k holds 10**(k + 1)
POWERS: tuple[int, ...] = tuple(10**k for k in range(1, MAX_DIGITS))

_POWERS_U64 = np.array(POWERS, dtype=np.uint64)


def check_int64(number: int) -> None:
    """Raise InvalidArgumentError if number does not fit in a signed 64-bit integer."""
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidArgumentError(f'value {number} is outside the int64 range')


def get_length(number: int) -> int:
    """Count the decimal digits of number, ignoring its sign.

    Raises InvalidArgumentError outside the int64 range, where the
    threshold table would undercount.
    """
    check_int64(number)
    magnitude = abs(int(number))
    for digits in range(MAX_DIGITS, 1, -1):
        if magnitude >= POWERS[digits - 2]:
            return digits
    return 1


def leading_divider(number: int) -> int:
    """Power of ten that isolates the leading digit of a non-negative number."""
    return 10 ** (get_length(number) - 1)


def magnitudes(values: np.ndarray) -> np.ndarray:
    """Absolute values of an int64 array as uint64 (safe for -2**63)."""
    signed = np.asarray(values, dtype=np.int64)
    result = signed.astype(np.uint64)
    neg = signed < 0
    # -(v + 1) stays inside int64 even for the minimum value
    result[neg] = (-(signed[neg] + 1)).astype(np.uint64) + np.uint64(1)
    return result


def digit_counts(values: np.ndarray) -> np.ndarray:
    """Vectorized get_length over an int64 array."""
    mags = magnitudes(values)
    return np.searchsorted(_POWERS_U64, mags, side='right').astype(np.int64) + 1
