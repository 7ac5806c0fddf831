"""Digit palindrome predicate, scalar and vectorized.

Both forms compare digits from the two ends inward without building a
string: the leading digit is `number // divider`, the trailing digit is
`number % 10`. On a match both ends are stripped with
`(number % divider) // 10` and the divider shrinks by 100. A mismatch
returns False at once.

The loop ends when at most one digit position is left (divider < 10).
The stop condition is keyed on the divider and not on the remaining value,
so inner zeros still take part in the comparison: 1000021 strips to 2
with divider 10**4, whose leading digit is 0, not 2.

Negative numbers are never palindromes.
"""

import numpy as np

from palindrome_filter.core.digits import MAX_DIGITS, check_int64, digit_counts, leading_divider

# 1, 10, ..., 10**18 as uint64, indexed by digit count - 1
_DIVIDERS_U64 = np.array([10**k for k in range(MAX_DIGITS)], dtype=np.uint64)

_TEN = np.uint64(10)
_HUNDRED = np.uint64(100)


def is_palindrome(number: int) -> bool:
    """Return True if the decimal digits of number read the same reversed.

    Raises InvalidArgumentError for values outside the int64 range.
    """
    check_int64(number)
    if number < 0:
        return False

    divider = leading_divider(number)
    while divider >= 10:
        left = number // divider
        right = number % 10
        if left != right:
            return False
        number = (number % divider) // 10
        divider //= 100
    return True


def palindrome_mask(values: np.ndarray) -> np.ndarray:
    """Boolean mask of the palindromic entries of an int64 array."""
    signed = np.asarray(values, dtype=np.int64)
    result = signed >= 0

    remaining = np.where(result, signed, 0).astype(np.uint64)
    dividers = _DIVIDERS_U64[digit_counts(remaining) - 1]

    active = np.flatnonzero(result & (dividers >= _TEN))
    while active.size:
        number = remaining[active]
        divider = dividers[active]
        matched = (number // divider) == (number % _TEN)
        result[active[~matched]] = False

        active = active[matched]
        number = number[matched]
        divider = divider[matched]
        remaining[active] = (number % divider) // _TEN
        dividers[active] = divider // _HUNDRED
        active = active[dividers[active] >= _TEN]
    return result
