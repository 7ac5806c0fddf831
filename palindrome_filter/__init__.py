"""palindrome_filter — select the integers whose decimal digits form a palindrome."""

from palindrome_filter.core.digits import get_length
from palindrome_filter.core.palindrome import is_palindrome, palindrome_mask
from palindrome_filter.core.selector import filter_concurrent, filter_sequential, filter_vectorized
from palindrome_filter.core.types import InvalidArgumentError

__all__ = [
    'InvalidArgumentError',
    'filter_concurrent',
    'filter_sequential',
    'filter_vectorized',
    'get_length',
    'is_palindrome',
    'palindrome_mask',
]
