"""Input validation and text parsing for integer sequences.

Every selector entry point funnels its argument through `require_numbers`,
which rejects an absent sequence before any work starts and pins the
values to the signed 64-bit domain.

Text input (CLI arguments, files, stdin) is parsed by `parse_numbers`:
tokens are separated by whitespace and/or commas, `#` starts a comment
running to the end of the line.
"""

import re
import sys
from collections.abc import Iterable
from pathlib import Path

import numpy as np

from palindrome_filter.core.digits import INT64_MAX, check_int64
from palindrome_filter.core.types import InvalidArgumentError

_SEPARATORS = re.compile(r'[\s,]+')


def require_numbers(numbers: Iterable[int] | None) -> np.ndarray:
    """Validate numbers and return them as a 1-D int64 array.

    Raises InvalidArgumentError if numbers is None, is not a flat sequence
    of integers, or holds a value outside the int64 range.
    """
    if numbers is None:
        raise InvalidArgumentError('numbers must not be None')

    if not isinstance(numbers, np.ndarray):
        try:
            values = list(numbers)
        except TypeError as exc:
            raise InvalidArgumentError(f'numbers must be a sequence of integers, got {type(numbers).__name__}') from exc
        return _from_objects(values)

    arr = numbers
    if arr.ndim != 1:
        raise InvalidArgumentError(f'numbers must be one-dimensional, got shape {arr.shape}')

    kind = arr.dtype.kind
    if kind not in 'iuO':
        raise InvalidArgumentError(f'numbers must be integers, got dtype {arr.dtype}')
    if arr.size == 0:
        return np.empty(0, dtype=np.int64)
    if kind == 'i':
        return arr.astype(np.int64, copy=False)
    if kind == 'u':
        if int(arr.max()) > INT64_MAX:
            raise InvalidArgumentError(f'value {int(arr.max())} is outside the int64 range')
        return arr.astype(np.int64)
    return _from_objects(arr.tolist())


def _from_objects(values: list) -> np.ndarray:
    """Convert a list of Python objects to int64, checking each value."""
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f'numbers must be integers, got {value!r}')
        check_int64(int(value))
    return np.array([int(v) for v in values], dtype=np.int64)


def parse_numbers(text: str, source: str = '<text>') -> list[int]:
    """Parse whitespace/comma separated integers. Raises InvalidArgumentError."""
    result: list[int] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split('#', 1)[0]
        for token in _SEPARATORS.split(line.strip()):
            if not token:
                continue
            try:
                result.append(int(token))
            except ValueError as exc:
                raise InvalidArgumentError(f'{source}:{lineno}: not an integer: {token!r}') from exc
    return result


def read_numbers(path: str) -> list[int]:
    """Read integers from a file, or from stdin when path is '-'."""
    if path == '-':
        return parse_numbers(sys.stdin.read(), source='<stdin>')
    file_path = Path(path)
    if not file_path.is_file():
        raise InvalidArgumentError(f'input file not found: {path}')
    return parse_numbers(file_path.read_text(encoding='utf-8'), source=path)
