"""Selector — filter an integer sequence down to its digit palindromes.

Three entry points share one predicate:

  filter_sequential   list comprehension, input order kept
  filter_concurrent   thread pool fan-out, order unspecified
  filter_vectorized   numpy mask over the whole array, input order kept

All of them raise InvalidArgumentError on a None input before doing any
work, and all of them select the same multiset of values.

The concurrent path never shares a mutable accumulator: each task filters
its own chunk into a local list and the caller concatenates the partial
lists as the tasks complete.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed

from palindrome_filter.core.numbers import require_numbers
from palindrome_filter.core.palindrome import is_palindrome, palindrome_mask
from palindrome_filter.core.types import InvalidArgumentError

logger = logging.getLogger(__name__)

# Chunks per worker when no chunk size is given; >1 evens out slow chunks
CHUNKS_PER_WORKER = 4


def filter_sequential(numbers: Iterable[int] | None) -> list[int]:
    """Return the palindromes in numbers, in their original order."""
    values = require_numbers(numbers).tolist()
    return [n for n in values if is_palindrome(n)]


def _select_chunk(chunk: list[int]) -> list[int]:
    return [n for n in chunk if is_palindrome(n)]


def _check_positive(name: str, value: int | None) -> None:
    if value is not None and value < 1:
        raise InvalidArgumentError(f'{name} must be a positive integer, got {value}')


def filter_concurrent(
    numbers: Iterable[int] | None,
    workers: int | None = None,
    chunk_size: int | None = None,
) -> list[int]:
    """Return the palindromes in numbers, evaluated on a thread pool.

    The result holds the same values as filter_sequential(numbers) but in
    no particular order; the order can change from run to run.
    """
    values = require_numbers(numbers).tolist()
    _check_positive('workers', workers)
    _check_positive('chunk_size', chunk_size)
    if not values:
        return []

    workers = workers or os.cpu_count() or 1
    if chunk_size is None:
        chunk_size = max(1, -(-len(values) // (workers * CHUNKS_PER_WORKER)))
    chunks = [values[i : i + chunk_size] for i in range(0, len(values), chunk_size)]
    pool_size = min(workers, len(chunks))
    logger.debug('filter_concurrent: %d numbers, %d chunks, %d workers', len(values), len(chunks), pool_size)

    selected: list[int] = []
    with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix='palindrome') as pool:
        futures = [pool.submit(_select_chunk, chunk) for chunk in chunks]
        for future in as_completed(futures):
            selected.extend(future.result())
    return selected


def filter_vectorized(numbers: Iterable[int] | None) -> list[int]:
    """Return the palindromes in numbers using numpy array arithmetic, in order."""
    arr = require_numbers(numbers)
    if arr.size == 0:
        return []
    return arr[palindrome_mask(arr)].tolist()
