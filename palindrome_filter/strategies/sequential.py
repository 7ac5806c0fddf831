"""Filter palindromes one by one, keeping the input order.

Walks the input once and tests every number with the digit-stripping
predicate. Negative numbers are always dropped.

Example:
    palindrome-filter sequential 121 -121 123 0 7 12321 1000021
    palindrome-filter sequential -f numbers.txt --json
"""

import time

from palindrome_filter.core.selector import filter_sequential
from palindrome_filter.core.types import Report, Strategy

strategy = Strategy(name='sequential', help='Filter palindromes in a single pass, input order kept.')


@strategy.run
def run(numbers: list[int], report: Report, settings) -> None:
    started = time.perf_counter()
    report.record(strategy, filter_sequential(numbers), started)
