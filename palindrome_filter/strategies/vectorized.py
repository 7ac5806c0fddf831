"""Filter palindromes with numpy array arithmetic, keeping the input order.

Loads the input into an int64 array and runs the digit-stripping loop on
all still-undecided entries at once. Each pass compares one leading and
one trailing digit, so the number of passes is bounded by half the
longest digit count (at most 10 for int64).

Example:
    palindrome-filter vectorized -f numbers.txt
"""

import time

from palindrome_filter.core.selector import filter_vectorized
from palindrome_filter.core.types import Report, Strategy

strategy = Strategy(name='vectorized', help='Filter palindromes with numpy array arithmetic, input order kept.')


@strategy.run
def run(numbers: list[int], report: Report, settings) -> None:
    started = time.perf_counter()
    report.record(strategy, filter_vectorized(numbers), started)
