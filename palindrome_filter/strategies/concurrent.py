"""Filter palindromes on a thread pool. Output order is not guaranteed.

Splits the input into chunks and tests each chunk on a
ThreadPoolExecutor worker. Partial results are merged as the workers
finish, so the order can differ between runs; the selected values are
always the same as for 'sequential'.

Pool size: --workers, else PALINDROME_FILTER_WORKERS, else os.cpu_count().
Chunk size: --chunk-size, else PALINDROME_FILTER_CHUNK_SIZE, else a few
chunks per worker.

Example:
    palindrome-filter concurrent -f numbers.txt
    palindrome-filter concurrent -f numbers.txt --workers 8 --chunk-size 1000
"""

import time

from palindrome_filter.core.selector import filter_concurrent
from palindrome_filter.core.types import Report, Strategy

strategy = Strategy(
    name='concurrent',
    help='Filter palindromes on a thread pool. Order not guaranteed.',
    ordered=False,
)


@strategy.run
def run(numbers: list[int], report: Report, settings) -> None:
    started = time.perf_counter()
    selected = filter_concurrent(numbers, workers=settings.resolved_workers(), chunk_size=settings.chunk_size)
    report.record(strategy, selected, started)
