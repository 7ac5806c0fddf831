"""Run every strategy over the same input and check that they agree.

Runs: concurrent, sequential, vectorized.
Agreement is multiset equality of the selected values; the concurrent
strategy's order is ignored. The CLI exits 1 when they disagree.

Example:
    palindrome-filter all -f numbers.txt
    palindrome-filter all -f numbers.txt --json
"""

from palindrome_filter.core.types import Report, Strategy

strategy = Strategy(name='all', help='Run every strategy and check that their results agree.')

SKIP = {'all'}


@strategy.run
def run(numbers: list[int], report: Report, settings) -> None:
    from palindrome_filter.registry import all_strategies

    for name, strat in sorted(all_strategies().items()):
        if name in SKIP:
            continue
        strat.execute(numbers, report, settings)
