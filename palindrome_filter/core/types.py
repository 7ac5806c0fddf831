"""Shared types for palindrome-filter: InvalidArgumentError, Strategy, FilterResult, Report."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class InvalidArgumentError(ValueError):
    """Input sequence is absent, or holds a value outside the int64 domain."""


@dataclass
class FilterResult:
    """Outcome of running one strategy over an input sequence."""

    strategy: str
    input_count: int
    selected: list[int] = field(default_factory=list)
    elapsed: float = 0.0  # seconds
    ordered: bool = True  # False when the strategy makes no order guarantee

    @property
    def selected_count(self) -> int:
        return len(self.selected)


class Strategy:
    """A self-registering execution strategy.

    Usage in a strategy module:

        strategy = Strategy(name='sequential', help='Filter in input order')

        @strategy.run
        def run(numbers, report, settings):
            ...
    """

    def __init__(self, name: str, help: str = '', ordered: bool = True):
        self.name = name
        self.help = help
        self.ordered = ordered
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, numbers: list[int], report: Report, settings: Any) -> None:
        """Execute the strategy's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Strategy {self.name} has no run function')
        self._run_fn(numbers, report, settings)


@dataclass
class Report:
    """Accumulates strategy results for text/JSON output."""

    source: str = ''
    input_count: int = 0
    results: list[FilterResult] = field(default_factory=list)

    def add(self, result: FilterResult) -> None:
        self.results.append(result)

    def record(self, strategy: Strategy, selected: list[int], started: float) -> FilterResult:
        """Add a result for strategy, timed from the perf_counter value started."""
        result = FilterResult(
            strategy=strategy.name,
            input_count=self.input_count,
            selected=selected,
            elapsed=time.perf_counter() - started,
            ordered=strategy.ordered,
        )
        self.add(result)
        return result

    def agree(self) -> bool:
        """True when every strategy selected the same multiset of values."""
        if not self.results:
            return True
        expected = sorted(self.results[0].selected)
        return all(sorted(r.selected) == expected for r in self.results[1:])
