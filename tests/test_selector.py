"""Tests for palindrome_filter.core.selector — the three filtering entry points."""

import threading
import time

import numpy as np
import pytest
from palindrome_filter import (
    InvalidArgumentError,
    filter_concurrent,
    filter_sequential,
    filter_vectorized,
)
from palindrome_filter.core import selector
from palindrome_filter.core.palindrome import is_palindrome

MIXED = [121, -121, 123, 0, 7, 12321, 1000021]
ORDERED_FILTERS = [filter_sequential, filter_vectorized]
ALL_FILTERS = [filter_sequential, filter_concurrent, filter_vectorized]


class TestConcreteCases:
    @pytest.mark.parametrize('fn', ORDERED_FILTERS)
    def test_mixed_input(self, fn) -> None:
        assert fn(MIXED) == [121, 0, 7, 12321]

    @pytest.mark.parametrize('fn', ORDERED_FILTERS)
    def test_all_palindromes(self, fn) -> None:
        assert fn([11, 22, 33]) == [11, 22, 33]

    @pytest.mark.parametrize('fn', ALL_FILTERS)
    def test_empty(self, fn) -> None:
        assert fn([]) == []

    def test_concurrent_mixed_input(self) -> None:
        assert sorted(filter_concurrent(MIXED)) == [0, 7, 121, 12321]

    def test_concurrent_all_palindromes(self) -> None:
        assert sorted(filter_concurrent([11, 22, 33])) == [11, 22, 33]

    def test_duplicates_kept(self) -> None:
        assert filter_sequential([5, 5, 12, 5]) == [5, 5, 5]
        assert sorted(filter_concurrent([5, 5, 12, 5], workers=2, chunk_size=1)) == [5, 5, 5]


class TestInvalidArgument:
    @pytest.mark.parametrize('fn', ALL_FILTERS)
    def test_none_rejected(self, fn) -> None:
        with pytest.raises(InvalidArgumentError):
            fn(None)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            filter_sequential(None)

    @pytest.mark.parametrize('fn', ALL_FILTERS)
    def test_out_of_range_rejected(self, fn) -> None:
        with pytest.raises(InvalidArgumentError, match='int64'):
            fn([1, 2**63])

    @pytest.mark.parametrize('bad', [[1, 2.5], [True, 1], ['12'], [[1, 2]]])
    def test_non_integers_rejected(self, bad: list) -> None:
        with pytest.raises(InvalidArgumentError):
            filter_sequential(bad)

    def test_non_iterable_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            filter_sequential(12321)

    @pytest.mark.parametrize('kwargs', [{'workers': 0}, {'workers': -2}, {'chunk_size': 0}])
    def test_concurrent_rejects_non_positive_tuning(self, kwargs: dict) -> None:
        with pytest.raises(InvalidArgumentError):
            filter_concurrent([1, 2, 3], **kwargs)


class TestInputKinds:
    def test_tuple_and_generator(self) -> None:
        assert filter_sequential((1, 12, 44)) == [1, 44]
        assert filter_sequential(n for n in [1, 12, 44]) == [1, 44]

    def test_numpy_array(self) -> None:
        arr = np.array(MIXED, dtype=np.int64)
        assert filter_sequential(arr) == [121, 0, 7, 12321]
        assert filter_vectorized(arr) == [121, 0, 7, 12321]

    def test_numpy_int32_array(self) -> None:
        arr = np.array([2_147_447_412, 2_147_483_647, -5], dtype=np.int32)
        assert filter_vectorized(arr) == [2_147_447_412]

    def test_numpy_uint64_overflow_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            filter_vectorized(np.array([2**64 - 1], dtype=np.uint64))

    def test_two_dimensional_array_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            filter_vectorized(np.array([[1, 2], [3, 4]], dtype=np.int64))

    def test_results_are_python_ints(self) -> None:
        for fn in ALL_FILTERS:
            assert all(type(n) is int for n in fn(np.array([1, 22, 303], dtype=np.int64)))

    def test_input_not_mutated(self) -> None:
        data = list(MIXED)
        filter_sequential(data)
        filter_concurrent(data)
        filter_vectorized(data)
        assert data == MIXED


class TestProperties:
    @pytest.fixture
    def sample(self) -> list[int]:
        rng = np.random.default_rng(7)
        values = rng.integers(-1_000_000, 10_000_000, size=5_000).tolist()
        return values + [0, 1, 11, 1001, 1_000_021, 10**18 + 1, -(2**63), 2**63 - 1]

    def test_all_strategies_select_same_multiset(self, sample: list[int]) -> None:
        expected = sorted(filter_sequential(sample))
        assert sorted(filter_concurrent(sample)) == expected
        assert sorted(filter_concurrent(sample, workers=3, chunk_size=7)) == expected
        assert sorted(filter_concurrent(sample, workers=1)) == expected
        assert filter_vectorized(sample) == filter_sequential(sample)

    def test_sequential_preserves_order(self, sample: list[int]) -> None:
        selected = filter_sequential(sample)
        remaining = iter(sample)
        # subsequence check: each selected value appears after the previous one
        assert all(n in remaining for n in selected)

    def test_idempotent(self, sample: list[int]) -> None:
        once = filter_sequential(sample)
        assert filter_sequential(once) == once

    def test_matches_string_reversal(self, sample: list[int]) -> None:
        expected = [n for n in sample if n >= 0 and str(n) == str(n)[::-1]]
        assert filter_sequential(sample) == expected

    def test_concurrent_more_workers_than_numbers(self) -> None:
        assert sorted(filter_concurrent([9, 10, 11], workers=64)) == [9, 11]


class TestFanOut:
    def test_work_spread_over_pool_threads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: set[str] = set()
        lock = threading.Lock()

        def recording_predicate(number: int) -> bool:
            with lock:
                seen.add(threading.current_thread().name)
            time.sleep(0.005)
            return is_palindrome(number)

        monkeypatch.setattr(selector, 'is_palindrome', recording_predicate)
        numbers = list(range(40))
        selected = filter_concurrent(numbers, workers=4, chunk_size=1)

        assert sorted(selected) == list(range(10)) + [11, 22, 33]
        assert all(name.startswith('palindrome') for name in seen)
        assert len(seen) >= 2
