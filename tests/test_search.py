"""Tests for utils/algorithms/search.py"""

import numpy as np
import pytest

from utils.algorithms.search import (
    binary_search,
    binary_search_iterative,
    bisection_trace,
    is_non_decreasing,
    search_sorted,
)

NUMBERS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]


def sorted_sequences(count: int = 50, seed: int = 0):
    """Random non-decreasing sequences with plenty of duplicates."""
    rng = np.random.default_rng(seed)
    for _ in range(count):
        length = int(rng.integers(1, 40))
        yield sorted(int(x) for x in rng.integers(-20, 20, size=length))


class TestBinarySearch:
    def test_target_found(self):
        """8 sits at index 7."""
        assert binary_search(NUMBERS, 8, 0, 10) == 7

    def test_target_not_found(self):
        assert binary_search(NUMBERS, 12, 0, 10) is None

    def test_below_minimum(self):
        assert binary_search(NUMBERS, 0, 0, 10) is None

    def test_first_and_last(self):
        assert binary_search(NUMBERS, 1, 0, 10) == 0
        assert binary_search(NUMBERS, 11, 0, 10) == 10

    def test_single_element(self):
        assert binary_search([5], 5, 0, 0) == 0
        assert binary_search([5], 4, 0, 0) is None
        assert binary_search([5], 6, 0, 0) is None

    def test_empty_range(self):
        """start > end is the base case, never an error."""
        assert binary_search(NUMBERS, 3, 5, 4) is None
        assert binary_search(NUMBERS, 1, 0, -1) is None

    def test_sub_range_excludes_outside_values(self):
        """Values outside [start, end] are not found even if present."""
        assert binary_search(NUMBERS, 2, 3, 10) is None
        assert binary_search(NUMBERS, 10, 0, 5) is None
        assert binary_search(NUMBERS, 5, 3, 6) == 4

    def test_duplicates_land_on_first_mid(self):
        """With duplicates the first probed match wins, not the first occurrence."""
        sequence = [2, 2, 2, 2, 2]
        assert binary_search(sequence, 2, 0, 4) == 2

    def test_numpy_input(self):
        sequence = np.arange(1, 12)
        assert binary_search(sequence, 8, 0, 10) == 7
        assert binary_search(sequence, 12, 0, 10) is None

    def test_every_present_value_is_found(self):
        for sequence in sorted_sequences():
            end = len(sequence) - 1
            for value in sequence:
                index = binary_search(sequence, value, 0, end)
                assert index is not None
                assert sequence[index] == value

    def test_absent_values_are_not_found(self):
        for sequence in sorted_sequences():
            end = len(sequence) - 1
            present = set(sequence)
            for value in range(-25, 25):
                if value not in present:
                    assert binary_search(sequence, value, 0, end) is None

    def test_deep_recursion_on_large_input(self):
        """Depth is logarithmic, so large inputs stay far from the recursion limit."""
        sequence = list(range(1_000_000))
        assert binary_search(sequence, 765_432, 0, len(sequence) - 1) == 765_432


class TestPreconditions:
    def test_end_past_sequence(self):
        with pytest.raises(IndexError, match="out of bounds"):
            binary_search(NUMBERS, 8, 0, 11)

    def test_negative_start(self):
        with pytest.raises(IndexError, match="out of bounds"):
            binary_search(NUMBERS, 8, -1, 10)

    def test_end_below_empty_range(self):
        with pytest.raises(IndexError, match="out of bounds"):
            binary_search(NUMBERS, 8, 0, -2)

    def test_empty_sequence_whole_range(self):
        """The empty range [0, -1] is allowed even on an empty sequence."""
        assert binary_search([], 1, 0, -1) is None

    def test_iterative_checks_too(self):
        with pytest.raises(IndexError):
            binary_search_iterative(NUMBERS, 8, 0, 11)

    def test_trace_checks_too(self):
        with pytest.raises(IndexError):
            bisection_trace(NUMBERS, 8, 0, 11)


class TestSearchSorted:
    def test_empty_sequence(self):
        assert search_sorted([], 1) is None
        assert search_sorted(np.array([], dtype=int), 1) is None

    def test_whole_range(self):
        assert search_sorted(NUMBERS, 8) == 7
        assert search_sorted(NUMBERS, 12) is None


class TestVariantsAgree:
    def test_iterative_matches_recursive(self):
        for sequence in sorted_sequences(seed=1):
            end = len(sequence) - 1
            for value in range(-25, 25):
                assert binary_search_iterative(
                    sequence, value, 0, end
                ) == binary_search(sequence, value, 0, end)

    def test_trace_ends_on_result(self):
        for sequence in sorted_sequences(seed=2):
            end = len(sequence) - 1
            for value in range(-25, 25):
                steps = bisection_trace(sequence, value, 0, end)
                index = binary_search(sequence, value, 0, end)
                if index is None:
                    assert all(step.probe != value for step in steps)
                else:
                    assert steps[-1].mid == index

    def test_trace_of_demo(self):
        steps = bisection_trace(NUMBERS, 8, 0, 10)
        assert [step.mid for step in steps] == [5, 8, 6, 7]
        assert [(step.start, step.end) for step in steps] == [
            (0, 10),
            (6, 10),
            (6, 7),
            (7, 7),
        ]

    def test_trace_of_empty_range(self):
        assert bisection_trace(NUMBERS, 8, 4, 3) == ()


class TestIsNonDecreasing:
    def test_sorted(self):
        assert is_non_decreasing(NUMBERS)
        assert is_non_decreasing([1, 1, 2, 2])

    def test_unsorted(self):
        assert not is_non_decreasing([1, 3, 2])

    def test_trivial(self):
        assert is_non_decreasing([])
        assert is_non_decreasing([42])
