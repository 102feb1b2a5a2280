"""
Binary search over a non-decreasing integer sequence.

Functions:
    binary_search(sequence, target, start, end)           - Recursive search on [start, end]
    binary_search_iterative(sequence, target, start, end) - Same probes, no recursion
    search_sorted(sequence, target)                       - Whole-sequence search, empty-safe
    bisection_trace(sequence, target, start, end)         - Every probe the search makes
    is_non_decreasing(sequence)                           - Sortedness check

Sortedness is a precondition: the search functions never check it.
With duplicates, the returned index is whichever `mid` the bisection
hits first, not necessarily the first or last occurrence.
"""

import logging

import numpy as np

from localtypes import Index, SearchRange, SearchStep, SortedSequence

logger = logging.getLogger(__name__)


def _check_range(sequence: SortedSequence, start: Index, end: Index) -> SearchRange:
    """
    Validates the bounds of an initial call.

    Raises:
        IndexError: If a bound falls outside the sequence.
    """
    if start < 0 or end < -1 or end >= len(sequence):
        raise IndexError(
            f"Search range [{start}, {end}] out of bounds for length {len(sequence)}"
        )
    return SearchRange(start, end)


def _bisect(
    sequence: SortedSequence, target: int, start: Index, end: Index
) -> Index | None:
    if start > end:
        return None

    mid = (start + end) // 2
    logger.debug(f"Probe [{start}, {end}] mid={mid} value={sequence[mid]}")

    if sequence[mid] == target:
        return mid
    elif sequence[mid] < target:
        return _bisect(sequence, target, mid + 1, end)
    else:
        return _bisect(sequence, target, start, mid - 1)


def binary_search(
    sequence: SortedSequence, target: int, start: Index, end: Index
) -> Index | None:
    """
    Recursively searches `sequence[start:end + 1]` for `target`.

    Args:
        sequence: Non-decreasing sequence of integers
        target: Value to look for
        start: First index of the range (inclusive)
        end: Last index of the range (inclusive)

    Returns:
        An index `i` in [start, end] with `sequence[i] == target`, None otherwise.

    Raises:
        IndexError: If the range does not lie within the sequence.
    """
    _check_range(sequence, start, end)
    return _bisect(sequence, target, start, end)


def binary_search_iterative(
    sequence: SortedSequence, target: int, start: Index, end: Index
) -> Index | None:
    """Loop form of `binary_search`, probing the same indices in the same order."""
    start, end = _check_range(sequence, start, end)

    while start <= end:
        mid = (start + end) // 2
        if sequence[mid] == target:
            return mid
        elif sequence[mid] < target:
            start = mid + 1
        else:
            end = mid - 1

    return None


def search_sorted(sequence: SortedSequence, target: int) -> Index | None:
    """Searches the whole sequence. An empty sequence has nothing to find."""
    if len(sequence) == 0:
        return None
    return binary_search(sequence, target, 0, len(sequence) - 1)


def bisection_trace(
    sequence: SortedSequence, target: int, start: Index, end: Index
) -> tuple[SearchStep, ...]:
    """
    Records each probe `binary_search` performs.

    The last step is the hit when the target is found. An empty range
    yields no steps.
    """
    start, end = _check_range(sequence, start, end)
    steps: list[SearchStep] = []

    while start <= end:
        mid = (start + end) // 2
        probe = int(sequence[mid])
        steps.append(SearchStep(start, end, mid, probe))
        if probe == target:
            break
        elif probe < target:
            start = mid + 1
        else:
            end = mid - 1

    return tuple(steps)


def is_non_decreasing(sequence: SortedSequence) -> bool:
    """Whether every element is less than or equal to the next."""
    return bool(np.all(np.diff(np.asarray(sequence)) >= 0))


__all__ = [
    "binary_search",
    "binary_search_iterative",
    "search_sorted",
    "bisection_trace",
    "is_non_decreasing",
]
