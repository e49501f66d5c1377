"""Subarrays, extremes, merges of sorted sets, matrix sums and subsequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "subarrays",
    "subarray_sums",
    "min_max",
    "sorted_symmetric_difference",
    "sorted_union",
    "add_matrices",
    "longest_nondecreasing_subsequence",
]


def subarrays(values: Iterable[T]) -> list[list[T]]:
    """Return every contiguous subarray, ordered by start and then by end."""
    items = list(values)
    return [items[start:end] for start in range(len(items)) for end in range(start + 1, len(items) + 1)]


def subarray_sums(values: Iterable[Any]) -> list[Any]:
    """Return the sum of every contiguous subarray, in the order of ``subarrays``."""
    items = list(values)
    return [total for start in range(len(items)) for total in accumulate(items[start:])]


def min_max(values: Iterable[T]) -> tuple[T, T]:
    """Return the smallest and the greatest value.

    Raises ValueError if there are no values.
    """
    iterator = iter(values)
    try:
        smallest = greatest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() needs at least one value") from None
    for value in iterator:
        if value < smallest:
            smallest = value
        if value > greatest:
            greatest = value
    return smallest, greatest


def sorted_symmetric_difference(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return, ascending, the items found in exactly one of the two collections.

    Both inputs are sorted first and then walked together; equal items at the
    two cursors cancel one another.
    """
    left, right = sorted(first), sorted(second)
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        elif right[j] < left[i]:
            result.append(right[j])
            j += 1
        else:
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def sorted_union(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the distinct items of both collections in ascending order."""
    left, right = sorted(first), sorted(second)
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        elif right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    union: list[T] = []
    for value in merged:
        if not union or union[-1] != value:
            union.append(value)
    return union


def add_matrices(first: Sequence[Sequence[Any]], second: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the element-wise sum of two matrices of the same order.

    Raises ValueError if the orders differ or a matrix is ragged.
    """
    if len(first) != len(second):
        raise ValueError("matrices must have the same number of rows")
    result: list[list[Any]] = []
    width = len(first[0]) if first else 0
    for row_a, row_b in zip(first, second):
        if len(row_a) != width or len(row_b) != width:
            raise ValueError("matrices must have the same number of columns in every row")
        result.append([a + b for a, b in zip(row_a, row_b)])
    return result


def longest_nondecreasing_subsequence(values: Iterable[Any]) -> int:
    """Return the length of the longest non-decreasing subsequence (0 when empty)."""
    items = list(values)
    lengths: list[int] = []
    for index, value in enumerate(items):
        best = max((lengths[j] for j in range(index) if items[j] <= value), default=0)
        lengths.append(best + 1)
    return max(lengths, default=0)