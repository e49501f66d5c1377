"""Comparison sorts over lists of mutually comparable items.

Every function returns a new list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "heap_sort",
    "quick_sort",
    "merge_sort",
    "sort_descending",
    "dutch_flag_sort",
]


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending by repeated adjacent swaps, stopping once a pass swaps nothing."""
    result = list(items)
    for done in range(len(result)):
        swapped = False
        for j in range(len(result) - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending by inserting each item into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i
        while j > 0 and result[j - 1] > key:
            result[j] = result[j - 1]
            j -= 1
        result[j] = key
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending by moving the smallest remaining item to the front each step."""
    result = list(items)
    for step in range(len(result) - 1):
        smallest = min(range(step, len(result)), key=result.__getitem__)
        result[step], result[smallest] = result[smallest], result[step]
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending with an in-place binary max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending by quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


def merge_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending by top-down merge sort; equal items keep their order."""
    values = list(items)
    if len(values) < 2:
        return values
    middle = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def sort_descending(items: Iterable[T]) -> list[T]:
    """Return the items ordered from largest to smallest."""
    return sorted(items, reverse=True)


def dutch_flag_sort(items: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in a single three-way partitioning pass.

    Raises ValueError if any item is not 0, 1 or 2.
    """
    result = list(items)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        value = result[mid]
        if value == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            raise ValueError(f"dutch_flag_sort accepts only 0, 1 and 2, got {value!r}")
    return result