"""Non-comparison sorts and a three-way merge sort.

Every function returns a new sequence and leaves its argument untouched.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "counting_sort_chars",
    "radix_sort",
    "bin_radix_sort",
    "three_way_merge_sort",
    "three_way_merge_sort_descending",
]

_CHAR_RANGE = 255


def counting_sort_chars(text: str) -> str:
    """Return the characters of ``text`` in code order, sorted by counting.

    Raises ValueError for characters whose code is above 255.
    """
    counts = [0] * (_CHAR_RANGE + 1)
    for char in text:
        code = ord(char)
        if code > _CHAR_RANGE:
            raise ValueError(f"character {char!r} is outside the range 0..{_CHAR_RANGE}")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts) if count)


def _check_non_negative(values: Sequence[int]) -> None:
    for value in values:
        if value < 0:
            raise ValueError(f"radix sort accepts only non-negative integers, got {value!r}")


def _counting_pass(values: list[int], place: int) -> list[int]:
    counts = [0] * 10
    for value in values:
        counts[(value // place) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(values)
    for value in reversed(values):
        digit = (value // place) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by least-significant-digit radix sort in base 10."""
    values = list(items)
    if not values:
        return values
    _check_non_negative(values)
    largest = max(values)
    place = 1
    while largest // place > 0:
        values = _counting_pass(values, place)
        place *= 10
    return values


def bin_radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by distributing them into ten digit bins per pass."""
    values = list(items)
    if not values:
        return values
    _check_non_negative(values)
    passes = len(str(max(values))) if max(values) else 0
    for exponent in range(passes):
        divisor = 10**exponent
        bins: list[deque[int]] = [deque() for _ in range(10)]
        for value in values:
            bins[(value // divisor) % 10].append(value)
        values = [value for bucket in bins for value in bucket]
    return values


def _merge_three(parts: list[list[Any]], before: Callable[[Any, Any], bool]) -> list[Any]:
    positions = [0] * len(parts)
    merged: list[Any] = []
    while True:
        chosen = None
        for index, part in enumerate(parts):
            if positions[index] >= len(part):
                continue
            if chosen is None or not before(parts[chosen][positions[chosen]], part[positions[index]]):
                chosen = index
        if chosen is None:
            return merged
        merged.append(parts[chosen][positions[chosen]])
        positions[chosen] += 1


def _three_way(values: list[Any], before: Callable[[Any, Any], bool]) -> list[Any]:
    if len(values) < 2:
        return list(values)
    third = len(values) // 3
    first_cut, second_cut = third, 2 * third + 1
    parts = [
        _three_way(values[:first_cut], before),
        _three_way(values[first_cut:second_cut], before),
        _three_way(values[second_cut:], before),
    ]
    return _merge_three(parts, before)


def three_way_merge_sort(items: Iterable[T]) -> list[T]:
    """Sort ascending by splitting into three parts and merging them."""
    return _three_way(list(items), lambda a, b: a < b)


def three_way_merge_sort_descending(items: Iterable[T]) -> list[T]:
    """Sort descending by splitting into three parts and merging them."""
    return _three_way(list(items), lambda a, b: a > b)