import random

import pytest

from algoshelf.sorting import (
    bubble_sort,
    dutch_flag_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    sort_descending,
)


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(size)] for size in (0, 1, 2, 3, 10, 57, 200)]


def test_selection_example():
    data = [20, 12, 10, 15, 2]
    expected = [2, 10, 12, 15, 20]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected


def test_heap_example():
    data = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected


def test_negative_values():
    data = [-2, 3, 4, -1, 5, -12, 6, 1, 3]
    expected = [-12, -2, -1, 1, 3, 3, 4, 5, 6]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected


@pytest.mark.parametrize("data", _random_lists())
def test_matches_builtin_sort(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected


def test_input_is_not_mutated():
    data = [15, 10, 99, 53, 36]
    original = list(data)
    expected = [10, 15, 36, 53, 99]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected
    assert data == original


def test_already_sorted_and_reversed():
    data = list(range(500))
    assert bubble_sort(data) == data
    assert insertion_sort(data) == data
    assert selection_sort(data) == data
    assert heap_sort(data) == data
    assert quick_sort(data) == data
    assert merge_sort(data) == data
    assert bubble_sort(reversed(data)) == data
    assert insertion_sort(reversed(data)) == data
    assert selection_sort(reversed(data)) == data
    assert heap_sort(reversed(data)) == data
    assert quick_sort(reversed(data)) == data
    assert merge_sort(reversed(data)) == data


def test_accepts_any_iterable():
    expected = ["a", "b", "c", "d"]
    assert bubble_sort(iter("dcba")) == expected
    assert insertion_sort(iter("dcba")) == expected
    assert selection_sort(iter("dcba")) == expected
    assert heap_sort(iter("dcba")) == expected
    assert quick_sort(iter("dcba")) == expected
    assert merge_sort(iter("dcba")) == expected


def test_merge_sort_is_stable():
    class Keyed:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __le__(self, other):
            return self.key <= other.key

        def __lt__(self, other):
            return self.key < other.key

    data = [Keyed(k, i) for i, k in enumerate([3, 1, 3, 2, 1, 3])]
    result = merge_sort(data)
    assert [item.key for item in result] == [1, 1, 2, 3, 3, 3]
    assert [item.tag for item in result] == [1, 4, 3, 0, 2, 5]


def test_sort_descending_example():
    data = [2, 4, 9, 6, 3, 8, 3, 1]
    assert sort_descending(data) == [9, 8, 6, 4, 3, 3, 2, 1]


def test_sort_descending_empty():
    assert sort_descending([]) == []


def test_dutch_flag_example():
    data = [0, 1, 1, 0, 1, 2, 1, 2, 0, 0, 0, 1]
    assert dutch_flag_sort(data) == sorted(data)


@pytest.mark.parametrize("data", [[], [2], [2, 2, 0], [1, 0], [2, 1, 0, 2, 1, 0]])
def test_dutch_flag_small_cases(data):
    assert dutch_flag_sort(data) == sorted(data)


def test_dutch_flag_rejects_other_values():
    with pytest.raises(ValueError):
        dutch_flag_sort([0, 3, 1])


def test_dutch_flag_does_not_mutate():
    data = [2, 0, 1]
    assert dutch_flag_sort(data) == [0, 1, 2]
    assert data == [2, 0, 1]