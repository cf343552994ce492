import random

import pytest

from algolab.sorting import (
    bubble_sort,
    bubble_sort_full,
    insertion_sort,
    insertion_sort_swapping,
    selection_sort,
)


def test_source_example():
    data = [90, 10, 50, 60, 20]
    expected = [10, 20, 50, 60, 90]
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert bubble_sort_full(data) == expected
    assert insertion_sort_swapping(data) == expected
    assert insertion_sort(data) == expected


def test_does_not_modify_input():
    data = [90, 10, 50, 60, 20]
    original = list(data)
    selection_sort(data)
    bubble_sort(data)
    bubble_sort_full(data)
    insertion_sort_swapping(data)
    insertion_sort(data)
    assert data == original


@pytest.mark.parametrize("size", [0, 1, 2, 7, 50])
def test_random_lists(size):
    rng = random.Random(size)
    data = [rng.randint(-100, 100) for _ in range(size)]
    expected = sorted(data)
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert bubble_sort_full(data) == expected
    assert insertion_sort_swapping(data) == expected
    assert insertion_sort(data) == expected


def test_duplicates_and_reverse_order():
    data = [5, 5, 4, 3, 3, 2, 1, 1]
    expected = [1, 1, 2, 3, 3, 4, 5, 5]
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert bubble_sort_full(data) == expected
    assert insertion_sort_swapping(data) == expected
    assert insertion_sort(data) == expected


def test_accepts_iterables_and_strings():
    words = ("pear", "apple", "fig")
    expected = ["apple", "fig", "pear"]
    assert selection_sort(iter(words)) == expected
    assert bubble_sort(iter(words)) == expected
    assert bubble_sort_full(iter(words)) == expected
    assert insertion_sort_swapping(iter(words)) == expected
    assert insertion_sort(iter(words)) == expected


def test_already_sorted_is_unchanged():
    data = list(range(20))
    assert selection_sort(data) == data
    assert bubble_sort(data) == data
    assert bubble_sort_full(data) == data
    assert insertion_sort_swapping(data) == data
    assert insertion_sort(data) == data


def test_incomparable_raises_selection():
    with pytest.raises(TypeError):
        selection_sort([1, "a", 2])


def test_incomparable_raises_bubble():
    with pytest.raises(TypeError):
        bubble_sort([1, "a", 2])


def test_incomparable_raises_bubble_full():
    with pytest.raises(TypeError):
        bubble_sort_full([1, "a", 2])


def test_incomparable_raises_insertion_swapping():
    with pytest.raises(TypeError):
        insertion_sort_swapping([1, "a", 2])


def test_incomparable_raises_insertion():
    with pytest.raises(TypeError):
        insertion_sort([1, "a", 2])