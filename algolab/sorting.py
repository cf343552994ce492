"""Elementary comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def selection_sort(values: Iterable[T]) -> list[T]:
    """Repeatedly move the smallest unsorted element to the front."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort that stops early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bubble_sort_full(values: Iterable[T]) -> list[T]:
    """Bubble sort that always makes every pass."""
    items = list(values)
    for i in range(len(items) - 1, 0, -1):
        for j in range(i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort_swapping(values: Iterable[T]) -> list[T]:
    """Insertion sort that swaps each element leftwards into place."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Insertion sort that shifts larger elements right, then places the key."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items