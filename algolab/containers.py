"""Ordered containers: a priority queue, a multiset and set bound searches."""

from __future__ import annotations

import bisect
import heapq
from collections.abc import Iterable, Iterator
from typing import Any


class _Descending:
    """Wraps a value so that a min-heap orders it largest first."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: _Descending) -> bool:
        return other.value < self.value


class PriorityQueue:
    """Heap-backed priority queue; largest first unless min_heap is set."""

    def __init__(self, values: Iterable[Any] = (), *, min_heap: bool = False) -> None:
        self._min_heap = min_heap
        self._heap: list[Any] = [self._wrap(value) for value in values]
        heapq.heapify(self._heap)

    def _wrap(self, value: Any) -> Any:
        return value if self._min_heap else _Descending(value)

    def _unwrap(self, entry: Any) -> Any:
        return entry if self._min_heap else entry.value

    def push(self, value: Any) -> None:
        """Add a value."""
        heapq.heappush(self._heap, self._wrap(value))

    def pop(self) -> Any:
        """Remove and return the highest-priority value."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return self._unwrap(heapq.heappop(self._heap))

    def top(self) -> Any:
        """Return the highest-priority value without removing it."""
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._unwrap(self._heap[0])

    def __len__(self) -> int:
        return len(self._heap)


class Multiset:
    """Sorted collection that keeps duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = sorted(values)

    def add(self, value: Any) -> None:
        """Insert a value, keeping the collection sorted."""
        bisect.insort_right(self._items, value)

    def discard_all(self, value: Any) -> int:
        """Remove every occurrence of value and return how many were removed."""
        start = bisect.bisect_left(self._items, value)
        end = bisect.bisect_right(self._items, value)
        del self._items[start:end]
        return end - start

    def count(self, value: Any) -> int:
        """Number of occurrences of value."""
        return bisect.bisect_right(self._items, value) - bisect.bisect_left(
            self._items, value
        )

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __contains__(self, value: object) -> bool:
        index = bisect.bisect_left(self._items, value)
        return index < len(self._items) and self._items[index] == value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def lower_bound(values: Iterable[Any], target: Any) -> Any | None:
    """Smallest value not less than target, or None if there is none."""
    ordered = sorted(values)
    index = bisect.bisect_left(ordered, target)
    return ordered[index] if index < len(ordered) else None


def upper_bound(values: Iterable[Any], target: Any) -> Any | None:
    """Smallest value strictly greater than target, or None if there is none."""
    ordered = sorted(values)
    index = bisect.bisect_right(ordered, target)
    return ordered[index] if index < len(ordered) else None