"""Frequency counting over small, bounded integer ranges."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

# Ranges the counting tables support.
FREQUENCY_RANGE = range(10)
QUERY_RANGE = range(13)


def _tally(values: Iterable[int], allowed: range) -> Counter[int]:
    counts: Counter[int] = Counter()
    for value in values:
        if value not in allowed:
            raise ValueError(
                f"value {value} outside {allowed.start}..{allowed.stop - 1}"
            )
        counts[value] += 1
    return counts


def count_frequency(values: Iterable[int]) -> dict[int, int]:
    """Count how often each number 0-9 occurs, in ascending order of number."""
    counts = _tally(values, FREQUENCY_RANGE)
    return {number: counts[number] for number in FREQUENCY_RANGE if counts[number]}


def frequency_report(values: Iterable[int]) -> list[str]:
    """One line per number that occurs, saying how many times it appears."""
    return [
        f"Number {number} appears {count} times."
        for number, count in count_frequency(values).items()
    ]


def count_queries(values: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Answer each query with the number of times it occurs in values (0-12)."""
    counts = _tally(values, QUERY_RANGE)
    answers = []
    for query in queries:
        if query not in QUERY_RANGE:
            raise ValueError(f"query {query} outside 0..12")
        answers.append(counts[query])
    return answers