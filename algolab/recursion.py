"""Recursion exercises: counting, sums, factorials, reversal, palindromes and Fibonacci."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def _require_non_negative(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}() needs a non-negative number, got {n}")


def repeat_message(message: str, times: int) -> list[str]:
    """Return message repeated the given number of times, built recursively."""

    def step(current: int) -> list[str]:
        if current > times:
            return []
        return [message, *step(current + 1)]

    return step(1)


def numbers_ascending(n: int) -> list[int]:
    """Return the numbers 1 to n in ascending order."""
    _require_non_negative("numbers_ascending", n)
    if n == 0:
        return []
    numbers = numbers_ascending(n - 1)
    numbers.append(n)
    return numbers


def numbers_descending(n: int) -> list[int]:
    """Return the numbers n down to 1."""
    _require_non_negative("numbers_descending", n)
    if n == 0:
        return []
    return [n, *numbers_descending(n - 1)]


def sum_first_n(n: int) -> int:
    """Sum of 1 to n, computed from the value returned by the smaller case."""
    _require_non_negative("sum_first_n", n)
    if n == 0:
        return 0
    return n + sum_first_n(n - 1)


def sum_first_n_accumulated(n: int, current_sum: int = 0) -> int:
    """Sum of 1 to n added to current_sum, carried along as a parameter."""
    _require_non_negative("sum_first_n_accumulated", n)
    if n == 0:
        return current_sum
    return sum_first_n_accumulated(n - 1, current_sum + n)


def factorial(n: int) -> int:
    """n! computed recursively; any n of 1 or less gives 1."""
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def reverse_two_pointer(values: Iterable[T]) -> list[T]:
    """Reverse by swapping the outermost pair and recursing inwards."""
    items = list(values)

    def swap(left: int, right: int) -> None:
        if left >= right:
            return
        items[left], items[right] = items[right], items[left]
        swap(left + 1, right - 1)

    swap(0, len(items) - 1)
    return items


def reverse_one_pointer(values: Iterable[T]) -> list[T]:
    """Reverse by swapping position i with its mirror until the midpoint."""
    items = list(values)
    n = len(items)

    def swap(i: int) -> None:
        if i >= n // 2:
            return
        items[i], items[n - i - 1] = items[n - i - 1], items[i]
        swap(i + 1)

    swap(0)
    return items


def is_palindrome(text: Sequence[object]) -> bool:
    """True if text reads the same both ways, comparing from both ends inwards."""

    def check(start: int, end: int) -> bool:
        if start >= end:
            return True
        if text[start] != text[end]:
            return False
        return check(start + 1, end - 1)

    return check(0, len(text) - 1)


def is_palindrome_single_pointer(text: Sequence[object]) -> bool:
    """True if text reads the same both ways, using a single index."""
    n = len(text)

    def check(i: int) -> bool:
        if i >= n - i - 1:
            return True
        if text[i] != text[n - i - 1]:
            return False
        return check(i + 1)

    return check(0)


def fibonacci_recursive(n: int) -> int:
    """n-th Fibonacci number by plain recursion; n of 1 or less gives n."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_iterative(n: int) -> int:
    """n-th Fibonacci number by iteration; n of 1 or less gives n."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fibonacci_memo(n: int) -> int:
    """n-th Fibonacci number by recursion with memoised results."""
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)