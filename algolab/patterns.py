"""Text patterns of stars, numbers and letters drawn row by row."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator

DEFAULT_PATTERN = 22

_Rows = Callable[[int], Iterator[str]]


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _pattern1(n: int) -> Iterator[str]:
    for _ in range(n):
        yield "* " * n


def _pattern2(n: int) -> Iterator[str]:
    for i in range(n):
        yield "* " * (i + 1)


def _pattern3(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "".join(f"{j} " for j in range(1, i + 1))


def _pattern4(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield f"{i} " * i


def _pattern5(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "* " * (n - i + 1)


def _pattern6(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "".join(f"{j} " for j in range(1, n - i + 2))


def _pattern7(n: int) -> Iterator[str]:
    for i in range(n):
        yield " " * (n - i - 1) + "*" * (2 * i + 1)


def _pattern8(n: int) -> Iterator[str]:
    for i in range(n + 1):
        yield " " * i + "*" * max(2 * n - (2 * i + 1), 0)


def _pattern9(n: int) -> Iterator[str]:
    yield from _pattern7(n)
    yield from _pattern8(n)


def _pattern10(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "*" * i
    for i in range(1, n):
        yield "*" * (n - i)


def _pattern11(n: int) -> Iterator[str]:
    for i in range(n):
        digit = 1 if i % 2 == 0 else 0
        cells = []
        for _ in range(i + 1):
            cells.append(f"{digit} ")
            digit = 1 - digit
        yield "".join(cells)


def _pattern12(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        rising = "".join(f"{j} " for j in range(1, i + 1))
        falling = "".join(f"{j} " for j in range(i, 0, -1))
        yield rising + " " * max(2 * n - 2 * i, 0) + falling


def _pattern13(n: int) -> Iterator[str]:
    number = 1
    for i in range(n):
        cells = []
        for _ in range(i + 1):
            cells.append(f"{number} ")
            number += 1
        yield "".join(cells)


def _pattern14(n: int) -> Iterator[str]:
    for i in range(n):
        yield "".join(f"{_letter(j)} " for j in range(i + 1))


def _pattern15(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "".join(f"{_letter(j)} " for j in range(n - i + 1))


def _pattern16(n: int) -> Iterator[str]:
    for i in range(n):
        yield f"{_letter(i)} " * (i + 1)


def _pattern17(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        width = 2 * i - 1
        breakpoint_ = width // 2
        offset = 0
        cells = []
        for j in range(1, width + 1):
            cells.append(f"{_letter(offset)} ")
            offset += 1 if j <= breakpoint_ else -1
        yield " " * (n - i) + "".join(cells)


def _pattern18(n: int) -> Iterator[str]:
    for i in range(n):
        yield "".join(f"{_letter(n - 1 - j)} " for j in range(i + 1))


def _pattern19(n: int) -> Iterator[str]:
    for i in range(n):
        stars = "* " * (n - i)
        yield stars + " " * (2 * i) + stars
    for i in range(1, n + 1):
        stars = "* " * i
        yield stars + " " * (2 * n - 2 * i) + stars


def _pattern20(n: int) -> Iterator[str]:
    space = 2 * n - 2
    for i in range(1, 2 * n):
        star = i if i <= n else 2 * n - i
        stars = "* " * star
        yield stars + "  " * max(space, 0) + stars
        space += -2 if i < n else 2


def _pattern21(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "".join(
            "*" if i in (1, n) or j in (1, n) else " " for j in range(1, n + 1)
        )


def _pattern22(n: int) -> Iterator[str]:
    size = max(2 * n - 1, 0)
    last = size - 1
    for i in range(size):
        yield "".join(
            str(n - min(i, j, last - i, last - j)) for j in range(size)
        )


_PATTERNS: dict[int, _Rows] = {
    1: _pattern1,
    2: _pattern2,
    3: _pattern3,
    4: _pattern4,
    5: _pattern5,
    6: _pattern6,
    7: _pattern7,
    8: _pattern8,
    9: _pattern9,
    10: _pattern10,
    11: _pattern11,
    12: _pattern12,
    13: _pattern13,
    14: _pattern14,
    15: _pattern15,
    16: _pattern16,
    17: _pattern17,
    18: _pattern18,
    19: _pattern19,
    20: _pattern20,
    21: _pattern21,
    22: _pattern22,
}


def available_patterns() -> list[int]:
    """Numbers of all the patterns that can be rendered."""
    return sorted(_PATTERNS)


def render(number: int, n: int) -> str:
    """Render pattern `number` of size `n`, each row ending in a newline."""
    try:
        rows = _PATTERNS[number]
    except KeyError:
        raise ValueError(f"unknown pattern: {number}") from None
    return "".join(f"{row}\n" for row in rows(n))


def main(argv: list[str] | None = None) -> int:
    """Print a pattern; the size is read from input when not given."""
    parser = argparse.ArgumentParser(description="Draw a text pattern.")
    parser.add_argument("n", type=int, nargs="?", help="size of the pattern")
    parser.add_argument(
        "-p",
        "--pattern",
        type=int,
        default=DEFAULT_PATTERN,
        choices=available_patterns(),
        help="pattern number (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        n = int(input("Enter :"))
    print(render(args.pattern, n), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())