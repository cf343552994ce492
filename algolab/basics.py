"""Basic exercises: conditionals, lookups, areas, sums and a linear maximum scan."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

PI = 3.14159

ADULT_AGE = 18

_TYPE_SIZES = {
    "Integer": 4,
    "Long": 8,
    "Float": 4,
    "Double": 8,
    "Character": 1,
}

# Lower bounds of each grade band, checked from the top down.
_GRADE_BANDS = (
    (80, "A"),
    (60, "B"),
    (50, "C"),
    (45, "D"),
    (25, "E"),
)

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class Shape(IntEnum):
    """Shapes whose area can be calculated."""

    CIRCLE = 1
    RECTANGLE = 2


def data_type_size(type_name: str) -> int:
    """Return the size in bytes of a named data type."""
    try:
        return _TYPE_SIZES[type_name]
    except KeyError:
        raise ValueError(f"unknown data type: {type_name!r}") from None


def grade(marks: int) -> str:
    """Return the letter grade for marks up to 100."""
    if marks > 100:
        raise ValueError(f"marks out of range: {marks}")
    for lower, letter in _GRADE_BANDS:
        if marks >= lower:
            return letter
    return "F"


def adult_status(age: int) -> str:
    """Describe whether a person of the given age is an adult."""
    if age >= ADULT_AGE:
        category = "Adult"
    else:
        category = "Child"
    return f"You are {category}"


def job_status(age: int) -> str:
    """Describe job eligibility for the given age."""
    if age < 18:
        return "Not Eligible for Job"
    if age <= 57:
        if age >= 54:
            return "Eligible for Job, but Retirement Soon"
        return "Eligible for Job"
    return "Retirement Time"


def day_name(day: int) -> str:
    """Return the weekday name for a number from 1 (Monday) to 7 (Sunday)."""
    if not 1 <= day <= len(_DAY_NAMES):
        raise ValueError(f"invalid day number: {day}")
    return _DAY_NAMES[day - 1]


def calculate_area(shape: Shape | int, dims: Sequence[float]) -> float:
    """Area of a circle (radius) or a rectangle (length, breadth)."""
    try:
        kind = Shape(shape)
    except ValueError:
        raise ValueError(f"invalid shape: {shape!r}") from None
    if kind is Shape.CIRCLE:
        if len(dims) < 1:
            raise ValueError("a circle needs a radius")
        radius = dims[0]
        return PI * radius * radius
    if len(dims) < 2:
        raise ValueError("a rectangle needs a length and a breadth")
    length, breadth = dims[0], dims[1]
    return length * breadth


def calculate_sum(x: int, y: int) -> int:
    """Return the sum of two numbers."""
    return x + y


def find_max(values: Iterable[int]) -> int:
    """Return the largest value, scanning once from the first element."""
    iterator = iter(values)
    try:
        largest = next(iterator)
    except StopIteration:
        raise ValueError("find_max() of an empty sequence") from None
    for value in iterator:
        if value > largest:
            largest = value
    return largest