# algolab

A collection of classic introductory algorithms, written as small plain
Python functions and classes that return values instead of printing them.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `algolab.basics`: `data_type_size`, `grade`, `adult_status`,
  `job_status`, `day_name`, `calculate_area` for a `Shape` (circle or
  rectangle), `calculate_sum` and `find_max`. Unknown type names, marks
  above 100, day numbers outside 1 to 7, unknown shapes and an empty
  sequence for `find_max` raise `ValueError`.
- `algolab.maths`: `count_digits`, `count_digits_log`,
  `count_divisible_digits`, `reverse_number`, `is_palindrome_number`,
  `is_palindrome_number_half`, `is_armstrong`, `divisors`, `is_prime`,
  `primes_up_to`, `sieve_of_eratosthenes`, and three GCD functions:
  `gcd_brute_force`, `gcd_euclid` and `gcd_alternating`.
- `algolab.recursion`: `repeat_message`, `numbers_ascending`,
  `numbers_descending`, `sum_first_n`, `sum_first_n_accumulated`,
  `factorial`, `reverse_two_pointer`, `reverse_one_pointer`,
  `is_palindrome`, `is_palindrome_single_pointer`, and the Fibonacci
  functions `fibonacci_recursive`, `fibonacci_iterative` and
  `fibonacci_memo`.
- `algolab.hashing`: `count_frequency` and `frequency_report` for numbers
  0 to 9, and `count_queries` for numbers 0 to 12. Values outside those
  ranges raise `ValueError`.
- `algolab.sorting`: `selection_sort`, `bubble_sort` (stops early once a
  pass makes no swap), `bubble_sort_full`, `insertion_sort_swapping` and
  `insertion_sort`. Each returns a new sorted list and leaves its input
  untouched.
- `algolab.containers`: a `PriorityQueue` (largest first, or smallest
  first with `min_heap=True`) with `push`, `pop`, `top` and `len()`; a
  sorted `Multiset` that keeps duplicates, with `add`, `discard_all`,
  `count`, `clear`, iteration and `len()`; and `lower_bound` /
  `upper_bound`, which return the smallest value not less than (or
  strictly greater than) a target in any iterable, or `None`.
- `algolab.patterns`: `render(number, n)` draws one of the numbered text
  patterns (triangles, pyramids, diamonds, letter pyramids and more) and
  `available_patterns()` lists their numbers, 1 to 22.

## Examples

```python
from algolab.maths import gcd_euclid, sieve_of_eratosthenes
from algolab.sorting import insertion_sort
from algolab.containers import PriorityQueue, lower_bound
from algolab.patterns import render

gcd_euclid(48, 18)                    # 6
sieve_of_eratosthenes(20)             # [2, 3, 5, 7, 11, 13, 17, 19]
insertion_sort([90, 10, 50, 60, 20])  # [10, 20, 50, 60, 90]
lower_bound({10, 20, 30, 40, 50}, 25) # 30

queue = PriorityQueue([30, 10, 20])
queue.top()                           # 30

print(render(7, 3), end="")
#   *
#  ***
# *****
```

## Command line

Print a pattern, giving its size and optionally its number (pattern 22
by default):

```
algolab-patterns 3 --pattern 7
```

If the size is left out, it is read from standard input after the prompt
`Enter :`. Run `algolab-patterns --help` to see the options and the
pattern numbers that are available.

## What it does not do

`algolab-patterns` is the only command. The other exercises are library
functions only: there are no interactive prompts for them, and `find_max`
does not time itself.