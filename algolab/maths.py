"""Number exercises: digits, palindromes, Armstrong numbers, divisors, primes and GCD."""

from __future__ import annotations

import math


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder of a / b with the quotient rounded toward zero."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def count_digits(n: int) -> int:
    """Count the decimal digits of n by repeated division; zero has one digit."""
    n = abs(n)
    if n == 0:
        return 1
    count = 0
    while n:
        n //= 10
        count += 1
    return count


def count_digits_log(n: int) -> int:
    """Count the decimal digits of a non-negative n with a base-10 logarithm."""
    if n < 0:
        raise ValueError(f"count_digits_log() needs a non-negative number, got {n}")
    if n == 0:
        return 1
    return int(math.log10(n)) + 1


def count_divisible_digits(n: int) -> int:
    """Count the non-zero digits of n that divide n exactly."""
    return sum(
        1
        for digit in map(int, str(abs(n)))
        if digit and n % digit == 0
    ) if n else 0


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of n, keeping its sign."""
    magnitude = abs(n)
    reverse = 0
    while magnitude > 0:
        magnitude, digit = divmod(magnitude, 10)
        reverse = reverse * 10 + digit
    return -reverse if n < 0 else reverse


def is_palindrome_number(n: int) -> bool:
    """True if n reads the same reversed; negative numbers never do."""
    if n < 0:
        return False
    return reverse_number(n) == n


def is_palindrome_number_half(n: int) -> bool:
    """Palindrome test that reverses only the lower half of the digits."""
    if n < 0:
        return False
    if n != 0 and n % 10 == 0:
        return False
    reversed_half = 0
    while n > reversed_half:
        n, digit = divmod(n, 10)
        reversed_half = reversed_half * 10 + digit
    # With an odd number of digits the middle one sits at the end of reversed_half.
    return n == reversed_half or n == reversed_half // 10


def is_armstrong(n: int) -> bool:
    """True if n equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    digits = str(n)
    power = len(digits)
    return sum(int(digit) ** power for digit in digits) == n


def divisors(n: int) -> list[int]:
    """All positive divisors of n in ascending order; empty when n < 1."""
    found: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            found.append(i)
            if i != n // i:
                found.append(n // i)
        i += 1
    return sorted(found)


def is_prime(n: int) -> bool:
    """Primality by trial division over 6k - 1 and 6k + 1."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def primes_up_to(limit: int) -> list[int]:
    """All primes from 2 to limit, testing each number separately."""
    return [number for number in range(2, limit + 1) if is_prime(number)]


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """All primes from 2 to limit, found with the Sieve of Eratosthenes."""
    if limit < 2:
        return []
    flags = [True] * (limit + 1)
    flags[0] = flags[1] = False
    i = 2
    while i * i <= limit:
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
        i += 1
    return [number for number, prime in enumerate(flags) if prime]


def gcd_brute_force(a: int, b: int) -> int:
    """Largest number from 1 to min(a, b) dividing both; 1 if there is none."""
    for candidate in range(min(a, b), 0, -1):
        if a % candidate == 0 and b % candidate == 0:
            return candidate
    return 1


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def gcd_alternating(a: int, b: int) -> int:
    """Euclidean GCD that reduces whichever of a and b is larger."""
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a