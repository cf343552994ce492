import math

import pytest

from algolab.maths import (
    count_digits,
    count_digits_log,
    count_divisible_digits,
    divisors,
    gcd_alternating,
    gcd_brute_force,
    gcd_euclid,
    is_armstrong,
    is_palindrome_number,
    is_palindrome_number_half,
    is_prime,
    primes_up_to,
    reverse_number,
    sieve_of_eratosthenes,
)


@pytest.mark.parametrize("n", [0, 7, 10, 99, 12345, -4567, 10**12])
def test_count_digits_matches_string_length(n):
    assert count_digits(n) == len(str(abs(n)))


@pytest.mark.parametrize("n", [0, 1, 9, 10, 99, 100, 123456789])
def test_count_digits_log_agrees_with_division(n):
    assert count_digits_log(n) == count_digits(n)


def test_count_digits_log_rejects_negative():
    with pytest.raises(ValueError):
        count_digits_log(-5)


@pytest.mark.parametrize("n", [1, 11, 111, 1111])
def test_count_divisible_digits_all_ones(n):
    assert count_divisible_digits(n) == len(str(n))


def test_count_divisible_digits_zero_digits_skipped():
    assert count_divisible_digits(1001) == count_divisible_digits(11)
    assert count_divisible_digits(0) == 0


def test_count_divisible_digits_sign_ignored():
    assert count_divisible_digits(-1234) == count_divisible_digits(1234)


@pytest.mark.parametrize("n", [1, 12, 12345, 987654321, -321])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


def test_reverse_number_keeps_sign():
    assert reverse_number(-12) == -reverse_number(12)
    assert reverse_number(0) == 0


def test_reverse_number_drops_trailing_zeros():
    assert reverse_number(1200) == reverse_number(12)


def test_palindrome_variants_agree():
    for n in range(-20, 2000):
        assert is_palindrome_number(n) == is_palindrome_number_half(n)


def test_palindrome_negative_is_false():
    assert not is_palindrome_number(-121)
    assert not is_palindrome_number_half(-121)


def test_palindrome_matches_reversed_string():
    for n in (0, 121, 1221, 12321, 123, 10, 1000021):
        assert is_palindrome_number(n) == (str(n) == str(n)[::-1])


def test_armstrong_numbers_below_thousand():
    found = [n for n in range(1, 1000) if is_armstrong(n)]
    assert found == [1, 2, 3, 4, 5, 6, 7, 8, 9, 153, 370, 371, 407]


def test_armstrong_negative_is_false():
    assert not is_armstrong(-153)


@pytest.mark.parametrize("n", [1, 2, 12, 16, 36, 97, 100, 360])
def test_divisors_invariants(n):
    found = divisors(n)
    assert found == sorted(set(found))
    assert found[0] == 1 and found[-1] == n
    assert all(n % d == 0 for d in found)
    assert all(n // d in found for d in found)
    assert len(found) == sum(1 for d in range(1, n + 1) if n % d == 0)


@pytest.mark.parametrize("n", [0, -6])
def test_divisors_of_non_positive_is_empty(n):
    assert divisors(n) == []


def test_is_prime_matches_divisor_count():
    for n in range(-5, 500):
        assert is_prime(n) == (n > 1 and divisors(n) == [1, n])


@pytest.mark.parametrize("limit", [-3, 0, 1, 2, 3, 10, 97, 500])
def test_sieve_matches_trial_division(limit):
    assert sieve_of_eratosthenes(limit) == primes_up_to(limit)


def test_sieve_small_limits_are_empty():
    assert sieve_of_eratosthenes(1) == []
    assert primes_up_to(1) == []


def test_primes_up_to_are_all_prime_and_complete():
    primes = primes_up_to(200)
    assert all(is_prime(p) for p in primes)
    assert [n for n in range(201) if is_prime(n)] == primes


@pytest.mark.parametrize(
    "a,b", [(12, 18), (17, 5), (100, 75), (7, 7), (1, 9), (48, 180)]
)
def test_gcd_variants_match_math_gcd(a, b):
    expected = math.gcd(a, b)
    assert gcd_brute_force(a, b) == expected
    assert gcd_euclid(a, b) == expected
    assert gcd_alternating(a, b) == expected


def test_gcd_with_zero():
    assert gcd_euclid(0, 9) == 9
    assert gcd_euclid(9, 0) == 9
    assert gcd_alternating(0, 9) == 9
    assert gcd_alternating(9, 0) == 9


def test_gcd_brute_force_without_positive_minimum_is_one():
    assert gcd_brute_force(0, 5) == 1