import pytest

from solvebook.primes import sieve, sum_proper_divisors


def test_sieve_small_range():
    assert sieve(10) == [2, 3, 5, 7]


@pytest.mark.parametrize("n", [-5, 0, 1])
def test_sieve_below_two_is_empty(n):
    assert sieve(n) == []


def test_sieve_includes_upper_bound():
    assert sieve(2) == [2]
    assert sieve(13)[-1] == 13


def test_sieve_entries_have_no_smaller_prime_factor():
    primes = sieve(200)
    with_smaller_factor = [
        p for p in primes if any(p % q == 0 for q in primes if q < p)
    ]
    assert with_smaller_factor == []
    assert len(primes) == 46


def test_sieve_misses_no_prime():
    primes = sieve(200)
    found = set(primes)
    missed = [
        n
        for n in range(2, 201)
        if n not in found and not any(n % p == 0 for p in primes if p < n)
    ]
    assert missed == []


def test_sieve_is_sorted_and_prefix_stable():
    small = sieve(50)
    large = sieve(500)
    assert small == sorted(small)
    assert large[: len(small)] == small


def test_amicable_pair():
    assert sum_proper_divisors(220) == 284
    assert sum_proper_divisors(284) == 220


@pytest.mark.parametrize("perfect", [6, 28, 496, 8128])
def test_perfect_numbers(perfect):
    assert sum_proper_divisors(perfect) == perfect


@pytest.mark.parametrize("p", [2, 3, 13, 97, 7919])
def test_primes_have_divisor_sum_one(p):
    assert sum_proper_divisors(p) == 1


def test_one_has_no_proper_divisors():
    assert sum_proper_divisors(1) == 0


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_rejected(n):
    with pytest.raises(ValueError):
        sum_proper_divisors(n)