import pytest

from solvebook.euler_more import (
    amicable_numbers_sum,
    circular_primes,
    coin_sums,
    consecutive_prime_sum,
    digit_factorials,
    distinct_powers,
    factorial_digit_sum,
    non_abundant_sums,
    number_letter_counts,
    prime_permutations,
)
from solvebook.primes import sieve, sum_proper_divisors


def test_number_letter_counts():
    assert number_letter_counts() == 21124


def test_factorial_digit_sum_small():
    assert factorial_digit_sum(0) == 1
    assert factorial_digit_sum(1) == 1


def test_factorial_digit_sum_multiple_of_nine():
    # n! for n >= 6 is divisible by 9, so its digit sum is too.
    for n in (6, 20, 100):
        assert factorial_digit_sum(n) % 9 == 0


def test_factorial_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        factorial_digit_sum(-1)


def test_amicable_numbers_none_below_first_pair():
    assert amicable_numbers_sum(220) == 0


def test_amicable_numbers_first_pair():
    partner = sum_proper_divisors(220)
    assert sum_proper_divisors(partner) == 220
    assert amicable_numbers_sum(partner + 1) == 220 + partner


def test_non_abundant_sums_small():
    assert non_abundant_sums(24) == sum(range(1, 24))
    assert non_abundant_sums(25) == sum(range(1, 24))
    assert non_abundant_sums(1) == 0


def test_non_abundant_sums_grows_with_limit():
    assert non_abundant_sums(200) <= non_abundant_sums(400)


def test_distinct_powers():
    result = distinct_powers()
    assert result == 9183
    assert result < 99 * 99


def test_coin_sums_uk():
    assert coin_sums(200) == 73682


def test_coin_sums_order_irrelevant():
    assert coin_sums(50, [200, 100, 50, 20, 10, 5, 2, 1]) == coin_sums(50)


def test_coin_sums_edges():
    assert coin_sums(0, [1, 2]) == 1
    assert coin_sums(7, [1]) == 1
    assert coin_sums(3, [2]) == 0


def test_coin_sums_rejects_bad_input():
    with pytest.raises(ValueError):
        coin_sums(5, [0, 1])
    with pytest.raises(ValueError):
        coin_sums(-1)


def test_digit_factorials():
    assert digit_factorials(145) == 145
    assert digit_factorials(144) == 0
    assert digit_factorials(2) == 0


def test_circular_primes():
    assert circular_primes(100) == 13
    assert circular_primes(10) == len(sieve(9))
    assert circular_primes(2) == 0


def test_circular_primes_monotonic():
    assert circular_primes(1000) >= circular_primes(100)


def test_prime_permutations_properties():
    result = prime_permutations()
    assert len(result) == 12
    terms = [int(result[i : i + 4]) for i in range(0, 12, 4)]
    primes = set(sieve(9999))
    assert all(t in primes for t in terms)
    assert terms[1] - terms[0] == terms[2] - terms[1] > 0
    assert len({"".join(sorted(str(t))) for t in terms}) == 1
    assert terms[0] != 1487


def test_prime_permutations_value():
    assert prime_permutations() == "296962999629"


def test_consecutive_prime_sum_hundred():
    assert consecutive_prime_sum(100) == 41


@pytest.mark.parametrize("limit", [10, 1000, 5000])
def test_consecutive_prime_sum_is_prime_below_limit(limit):
    result = consecutive_prime_sum(limit)
    assert result < limit
    assert result in set(sieve(limit))


def test_consecutive_prime_sum_requires_prime():
    with pytest.raises(ValueError):
        consecutive_prime_sum(2)