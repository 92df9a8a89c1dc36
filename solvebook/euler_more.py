"""Solutions to a second batch of classic number puzzles."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from itertools import combinations
from math import factorial

from solvebook.primes import sieve, sum_proper_divisors

_SMALL = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)
_UK_COINS = (1, 2, 5, 10, 20, 50, 100, 200)


def _spell(n: int) -> str:
    """Spell 1..1000 in British English without spaces or hyphens."""
    if n == 1000:
        return "onethousand"
    hundreds, rest = divmod(n, 100)
    words = f"{_SMALL[hundreds]}hundred" if hundreds else ""
    if rest:
        if hundreds:
            words += "and"
        if rest < 20:
            words += _SMALL[rest]
        else:
            words += _TENS[rest // 10] + _SMALL[rest % 10]
    return words


def number_letter_counts() -> int:
    """Return how many letters it takes to write out every number from 1 to 1000."""
    return sum(len(_spell(n)) for n in range(1, 1001))


def factorial_digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n`` factorial."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(map(int, str(factorial(n))))


def amicable_numbers_sum(limit: int) -> int:
    """Return the sum of the amicable numbers below ``limit`` whose partners are also below it."""
    if limit < 2:
        return 0
    sums = [0, 0] + [sum_proper_divisors(i) for i in range(2, limit)]
    return sum(
        i
        for i in range(2, limit)
        if sums[i] != i and 1 < sums[i] < limit and sums[sums[i]] == i
    )


def non_abundant_sums(limit: int) -> int:
    """Return the sum of the positive integers below ``limit`` that are not a sum of two abundant numbers."""
    if limit < 2:
        return 0
    divisor_sums = [0] * limit
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit, d):
            divisor_sums[multiple] += d
    abundant = [n for n in range(1, limit) if divisor_sums[n] > n]
    mask = 0
    for a in abundant:
        mask |= 1 << a
    reachable = 0
    for a in abundant:
        reachable |= mask << a
    bits = format(reachable, "b")[::-1] if reachable else ""
    return sum(n for n in range(1, limit) if n >= len(bits) or bits[n] == "0")


def distinct_powers() -> int:
    """Return how many distinct values a**b takes for a and b from 2 to 100."""
    return len({a**b for a in range(2, 101) for b in range(2, 101)})


def coin_sums(target: int, coins: Iterable[int] = _UK_COINS) -> int:
    """Return the number of ways to make ``target`` from any number of the given coins."""
    if target < 0:
        raise ValueError("target must not be negative")
    denominations = sorted(set(coins))
    if denominations and denominations[0] <= 0:
        raise ValueError("coins must be positive")
    ways = [1] + [0] * target
    for coin in denominations:
        for value in range(coin, target + 1):
            ways[value] += ways[value - coin]
    return ways[target]


def digit_factorials(limit: int) -> int:
    """Return the sum of the numbers from 3 to ``limit`` equal to the sum of their digits' factorials."""
    if limit < 3:
        return 0
    digit_fact = [factorial(d) for d in range(10)]
    sums = digit_fact[:]
    for n in range(10, limit + 1):
        sums.append(sums[n // 10] + digit_fact[n % 10])
    return sum(n for n in range(3, limit + 1) if sums[n] == n)


def circular_primes(limit: int) -> int:
    """Return how many primes below ``limit`` stay prime under every rotation of their digits."""
    if limit <= 2:
        return 0
    bound = 10 ** len(str(limit - 1))
    prime_set = set(sieve(bound))

    def circular(p: int) -> bool:
        text = str(p)
        return all(int(text[i:] + text[:i]) in prime_set for i in range(1, len(text)))

    return sum(1 for p in prime_set if p < limit and circular(p))


def prime_permutations() -> str:
    """Return the 12-digit concatenation of the other rising four-digit prime progression.

    Its three terms are permutations of each other and are equally spaced;
    the progression starting at 1487 is passed over.
    """
    groups: dict[str, list[int]] = defaultdict(list)
    for p in sieve(9999):
        if p >= 1000:
            groups["".join(sorted(str(p)))].append(p)
    for members in groups.values():
        present = set(members)
        for first, second in combinations(members, 2):
            third = 2 * second - first
            if first != 1487 and third in present:
                return f"{first}{second}{third}"
    raise LookupError("no such progression")


def consecutive_prime_sum(limit: int) -> int:
    """Return the prime below ``limit`` that is the sum of the most consecutive primes.

    Among equally long runs the one starting at the smallest prime wins.
    """
    primes = sieve(limit - 1)
    if not primes:
        raise ValueError("no prime below limit")
    prime_set = set(primes)
    prefix = [0]
    for p in primes:
        prefix.append(prefix[-1] + p)
    longest = max(length for length in range(1, len(primes) + 1) if prefix[length] < limit)
    for length in range(longest, 0, -1):
        for start in range(len(primes) - length + 1):
            total = prefix[start + length] - prefix[start]
            if total >= limit:
                break
            if total in prime_set:
                return total
    raise ValueError("no prime below limit")