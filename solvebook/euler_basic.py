"""Solutions to the first batch of classic number puzzles."""

from __future__ import annotations

from math import comb, isqrt, lcm, log

from solvebook.primes import sieve


def multiples_of_3_and_5(limit: int) -> int:
    """Return the sum of the numbers below ``limit`` divisible by 3 or 5."""
    return sum(i for i in range(1, limit) if i % 3 == 0 or i % 5 == 0)


def even_fibonacci_sum(limit: int) -> int:
    """Return the sum of the even Fibonacci terms (1, 2, 3, 5, ...) not above ``limit``."""
    a, b = 1, 2
    total = 0
    while b <= limit:
        if b % 2 == 0:
            total += b
        a, b = b, a + b
    return total


def largest_prime_factor(number: int) -> int:
    """Return the largest prime dividing ``number``."""
    if number < 2:
        raise ValueError("number must be at least 2")
    largest = 1
    n = number
    while n % 2 == 0:
        n //= 2
        largest = 2
    p = 3
    while p * p <= n:
        while n % p == 0:
            n //= p
            largest = p
        p += 2
    return n if n > 1 else largest


def largest_palindrome_product() -> int:
    """Return the largest palindrome that is a product of two three-digit numbers."""
    best = 0
    for i in range(999, 99, -1):
        if i * 999 <= best:
            break
        for j in range(999, i - 1, -1):
            product = i * j
            if product <= best:
                break
            text = str(product)
            if text == text[::-1]:
                best = product
                break
    return best


def smallest_multiple() -> int:
    """Return the smallest number divisible by every number from 1 to 20."""
    return lcm(*range(1, 21))


def sum_square_difference(n: int) -> int:
    """Return the square of the sum of 1..n minus the sum of their squares."""
    if n < 0:
        raise ValueError("n must not be negative")
    square_of_sum = (n * (n + 1) // 2) ** 2
    sum_of_squares = n * (n + 1) * (2 * n + 1) // 6
    return square_of_sum - sum_of_squares


def nth_prime(index: int) -> int:
    """Return the prime at zero-based ``index`` (index 0 is 2)."""
    if index < 0:
        raise ValueError("index must not be negative")
    count = index + 1
    if count < 6:
        bound = 15
    else:
        bound = int(count * (log(count) + log(log(count)))) + 1
    return sieve(bound)[index]


def special_pythagorean_triplet(total: int) -> int:
    """Return a*b*c for the Pythagorean triplet a < b < c with a + b + c == total."""
    for c in range(1, total):
        for b in range(1, c):
            a = total - b - c
            if 0 < a < b and a * a + b * b == c * c:
                return a * b * c
    raise ValueError(f"no Pythagorean triplet sums to {total}")


def summation_of_primes(limit: int) -> int:
    """Return the sum of the primes not greater than ``limit``."""
    return sum(sieve(limit))


def _divisor_count(n: int) -> int:
    count = 1
    p = 2
    while p * p <= n:
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        count *= exponent + 1
        p += 1
    if n > 1:
        count *= 2
    return count


def highly_divisible_triangular_number(divisors: int) -> int:
    """Return the first triangular number with more than ``divisors`` divisors."""
    n = 1
    while True:
        # n and n + 1 are coprime, so the divisor count splits over the halves.
        if n % 2 == 0:
            a, b = n // 2, n + 1
        else:
            a, b = n, (n + 1) // 2
        if _divisor_count(a) * _divisor_count(b) > divisors:
            return n * (n + 1) // 2
        n += 1


def longest_collatz_sequence(limit: int) -> int:
    """Return the start below ``limit`` whose Collatz chain takes the most steps.

    Ties go to the smallest start.
    """
    if limit < 3:
        raise ValueError("limit must be at least 3")
    steps = [0] * limit
    best_start = 0
    best_steps = 0
    for start in range(2, limit):
        path: list[int] = []
        n = start
        while n != 1 and (n >= limit or steps[n] == 0):
            path.append(n)
            n = n // 2 if n % 2 == 0 else 3 * n + 1
        count = steps[n]
        for value in reversed(path):
            count += 1
            if value < limit:
                steps[value] = count
        if steps[start] > best_steps:
            best_steps = steps[start]
            best_start = start
    return best_start


def lattice_paths(size: int) -> int:
    """Return the number of right/down routes through a ``size`` by ``size`` grid."""
    if size < 0:
        raise ValueError("size must not be negative")
    return comb(2 * size, size)


def power_digit_sum(exponent: int) -> int:
    """Return the sum of the decimal digits of 2 to the power ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return sum(map(int, str(2**exponent)))


__all__ = [
    "multiples_of_3_and_5",
    "even_fibonacci_sum",
    "largest_prime_factor",
    "largest_palindrome_product",
    "smallest_multiple",
    "sum_square_difference",
    "nth_prime",
    "special_pythagorean_triplet",
    "summation_of_primes",
    "highly_divisible_triangular_number",
    "longest_collatz_sequence",
    "lattice_paths",
    "power_digit_sum",
]

_ = isqrt