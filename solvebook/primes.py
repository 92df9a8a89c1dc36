"""Prime sieving and divisor sums."""

from __future__ import annotations

from itertools import compress
from math import isqrt


def sieve(n: int) -> list[int]:
    """Return every prime not greater than ``n``, in ascending order."""
    if n < 2:
        return []
    flags = bytearray([1]) * (n + 1)
    flags[0] = flags[1] = 0
    for p in range(2, isqrt(n) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return list(compress(range(n + 1), flags))


def sum_proper_divisors(n: int) -> int:
    """Return the sum of the divisors of ``n`` that are smaller than ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    total = 1
    for i in range(2, isqrt(n) + 1):
        if n % i == 0:
            j = n // i
            total += i if i == j else i + j
    return total