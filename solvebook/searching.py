"""Search puzzles: binary searches on answers, square sums, combinations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby
from math import isqrt


def _bouquets(bloom_day: Sequence[int], day: int, k: int) -> int:
    """Count bouquets of ``k`` adjacent flowers that have bloomed by ``day``."""
    return sum(
        len(list(run)) // k
        for bloomed, run in groupby(bloom_day, key=lambda d: d <= day)
        if bloomed
    )


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the fewest days to make ``m`` bouquets of ``k`` adjacent flowers, or -1."""
    n = len(bloom_day)
    if m * k > n:
        return -1
    latest = max(bloom_day)
    if m * k == n:
        return latest
    lo, hi = 1, latest
    while lo < hi:
        mid = (lo + hi) // 2
        if _bouquets(bloom_day, mid, k) < m:
            lo = mid + 1
        else:
            hi = mid
    return lo


def _placed(positions: Sequence[int], gap: int) -> int:
    """Count balls placed greedily with at least ``gap`` between neighbours."""
    count = 1
    last = positions[0]
    for pos in positions[1:]:
        if pos - last >= gap:
            count += 1
            last = pos
    return count


def max_distance(position: Iterable[int], m: int) -> int:
    """Return the largest minimum gap achievable when placing ``m`` balls."""
    positions = sorted(position)
    if not positions:
        raise ValueError("max_distance needs at least one position")
    lo, hi = 0, positions[-1] - positions[0]
    best = 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if _placed(positions, mid) < m:
            hi = mid - 1
        else:
            best = mid
            lo = mid + 1
    return best


def minimized_maximum(n: int, quantities: Sequence[int]) -> int:
    """Return the smallest possible largest share when spreading products over ``n`` stores."""
    top = max(quantities)
    if n == len(quantities):
        return top
    lo, hi = 1, top
    while lo < hi:
        mid = (lo + hi) // 2
        stores = sum(1 if q < mid else -(-q // mid) for q in quantities)
        if stores <= n:
            hi = mid
        else:
            lo = mid + 1
    return lo


def judge_square_sum(c: int) -> bool:
    """Tell whether ``c`` is the sum of two squares."""
    if c < 0:
        raise ValueError("c must not be negative")
    return any(isqrt(c - i * i) ** 2 == c - i * i for i in range(isqrt(c) + 1))


def last_remaining(n: int) -> int:
    """Return the number left after alternately removing every other number from 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    return 2 * (1 + n // 2 - last_remaining(n // 2))


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every non-decreasing combination of candidates, reused freely, summing to target."""
    pool = sorted(set(candidates))
    if pool and pool[0] <= 0:
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def extend(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        for offset, value in enumerate(pool[start:], start):
            if value > remaining:
                break
            chosen.append(value)
            extend(offset, remaining - value)
            chosen.pop()

    extend(0, target)
    return results